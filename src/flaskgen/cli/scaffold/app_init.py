"""Main application module."""

import os
import json
from flask import Flask, jsonify


def load_config(path: str, instance_id: str) -> dict:
    """load instance specific section from `path`
    or use `default` if not found
    """
    with open(path, encoding="utf8") as file:
        configs = json.load(file)
        return configs.get(instance_id) or configs[next(iter(configs))]


def get_project_id(service_account_path: str) -> str:
    """Get the GCP project ID from service account or environment variable."""
    project_id = None
    if os.path.exists(service_account_path):
        try:
            with open(service_account_path, "r", encoding="utf8") as f:
                service_account_info = json.load(f)
                project_id = service_account_info.get("project_id")
        except Exception as e:  # pylint: disable=broad-except
            print(f"Warning: Could not read service account file: {e}")
    return os.environ.get("PROJECT_ID", project_id or "minute-dev")


def load_instance_config(config_path: str, project_id: str) -> dict:
    """Load instance-specific config from file."""
    if not os.path.exists(config_path):
        print(f"Warning: Config file not found at {config_path}")
        return {}
    try:
        return load_config(path=config_path, instance_id=project_id)
    except Exception as e:  # pylint: disable=broad-except
        print(f"Warning: Could not load config from {config_path}: {e}")
        return {}


def configure_app(app: Flask):
    """Load configuration and apply it to the Flask app."""

    base_dir = os.path.dirname(__file__)
    service_account_path = os.path.join(base_dir, "secrets/service_account_key.json")
    config_path = os.path.join(base_dir, "config/config.json")

    project_id = get_project_id(service_account_path)
    loaded_config = load_instance_config(config_path, project_id)
    app.config.update(loaded_config)


def register_blueprints_and_routes(app: Flask):
    """Register blueprints and define routes for the Flask app."""

    @app.route("/", methods=["GET", "POST"])
    def index():
        """Root endpoint."""
        return jsonify({"message": "App is up and running."}), 200

    @app.route("/health", methods=["GET"])
    def health():
        """Health check endpoint."""
        return jsonify({"status": "healthy"}), 200


def create_app():
    """Create and configure the Flask application."""
    app = Flask(__name__)

    configure_app(app)

    register_blueprints_and_routes(app)

    return app
