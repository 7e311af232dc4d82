"""Main entry point for the Flask application."""

import os
from src import create_app

if __name__ == "__main__":
    app = create_app()
    
    debug_mode = os.environ.get("FLASK_DEBUG", "False").lower() == "true"
    port = int(os.environ.get("PORT", 8080))
    
    app.run(
        debug=debug_mode,
        host="0.0.0.0",
        port=port
    )
