"""Gunicorn WSGI server configuration."""

import os

# Server socket
bind = f"0.0.0.0:{os.environ.get('PORT', 8080)}"
backlog = 2048

# Worker processes
workers = int(os.environ.get("GUNICORN_WORKERS", 1))
worker_class = "sync"
worker_connections = 1000
timeout = int(os.environ.get("GUNICORN_TIMEOUT", 30))
keepalive = 2

# Restart workers after this many requests, to help control memory usage
max_requests = 1000
max_requests_jitter = 50

# Logging
accesslog = "-"
errorlog = "-"
loglevel = os.environ.get("GUNICORN_LOG_LEVEL", "info")

# Process naming
proc_name = "gunicorn"

# Worker timeouts
timeout = 30
graceful_timeout = 30

# SSL (if needed)
# keyfile = None
# certfile = None

# Threading
threads = int(os.environ.get("GUNICORN_THREADS", 2))

# Pre-load app for better memory usage
preload_app = True
