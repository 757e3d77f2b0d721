"""Gunicorn configuration for production: ``gunicorn -c gunicorn_config.py wsgi:app``."""
import multiprocessing
import os

# Server socket
port = os.getenv("PORT", "8000")
bind = f"0.0.0.0:{port}"
backlog = 2048

# One request per worker thread; all shared state lives in Redis
workers_env = os.getenv("GUNICORN_WORKERS")
workers = int(workers_env) if workers_env else min(multiprocessing.cpu_count() * 2 + 1, 9)
threads = int(os.getenv("GUNICORN_THREADS", "4"))
worker_class = "gthread"
timeout = 30
keepalive = 5
graceful_timeout = 30

# Logging
accesslog = "-"
errorlog = "-"
loglevel = os.getenv("GUNICORN_LOG_LEVEL", "info")
access_log_format = '%(h)s %(l)s %(u)s %(t)s "%(r)s" %(s)s %(b)s "%(f)s" "%(a)s" %(D)s'
capture_output = True

# Process naming
proc_name = "library-api"

# Server mechanics
daemon = False
pidfile = None
