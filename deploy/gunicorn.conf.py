"""gunicorn settings for the employee requests service.

Run:
    gunicorn -c deploy/gunicorn.conf.py wsgi:app
"""

import multiprocessing
import os

bind = os.environ.get("BIND", "0.0.0.0:8000")

# Requests are short DB round-trips; a few threaded workers per core is plenty.
workers = int(os.environ.get("WEB_CONCURRENCY", multiprocessing.cpu_count() * 2 + 1))
worker_class = "gthread"
threads = 2

timeout = 30

# stdout/stderr for docker/journalctl
accesslog = "-"
errorlog = "-"
loglevel = os.environ.get("LOG_LEVEL", "info").lower()
