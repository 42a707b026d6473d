"""Gunicorn configuration for production.

Run with: gunicorn -c gunicorn.conf.py 'zakatcore:create_app()'
"""
import os

# Server socket
bind = os.environ.get('BIND', '0.0.0.0:8080')

# Worker processes. The methodology registry is built once per worker at
# startup and only read afterwards, so sync workers need no coordination.
workers = int(os.environ.get('WEB_CONCURRENCY', '2'))
worker_class = 'sync'
timeout = 30
keepalive = 2

# Logging
accesslog = '-'
errorlog = '-'
loglevel = os.environ.get('LOG_LEVEL', 'info').lower()

# Process naming
proc_name = 'zakatcore'

# Server mechanics
daemon = False
pidfile = None
umask = 0
