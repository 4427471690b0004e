# gunicorn -c gunicorn.conf.py run:app

# Worker Configuration
workers = 2
worker_class = 'gthread'
threads = 8
timeout = 30
keepalive = 5

# Each worker builds its own application and service registry
preload_app = False

# Logging
loglevel = 'info'
accesslog = '-'
errorlog = '-'
