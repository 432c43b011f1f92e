import multiprocessing
import os

# Port comes from the environment (PORT), 8080 otherwise
port = os.getenv("PORT") or "8080"
bind = f"0.0.0.0:{port}"
wsgi_app = "momokey_api.wsgi:application"

cpu_count = multiprocessing.cpu_count()
max_workers = 10
workers = min(cpu_count * 2 + 1, max_workers)

# Each request makes at most two MoMo calls, each bounded by MOMO_REQUEST_TIMEOUT
timeout = 60
keepalive = 5
graceful_timeout = 30

loglevel = "info"
errorlog = "-"
accesslog = "-"

worker_class = "sync"
