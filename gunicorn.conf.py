"""Gunicorn config for the Consulta API (gunicorn -c gunicorn.conf.py consulta.main:app)."""
import os

host = os.environ.get("CONSULTA_HOST", "0.0.0.0")
bind = f"{host}:{os.environ.get('PORT', '8000')}"

# Not preloaded: every worker fetches and holds its own copy of the three sheets
preload_app = False
worker_class = "uvicorn.workers.UvicornWorker"
workers = int(os.environ.get("WEB_CONCURRENCY", "2"))

# Worker boot waits on three sequential sheet downloads
_fetch_timeout = float(os.environ.get("CONSULTA_HTTP_TIMEOUT") or 20)
timeout = max(30, int(3 * _fetch_timeout) + 10)
graceful_timeout = 30

accesslog = "-"
errorlog = "-"
loglevel = os.environ.get("CONSULTA_LOG_LEVEL", "info").lower()


def post_worker_init(worker):
    worker.log.info("Worker %s ready, sheets from %s", worker.pid,
                    os.environ.get("CONSULTA_SHEET_URL", "the default spreadsheet"))
