# boutique/celery_worker.py
from celery import Celery

from boutique.utils.settings import (
    CELERY_BROKER_URL,
    CELERY_RESULT_BACKEND,
    CELERY_ALWAYS_EAGER,
    BROWSER_CART_TTL_SECONDS,
)

celery_app = Celery(
    "boutique",
    broker=CELERY_BROKER_URL,
    backend=CELERY_RESULT_BACKEND,
)

# les taches doivent etre importees pour etre enregistrees
celery_app.conf.imports = (
    "boutique.tasks.purge",
    "boutique.services.notification_service",
)

celery_app.conf.beat_schedule = {
    "purge-browser-carts-hourly": {
        "task": "boutique.tasks.purge.purge_browser_carts_task",
        "schedule": 3600.0,
        "kwargs": {"ttl_seconds": BROWSER_CART_TTL_SECONDS},
    },
}

celery_app.conf.timezone = "UTC"

# tests et dev sans broker: les taches s'executent dans le processus
celery_app.conf.task_always_eager = CELERY_ALWAYS_EAGER
