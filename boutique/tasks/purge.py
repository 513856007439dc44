# boutique/tasks/purge.py
from datetime import datetime, timezone, timedelta

from boutique.celery_worker import celery_app
from boutique.data.database import SessionLocal
from boutique.repos.browser_cart_repo import BrowserCartRepo
from boutique.utils.settings import BROWSER_CART_TTL_SECONDS
from boutique.utils.logging import get_logger

logger = get_logger(__name__)


def purge_browser_carts(db, ttl_seconds: int = BROWSER_CART_TTL_SECONDS, now: datetime | None = None) -> int:
    """Supprime les paniers anonymes sans ecriture depuis ttl_seconds."""
    now = now or datetime.now(timezone.utc)
    cutoff = now - timedelta(seconds=ttl_seconds)

    deleted = BrowserCartRepo(db).delete_stale(cutoff)
    logger.info(f"Purged {deleted} browser carts untouched since {cutoff.isoformat()}")
    return deleted


@celery_app.task(name="boutique.tasks.purge.purge_browser_carts_task")
def purge_browser_carts_task(ttl_seconds: int = BROWSER_CART_TTL_SECONDS):
    logger.info("Purge browser carts task started")

    db = SessionLocal()
    try:
        return purge_browser_carts(db, ttl_seconds)
    finally:
        db.close()
