# boutique/services/cart_events.py
import json

import redis
from redis.exceptions import RedisError

from boutique.utils.retry import redis_retry
from boutique.utils.settings import REDIS_URL
from boutique.utils.logging import get_logger

logger = get_logger(__name__)


def count_channel(scope: str, owner: str) -> str:
    return f"cart-count:{scope}:{owner}"


class CartEventPublisher:
    """
    Publie le nombre de lignes du panier apres chaque ecriture.
    Les badges de navigation s'abonnent au canal au lieu de relire le panier.
    """

    def __init__(self, url: str | None = None):
        self.redis = redis.Redis.from_url(
            url or REDIS_URL,
            decode_responses=True,
        )

    @redis_retry()
    def _publish(self, channel: str, payload: str) -> int:
        return self.redis.publish(channel, payload)

    def publish_count(self, scope: str, owner: str, count: int) -> None:
        channel = count_channel(scope, owner)
        payload = json.dumps({"scope": scope, "owner": owner, "count": count})

        # le panier est deja enregistre: un echec redis ne doit pas l'annuler
        try:
            receivers = self._publish(channel, payload)
            logger.info(f"Cart count {count} published on {channel} ({receivers} subscribers)")
        except RedisError as e:
            logger.warning(f"Failed to publish cart count on {channel}: {e}")
