import redis

from boutique.utils.retry import redis_retry
from boutique.utils.settings import REDIS_URL
from boutique.utils.logging import get_logger

logger = get_logger(__name__)

#LUA compare et supprime en une operation atomique:
#on ne libere que la cle posee par ce meme ajout
_RELEASE_LUA = """
if redis.call('GET', KEYS[1]) == ARGV[1] then
    return redis.call('DEL', KEYS[1])
else
    return 0
end
"""


class CooldownService:
    """
    -fenetre anti double-clic sur "ajouter au panier"
    -une cle redis par (panier, produit) avec expiration
    -liberation anticipee si l'ajout echoue
    """

    def __init__(self, url: str | None = None):
        self.redis = redis.Redis.from_url(
            url or REDIS_URL,
            decode_responses=True,
        )

    @staticmethod
    def _key(scope: str, owner: str, product_id: int) -> str:
        return f"cart:{scope}:{owner}:product:{product_id}:cooldown"

    @redis_retry()
    def acquire(self, scope: str, owner: str, product_id: int, ttl: int) -> bool:
        key = self._key(scope, owner, product_id)
        logger.info(f"Acquire cooldown {key} for {ttl}s")
        #SET cle "owner" NX EX 3 -> False tant que la fenetre est ouverte
        return bool(self.redis.set(name=key, value=owner, nx=True, ex=ttl))

    @redis_retry()
    def release(self, scope: str, owner: str, product_id: int) -> bool:
        key = self._key(scope, owner, product_id)
        logger.info(f"Release cooldown {key}")
        res = self.redis.eval(_RELEASE_LUA, 1, key, owner)
        return bool(res)
