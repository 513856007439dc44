import json

from redis.exceptions import ConnectionError as RedisConnectionError

from boutique.services.cart_events import CartEventPublisher, count_channel
from boutique.services.cooldown_service import CooldownService


class StubRedis:
    def __init__(self, fail_publish=False):
        self.values = {}
        self.calls = []
        self.fail_publish = fail_publish

    def set(self, name, value, nx=False, ex=None):
        self.calls.append(("set", name, value, nx, ex))
        if nx and name in self.values:
            return None
        self.values[name] = value
        return True

    def eval(self, script, numkeys, key, value):
        self.calls.append(("eval", key, value))
        if self.values.get(key) == value:
            del self.values[key]
            return 1
        return 0

    def publish(self, channel, payload):
        self.calls.append(("publish", channel, payload))
        if self.fail_publish:
            raise RedisConnectionError("redis down")
        return 1


def _cooldown(stub):
    svc = CooldownService(url="redis://localhost:6379/0")
    svc.redis = stub
    return svc


def _publisher(stub):
    pub = CartEventPublisher(url="redis://localhost:6379/0")
    pub.redis = stub
    return pub


def test_cooldown_blocks_second_add_within_window():
    stub = StubRedis()
    svc = _cooldown(stub)

    assert svc.acquire("browser", "tok-1", 7, ttl=3) is True
    assert svc.acquire("browser", "tok-1", 7, ttl=3) is False

    name = "cart:browser:tok-1:product:7:cooldown"
    assert stub.calls[0] == ("set", name, "tok-1", True, 3)


def test_cooldown_is_keyed_per_cart_and_product():
    svc = _cooldown(StubRedis())

    assert svc.acquire("browser", "tok-1", 7, ttl=3)
    assert svc.acquire("browser", "tok-1", 8, ttl=3)
    assert svc.acquire("account", "tok-1", 7, ttl=3)


def test_cooldown_release_reopens_window():
    svc = _cooldown(StubRedis())
    svc.acquire("browser", "tok-1", 7, ttl=3)

    assert svc.release("browser", "tok-1", 7) is True
    assert svc.acquire("browser", "tok-1", 7, ttl=3) is True


def test_publish_count_sends_json_payload():
    stub = StubRedis()

    _publisher(stub).publish_count("account", "a@b.tn", 3)

    _, channel, payload = stub.calls[0]
    assert channel == count_channel("account", "a@b.tn") == "cart-count:account:a@b.tn"
    assert json.loads(payload) == {"scope": "account", "owner": "a@b.tn", "count": 3}


def test_publish_failure_is_logged_not_raised():
    stub = StubRedis(fail_publish=True)

    _publisher(stub).publish_count("browser", "tok-1", 1)

    # 3 tentatives avant abandon
    assert [c[0] for c in stub.calls] == ["publish"] * 3
