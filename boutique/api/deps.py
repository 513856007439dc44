# boutique/api/deps.py
from fastapi import Depends, Header, HTTPException
from sqlalchemy.orm import Session

from boutique.data.database import get_db
from boutique.services.cart_events import CartEventPublisher
from boutique.services.cart_service import CartService
from boutique.services.cooldown_service import CooldownService
from boutique.services.order_service import OrderService
from boutique.utils import settings


def get_cooldown() -> CooldownService:
    return CooldownService()


def get_events() -> CartEventPublisher:
    return CartEventPublisher()


def get_cart_service(
    db: Session = Depends(get_db),
    cooldown: CooldownService = Depends(get_cooldown),
    events: CartEventPublisher = Depends(get_events),
) -> CartService:
    return CartService(db=db, cooldown=cooldown, events=events)


def get_order_service(
    db: Session = Depends(get_db),
    cart_service: CartService = Depends(get_cart_service),
) -> OrderService:
    return OrderService(db, cart_service)


def require_admin(x_admin_key: str | None = Header(default=None)):
    admin_key = settings.ADMIN_API_KEY
    if not admin_key:
        if settings.ADMIN_AUTH_DISABLED:
            return True
        # cle oubliee au deploiement: on refuse plutot que d'ouvrir l'admin
        raise HTTPException(status_code=401, detail="Clé admin non configurée")
    if x_admin_key != admin_key:
        raise HTTPException(status_code=401, detail="Clé admin invalide")
    return True
