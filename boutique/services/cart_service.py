from decimal import Decimal
from typing import List

from sqlalchemy.orm import Session

from boutique.domain.cart import (
    require_variant,
    merge_line,
    set_quantity,
    remove_line,
    cart_count,
    compute_totals,
)
from boutique.domain.errors import NotFoundError, CooldownActiveError
from boutique.domain.schemas import CartLine, CartOut
from boutique.repos.browser_cart_repo import BrowserCartRepo
from boutique.repos.product_repo import ProductRepo
from boutique.repos.user_repo import UserRepo
from boutique.services.cart_events import CartEventPublisher
from boutique.services.cooldown_service import CooldownService
from boutique.utils.settings import ADD_COOLDOWN_SECONDS, DELIVERY_FEE
from boutique.utils.logging import get_logger

logger = get_logger(__name__)


class BrowserCartStore:
    """Panier anonyme, une ligne browser_carts par jeton de navigateur."""

    def __init__(self, db: Session):
        self.repo = BrowserCartRepo(db)

    def load(self, owner: str) -> List[CartLine]:
        cart = self.repo.get_by_token(owner)
        if not cart:
            return []
        return [CartLine.model_validate(item) for item in cart.items or []]

    def save(self, owner: str, lines: List[CartLine]) -> None:
        cart = self.repo.get_or_create(owner)
        cart.items = [line.model_dump(mode="json") for line in lines]


class AccountCartStore:
    """Panier du compte, champ `cart` de la ligne users (cle: e-mail)."""

    def __init__(self, db: Session):
        self.repo = UserRepo(db)

    def _user(self, owner: str):
        user = self.repo.get_by_email(owner)
        if not user:
            raise NotFoundError("Compte introuvable")
        return user

    def load(self, owner: str) -> List[CartLine]:
        return [CartLine.model_validate(item) for item in self._user(owner).cart or []]

    def save(self, owner: str, lines: List[CartLine]) -> None:
        self._user(owner).cart = [line.model_dump(mode="json") for line in lines]


class CartService:
    """
    Use case du panier (navigateur ou compte):
    query (get, count) lecture seule
    commands (add, set quantity, remove, clear) lisent, modifient et reecrivent tout le panier

    Pas de jeton de version: la derniere ecriture gagne.
    """

    def __init__(
        self,
        db: Session,
        cooldown: CooldownService,
        events: CartEventPublisher,
        cooldown_seconds: int = ADD_COOLDOWN_SECONDS,
        delivery_fee: Decimal = DELIVERY_FEE,
    ):
        self.db = db
        self.products = ProductRepo(db)
        self.stores = {
            "browser": BrowserCartStore(db),
            "account": AccountCartStore(db),
        }
        self.cooldown = cooldown
        self.events = events
        self.cooldown_seconds = cooldown_seconds
        self.delivery_fee = delivery_fee

    def _store(self, scope: str):
        store = self.stores.get(scope)
        if store is None:
            raise ValueError(f"Type de panier inconnu: {scope}")
        return store

    def _to_out(self, scope: str, owner: str, lines: List[CartLine]) -> CartOut:
        totals = compute_totals(lines, self.delivery_fee)
        return CartOut(
            scope=scope,
            owner=owner,
            items=lines,
            count=cart_count(lines),
            subtotal=totals.subtotal,
            delivery_fee=totals.delivery_fee,
            total=totals.total,
        )

    def _write(self, scope: str, owner: str, lines: List[CartLine]) -> CartOut:
        self._store(scope).save(owner, lines)
        self.db.commit()
        self.events.publish_count(scope, owner, cart_count(lines))
        return self._to_out(scope, owner, lines)

    #query
    def load_lines(self, scope: str, owner: str) -> List[CartLine]:
        return self._store(scope).load(owner)

    def get_cart(self, scope: str, owner: str) -> CartOut:
        return self._to_out(scope, owner, self.load_lines(scope, owner))

    def count(self, scope: str, owner: str) -> int:
        return cart_count(self.load_lines(scope, owner))

    #commands
    def add_product(
        self,
        scope: str,
        owner: str,
        product_id: int,
        selected_color: str | None = None,
    ) -> CartOut:
        product = self.products.get_product(product_id)
        if not product:
            raise NotFoundError("Produit introuvable")

        # sans couleur valide: rien n'est ecrit, aucune fenetre n'est ouverte
        color = require_variant(product, selected_color)
        lines = self.load_lines(scope, owner)

        acquired = self.cooldown.acquire(
            scope=scope,
            owner=owner,
            product_id=product_id,
            ttl=self.cooldown_seconds,
        )
        if not acquired:
            raise CooldownActiveError("Produit deja ajoute, patientez quelques secondes")

        try:
            merged = merge_line(lines, product, color)
            out = self._write(scope, owner, merged)
        except Exception as e:
            # l'ajout n'a pas eu lieu, on rouvre le bouton tout de suite
            logger.error(f"Erreur lors de l'ajout du produit {product_id}: {e}")
            self.db.rollback()
            self.cooldown.release(scope, owner, product_id)
            raise

        logger.info(f"Produit {product_id} ajoute au panier {scope}:{owner} (couleur: {color})")
        return out

    def set_quantity(self, scope: str, owner: str, product_id: int, quantity: int) -> CartOut:
        lines = self.load_lines(scope, owner)
        if quantity < 1:
            logger.info(f"Quantite {quantity} ignoree pour le produit {product_id}")
            return self._to_out(scope, owner, lines)

        logger.info(f"Quantite du produit {product_id} -> {quantity} ({scope}:{owner})")
        return self._write(scope, owner, set_quantity(lines, product_id, quantity))

    def remove_product(self, scope: str, owner: str, product_id: int) -> CartOut:
        lines = self.load_lines(scope, owner)

        logger.info(f"Retrait du produit {product_id} du panier {scope}:{owner}")
        return self._write(scope, owner, remove_line(lines, product_id))

    def clear(self, scope: str, owner: str, commit: bool = True) -> None:
        """Vide le panier. Avec commit=False l'ecriture rejoint la transaction en cours
        et l'appelant publie le compteur avec announce_cleared apres son commit."""
        self._store(scope).save(owner, [])
        if commit:
            self.db.commit()
            self.announce_cleared(scope, owner)

        logger.info(f"Panier {scope}:{owner} vide")

    def announce_cleared(self, scope: str, owner: str) -> None:
        self.events.publish_count(scope, owner, 0)
