# boutique/services/order_service.py
import json

from sqlalchemy.orm import Session

from boutique.data.models.order import OrderModel
from boutique.domain.cart import compute_totals
from boutique.domain.errors import NotFoundError
from boutique.domain.schemas import OrderCreate, OrderOut, CartLine
from boutique.repos.order_repo import OrderRepo
from boutique.repos.product_repo import ProductRepo
from boutique.services.cart_service import CartService
from boutique.services.notification_service import NotificationService
from boutique.utils.logging import get_logger

logger = get_logger(__name__)

MISSING_FIELDS_MESSAGE = "Tous les champs sont obligatoires."
EMPTY_CART_MESSAGE = "Votre panier est vide."


class OrderService:
    """
    Service des commandes.
    Le checkout est une seule etape: la commande est enregistree et le panier vide
    dans la meme transaction.
    """

    def __init__(self, db: Session, cart_service: CartService, notification_service: NotificationService | None = None):
        self.repo = OrderRepo(db)
        self.products = ProductRepo(db)
        self.cart_service = cart_service
        self.notification_service = notification_service or NotificationService()

    @staticmethod
    def _to_out(order: OrderModel) -> OrderOut:
        return OrderOut(
            id=order.id,
            name=order.name,
            phone=order.phone,
            address=order.address,
            items=[CartLine.model_validate(item) for item in json.loads(order.items)],
            total_price=order.total_price,
            created_at=order.created_at,
        )

    def checkout(self, payload: OrderCreate) -> OrderOut:
        """
        Use Case: confirmation de commande.

        1. Verifie les champs de livraison et le panier
        2. Calcule le total (frais de livraison inclus)
        3. Enregistre la commande, compte les ventes, vide le panier
        4. Envoie la notification (async)
        """
        name, phone, address = payload.name.strip(), payload.phone.strip(), payload.address.strip()
        if not name or not phone or not address:
            raise ValueError(MISSING_FIELDS_MESSAGE)

        lines = self.cart_service.load_lines(payload.scope, payload.owner)
        if not lines:
            raise ValueError(EMPTY_CART_MESSAGE)

        totals = compute_totals(lines, self.cart_service.delivery_fee)

        order = OrderModel(
            name=name,
            phone=phone,
            address=address,
            items=json.dumps([line.model_dump(mode="json") for line in lines]),
            total_price=totals.total,
        )

        try:
            self.repo.add_order(order)
            for line in lines:
                self.products.add_sales(line.id, line.quantity)
            self.cart_service.clear(payload.scope, payload.owner, commit=False)
            self.repo.commit()
        except Exception as e:
            logger.error(f"Echec de la commande pour {payload.scope}:{payload.owner}: {e}")
            self.repo.rollback()
            raise

        self.repo.refresh(order)
        self.cart_service.announce_cleared(payload.scope, payload.owner)

        logger.info(f"Commande {order.id} creee ({len(lines)} lignes, total {totals.total} Dt)")

        self.notification_service.send_order_notification(order.id, order.name, str(order.total_price))

        return self._to_out(order)

    def list_orders(self) -> list[OrderOut]:
        return [self._to_out(order) for order in self.repo.list_orders()]

    def get_order(self, order_id: int) -> OrderOut:
        order = self.repo.get_order(order_id)
        if not order:
            raise NotFoundError("Commande introuvable")
        return self._to_out(order)

    def delete_order(self, order_id: int) -> None:
        order = self.repo.get_order(order_id)
        if not order:
            raise NotFoundError("Commande introuvable")

        self.repo.delete_order(order)
        logger.info(f"Commande {order_id} supprimee")
