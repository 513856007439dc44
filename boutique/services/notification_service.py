# boutique/services/notification_service.py
from boutique.celery_worker import celery_app
from boutique.utils.logging import get_logger

logger = get_logger(__name__)


class NotificationService:
    """
    Notifications de la boutique.
    Passe par Celery pour ne pas bloquer le checkout.
    """

    @staticmethod
    def send_order_notification(order_id: int, customer_name: str, total: str):
        """
        Previent la boutique qu'une nouvelle commande attend d'etre preparee.
        """
        send_order_notification_task.delay(order_id, customer_name, total)


@celery_app.task(name="boutique.services.notification_service.send_order_notification_task")
def send_order_notification_task(order_id: int, customer_name: str, total: str):
    """
    Tache Celery: journalise la nouvelle commande pour l'equipe.
    """
    logger.info(f"[NOTIFICATION] Nouvelle commande {order_id} de {customer_name}: {total} Dt")

    return {"order_id": order_id, "status": "sent"}
