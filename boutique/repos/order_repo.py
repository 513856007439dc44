# boutique/repos/order_repo.py
from sqlalchemy import select
from sqlalchemy.orm import Session
from boutique.data.models.order import OrderModel


class OrderRepo:
    def __init__(self, db: Session):
        self.db = db

    def add_order(self, order: OrderModel) -> OrderModel:
        #commit laisse a l'appelant: la commande et le vidage du panier vont ensemble
        self.db.add(order)
        self.db.flush()
        return order

    def get_order(self, order_id: int) -> OrderModel | None:
        return self.db.get(OrderModel, order_id)

    def list_orders(self) -> list[OrderModel]:
        stmt = select(OrderModel).order_by(OrderModel.created_at.desc(), OrderModel.id.desc())
        return list(self.db.execute(stmt).scalars().all())

    def delete_order(self, order: OrderModel) -> None:
        self.db.delete(order)
        self.db.commit()

    def commit(self) -> None:
        self.db.commit()

    def refresh(self, order: OrderModel) -> None:
        self.db.refresh(order)

    def rollback(self) -> None:
        self.db.rollback()
