# boutique/repos/browser_cart_repo.py
from datetime import datetime

from sqlalchemy import select, delete
from sqlalchemy.orm import Session

from boutique.data.models.browser_cart import BrowserCartModel


class BrowserCartRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_by_token(self, token: str) -> BrowserCartModel | None:
        stmt = select(BrowserCartModel).where(BrowserCartModel.token == token)
        return self.db.execute(stmt).scalar_one_or_none()

    def get_or_create(self, token: str) -> BrowserCartModel:
        cart = self.get_by_token(token)
        if cart is None:
            cart = BrowserCartModel(token=token, items=[])
            self.db.add(cart)
        return cart

    def delete_stale(self, older_than: datetime) -> int:
        result = self.db.execute(
            delete(BrowserCartModel).where(BrowserCartModel.updated_at < older_than)
        )
        self.db.commit()
        return result.rowcount
