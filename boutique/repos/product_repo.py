# boutique/repos/product_repo.py
from sqlalchemy import select, func
from sqlalchemy.orm import Session

from boutique.data.models.product import ProductModel
from boutique.domain.catalog import ListingFilter


class ProductRepo:
    def __init__(self, db: Session):
        self.db = db

    def list_products(self, listing: ListingFilter) -> list[ProductModel]:
        stmt = select(ProductModel)

        if listing.category:
            stmt = stmt.where(func.lower(ProductModel.category) == listing.category.lower())
        if listing.subcategory:
            stmt = stmt.where(func.lower(ProductModel.subcategory) == listing.subcategory.lower())
        if listing.promo_only:
            stmt = stmt.where(ProductModel.promo > 0)
        if listing.search:
            stmt = stmt.where(ProductModel.title.ilike(f"%{listing.search}%"))

        # ordre de lecture par defaut: du plus recent au plus ancien, puis par id
        stmt = stmt.order_by(ProductModel.created_at.desc(), ProductModel.id)
        return list(self.db.execute(stmt).scalars().all())

    def get_product(self, product_id: int) -> ProductModel | None:
        return self.db.get(ProductModel, product_id)

    def find_by_title(self, title: str) -> list[ProductModel]:
        stmt = (
            select(ProductModel)
            .where(func.lower(ProductModel.title) == title.lower())
            .order_by(ProductModel.id)
        )
        return list(self.db.execute(stmt).scalars().all())

    def create_product(self, product: ProductModel) -> ProductModel:
        self.db.add(product)
        self.db.commit()
        self.db.refresh(product)
        return product

    def update_product(self, product: ProductModel, data: dict) -> ProductModel:
        for field, value in data.items():
            setattr(product, field, value)
        self.db.commit()
        self.db.refresh(product)
        return product

    def delete_product(self, product: ProductModel) -> None:
        self.db.delete(product)
        self.db.commit()

    def add_sales(self, product_id: int, quantity: int) -> None:
        #pas de commit, fait partie de la transaction du checkout
        product = self.get_product(product_id)
        if product:
            product.sales = (product.sales or 0) + quantity
