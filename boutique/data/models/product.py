# boutique/data/models/product.py
from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime, Numeric, JSON

from boutique.data.database import Base


class ProductModel(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True)
    title = Column(String, nullable=False, index=True)
    description = Column(Text, nullable=False, default="")

    price = Column(Numeric(10, 2), nullable=False)
    promo = Column(Numeric(10, 2), nullable=True)

    image_urls = Column(JSON, nullable=False, default=list)
    colors = Column(JSON, nullable=True)
    status = Column(Boolean, nullable=False, default=True)

    category = Column(String, nullable=True, index=True)
    subcategory = Column(String, nullable=True, index=True)

    sales = Column(Integer, nullable=True, default=0)
    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))
