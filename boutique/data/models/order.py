from sqlalchemy import Column, Integer, String, Text, DateTime, Numeric
from datetime import datetime, timezone

from boutique.data.database import Base

class OrderModel(Base):
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    phone = Column(String, nullable=False)
    address = Column(String, nullable=False)

    #lignes du panier serialisees en JSON, jamais modifiees apres creation
    items = Column(Text, nullable=False)
    total_price = Column(Numeric(10, 2), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))
