from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, DateTime, JSON

from boutique.data.database import Base


class BrowserCartModel(Base):
    """Panier anonyme d'un navigateur, identifie par un jeton opaque."""

    __tablename__ = "browser_carts"

    id = Column(Integer, primary_key=True)
    token = Column(String, nullable=False, unique=True, index=True)
    items = Column(JSON, nullable=False, default=list)
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
