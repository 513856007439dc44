from sqlalchemy import Column, Integer, String, JSON

from boutique.data.database import Base


class CategoryModel(Base):
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False, unique=True)
    subcategories = Column(JSON, nullable=False, default=list)
