from sqlalchemy import Column, Integer, String, Text

from boutique.data.database import Base


class TestimonialModel(Base):
    __tablename__ = "testimonials"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    stars = Column(Integer, nullable=False)
    feedback = Column(Text, nullable=False)
