from sqlalchemy import select
from sqlalchemy.orm import Session

from boutique.data.models.testimonial import TestimonialModel


class TestimonialRepo:
    def __init__(self, db: Session):
        self.db = db

    def list_testimonials(self) -> list[TestimonialModel]:
        return list(self.db.execute(select(TestimonialModel).order_by(TestimonialModel.id)).scalars().all())

    def get_testimonial(self, testimonial_id: int) -> TestimonialModel | None:
        return self.db.get(TestimonialModel, testimonial_id)

    def save(self, testimonial: TestimonialModel) -> TestimonialModel:
        self.db.add(testimonial)
        self.db.commit()
        self.db.refresh(testimonial)
        return testimonial

    def delete_testimonial(self, testimonial: TestimonialModel) -> None:
        self.db.delete(testimonial)
        self.db.commit()
