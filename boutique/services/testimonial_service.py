from sqlalchemy.orm import Session

from boutique.data.models.testimonial import TestimonialModel
from boutique.domain.errors import NotFoundError
from boutique.domain.schemas import TestimonialIn, TestimonialOut
from boutique.repos.testimonial_repo import TestimonialRepo


class TestimonialService:
    def __init__(self, db: Session):
        self.repo = TestimonialRepo(db)

    def list_testimonials(self) -> list[TestimonialOut]:
        return [TestimonialOut.model_validate(t) for t in self.repo.list_testimonials()]

    def create_testimonial(self, payload: TestimonialIn) -> TestimonialOut:
        created = self.repo.save(TestimonialModel(**payload.model_dump()))
        return TestimonialOut.model_validate(created)

    def update_testimonial(self, testimonial_id: int, payload: TestimonialIn) -> TestimonialOut:
        testimonial = self.repo.get_testimonial(testimonial_id)
        if not testimonial:
            raise NotFoundError("Avis introuvable")

        testimonial.name = payload.name
        testimonial.stars = payload.stars
        testimonial.feedback = payload.feedback
        return TestimonialOut.model_validate(self.repo.save(testimonial))

    def delete_testimonial(self, testimonial_id: int) -> None:
        testimonial = self.repo.get_testimonial(testimonial_id)
        if not testimonial:
            raise NotFoundError("Avis introuvable")
        self.repo.delete_testimonial(testimonial)
