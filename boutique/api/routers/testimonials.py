from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.orm import Session

from boutique.api.deps import require_admin
from boutique.data.database import get_db
from boutique.domain.errors import NotFoundError
from boutique.domain.schemas import TestimonialIn, TestimonialOut
from boutique.services.testimonial_service import TestimonialService

router = APIRouter(prefix="/testimonials", tags=["testimonials"])


@router.get("", response_model=list[TestimonialOut])
def list_testimonials(db: Session = Depends(get_db)):
    return TestimonialService(db).list_testimonials()


@router.post("", response_model=TestimonialOut, status_code=201, dependencies=[Depends(require_admin)])
def create_testimonial(payload: TestimonialIn, db: Session = Depends(get_db)):
    return TestimonialService(db).create_testimonial(payload)


@router.put("/{testimonial_id}", response_model=TestimonialOut, dependencies=[Depends(require_admin)])
def update_testimonial(testimonial_id: int, payload: TestimonialIn, db: Session = Depends(get_db)):
    try:
        return TestimonialService(db).update_testimonial(testimonial_id, payload)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/{testimonial_id}", status_code=204, dependencies=[Depends(require_admin)])
def delete_testimonial(testimonial_id: int, db: Session = Depends(get_db)):
    try:
        TestimonialService(db).delete_testimonial(testimonial_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return Response(status_code=204)
