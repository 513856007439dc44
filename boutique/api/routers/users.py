from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from boutique.data.database import get_db
from boutique.domain.errors import NotFoundError
from boutique.services.user_service import UserService
from boutique.domain.schemas import UserCreate, UserRead

router = APIRouter(prefix="/users", tags=["users"])

@router.post("", response_model=UserRead, status_code=201)
def create_user(payload: UserCreate, db: Session = Depends(get_db)):
    service = UserService(db)
    try:
        return service.create_user(payload)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

@router.get("/{email}", response_model=UserRead)
def get_user(email: str, db: Session = Depends(get_db)):
    service = UserService(db)
    try:
        return service.get_user(email)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
