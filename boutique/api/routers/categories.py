from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.orm import Session

from boutique.api.deps import require_admin
from boutique.data.database import get_db
from boutique.domain.errors import NotFoundError
from boutique.domain.schemas import CategoryIn, CategoryOut, MenuItem
from boutique.services.category_service import CategoryService

router = APIRouter(prefix="/categories", tags=["categories"])


@router.get("", response_model=list[CategoryOut])
def list_categories(db: Session = Depends(get_db)):
    return CategoryService(db).list_categories()


@router.get("/menu", response_model=list[MenuItem])
def menu(db: Session = Depends(get_db)):
    return CategoryService(db).menu()


@router.post("", response_model=CategoryOut, status_code=201, dependencies=[Depends(require_admin)])
def create_category(payload: CategoryIn, db: Session = Depends(get_db)):
    try:
        return CategoryService(db).create_category(payload)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.put("/{category_id}", response_model=CategoryOut, dependencies=[Depends(require_admin)])
def update_category(category_id: int, payload: CategoryIn, db: Session = Depends(get_db)):
    try:
        return CategoryService(db).update_category(category_id, payload)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.delete("/{category_id}", status_code=204, dependencies=[Depends(require_admin)])
def delete_category(category_id: int, db: Session = Depends(get_db)):
    try:
        CategoryService(db).delete_category(category_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return Response(status_code=204)
