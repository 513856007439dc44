# boutique/api/routers/products.py
from fastapi import APIRouter, Depends, Header, HTTPException, Query, Response
from sqlalchemy.orm import Session

from boutique.api.deps import require_admin
from boutique.data.database import get_db
from boutique.domain.catalog import DEFAULT_SORT, GridState, ListingFilter
from boutique.domain.errors import NotFoundError
from boutique.domain.schemas import PageOut, ProductIn, ProductOut, ProductUpdate, SortOption
from boutique.services.catalog_service import CatalogService
from boutique.utils.i18n import resolve_language

router = APIRouter(prefix="/products", tags=["products"])


def get_service(db: Session):
    return CatalogService(db)


@router.get("", response_model=PageOut)
def list_products(
    sort: str = Query(DEFAULT_SORT),
    page: int = Query(0),
    category: str | None = Query(None),
    subcategory: str | None = Query(None),
    promo: bool = Query(False),
    q: str | None = Query(None),
    db: Session = Depends(get_db),
):
    svc = get_service(db)
    listing = ListingFilter(category=category, subcategory=subcategory, promo_only=promo, search=q)
    return svc.list_page(listing, GridState(sort_key=sort, page=page))


@router.get("/sort-options", response_model=list[SortOption])
def sort_options(accept_language: str | None = Header(default=None)):
    return CatalogService.sort_options(resolve_language(accept_language))


@router.get("/{slug}", response_model=ProductOut)
def get_product(slug: str, db: Session = Depends(get_db)):
    svc = get_service(db)
    try:
        return svc.get_by_slug(slug)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("", response_model=ProductOut, status_code=201, dependencies=[Depends(require_admin)])
def create_product(payload: ProductIn, db: Session = Depends(get_db)):
    svc = get_service(db)
    return svc.create_product(payload)


@router.put("/{product_id}", response_model=ProductOut, dependencies=[Depends(require_admin)])
def update_product(product_id: int, payload: ProductUpdate, db: Session = Depends(get_db)):
    svc = get_service(db)
    try:
        return svc.update_product(product_id, payload)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/{product_id}", status_code=204, dependencies=[Depends(require_admin)])
def delete_product(product_id: int, db: Session = Depends(get_db)):
    svc = get_service(db)
    try:
        svc.delete_product(product_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return Response(status_code=204)
