# boutique/api/routers/listings.py
"""
Grilles produits adressees par URL: categorie, sous-categorie, promo, recherche.
Toutes passent par la meme vue parametree (ListingFilter + GridState).
"""
from urllib.parse import unquote

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from boutique.data.database import get_db
from boutique.domain.catalog import DEFAULT_SORT, GridState, ListingFilter
from boutique.domain.schemas import PageOut
from boutique.services.catalog_service import CatalogService
from boutique.utils.slugs import unslugify

router = APIRouter(tags=["listings"])


def _listing(db: Session, listing: ListingFilter, sort: str, page: int) -> PageOut:
    return CatalogService(db).list_page(listing, GridState(sort_key=sort, page=page))


@router.get("/category/{category}/products", response_model=PageOut)
def category_products(
    category: str,
    sort: str = Query(DEFAULT_SORT),
    page: int = Query(0),
    db: Session = Depends(get_db),
):
    return _listing(db, ListingFilter(category=unslugify(category)), sort, page)


@router.get("/category/{category}/{subcategory}/products", response_model=PageOut)
def subcategory_products(
    category: str,
    subcategory: str,
    sort: str = Query(DEFAULT_SORT),
    page: int = Query(0),
    db: Session = Depends(get_db),
):
    listing = ListingFilter(category=unslugify(category), subcategory=unslugify(subcategory))
    return _listing(db, listing, sort, page)


@router.get("/promo/products", response_model=PageOut)
def promo_products(
    sort: str = Query(DEFAULT_SORT),
    page: int = Query(0),
    db: Session = Depends(get_db),
):
    return _listing(db, ListingFilter(promo_only=True), sort, page)


@router.get("/search/{article}/products", response_model=PageOut)
def search_products(
    article: str,
    sort: str = Query(DEFAULT_SORT),
    page: int = Query(0),
    db: Session = Depends(get_db),
):
    # la recherche garde les tirets tels quels, seul l'encodage URL est retire
    return _listing(db, ListingFilter(search=unquote(article)), sort, page)
