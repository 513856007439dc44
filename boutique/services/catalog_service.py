# boutique/services/catalog_service.py

from sqlalchemy.orm import Session

from boutique.data.models.product import ProductModel
from boutique.domain.catalog import GridState, ListingFilter, sort_products, paginate, SORT_KEYS
from boutique.domain.errors import NotFoundError
from boutique.domain.schemas import ProductIn, ProductUpdate, ProductOut, PageOut, SortOption
from boutique.repos.product_repo import ProductRepo
from boutique.utils.i18n import sort_labels
from boutique.utils.slugs import unslugify
from boutique.utils.settings import PAGE_SIZE
from boutique.utils.logging import get_logger

logger = get_logger(__name__)


class CatalogService:
    """
    Use case du catalogue:
    query - grilles (magasin, categorie, sous-categorie, promo, recherche) et fiche produit
    commands - creation, modification, suppression (admin)
    """

    def __init__(self, db: Session, page_size: int = PAGE_SIZE):
        self.repo = ProductRepo(db)
        self.page_size = page_size

    #query
    def list_page(self, listing: ListingFilter, state: GridState) -> PageOut:
        rows = self.repo.list_products(listing)
        #validation des lignes une seule fois, a la frontiere
        products = [ProductOut.model_validate(row) for row in rows]

        ordered = sort_products(products, state.sort_key)
        pages = paginate(ordered, self.page_size)
        state = state.with_page(state.page, len(pages))

        logger.info(
            f"Listing [{listing.describe()}] sort={state.sort_key}: "
            f"{len(products)} products, page {state.page + 1}/{max(len(pages), 1)}"
        )

        return PageOut(
            items=pages[state.page] if pages else [],
            page=state.page,
            pages=len(pages),
            total=len(products),
            sort=state.sort_key,
        )

    def get_by_slug(self, slug: str) -> ProductOut:
        title = unslugify(slug)
        matches = self.repo.find_by_title(title)

        if not matches:
            raise NotFoundError("Produit introuvable")

        if len(matches) > 1:
            # titre non unique: la fiche affiche le plus ancien
            logger.warning(f"{len(matches)} products share the slug {slug!r}, using id {matches[0].id}")

        return ProductOut.model_validate(matches[0])

    def get_product(self, product_id: int) -> ProductOut:
        product = self.repo.get_product(product_id)
        if not product:
            raise NotFoundError("Produit introuvable")
        return ProductOut.model_validate(product)

    @staticmethod
    def sort_options(language: str) -> list[SortOption]:
        labels = sort_labels(language)
        return [SortOption(value=key, label=labels[key]) for key in SORT_KEYS]

    #commands
    def create_product(self, payload: ProductIn) -> ProductOut:
        product = ProductModel(**payload.model_dump(), sales=0)
        created = self.repo.create_product(product)

        logger.info(f"Produit {created.id} cree: {created.title}")
        return ProductOut.model_validate(created)

    def update_product(self, product_id: int, payload: ProductUpdate) -> ProductOut:
        product = self.repo.get_product(product_id)
        if not product:
            raise NotFoundError("Produit introuvable")

        data = payload.model_dump(exclude_unset=True)
        updated = self.repo.update_product(product, data)

        logger.info(f"Produit {product_id} modifie: {sorted(data)}")
        return ProductOut.model_validate(updated)

    def delete_product(self, product_id: int) -> None:
        product = self.repo.get_product(product_id)
        if not product:
            raise NotFoundError("Produit introuvable")

        self.repo.delete_product(product)
        logger.info(f"Produit {product_id} supprime")
