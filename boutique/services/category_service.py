# boutique/services/category_service.py
from sqlalchemy.orm import Session

from boutique.data.models.category import CategoryModel
from boutique.domain.errors import NotFoundError
from boutique.domain.schemas import CategoryIn, CategoryOut, MenuItem, MenuLink
from boutique.repos.category_repo import CategoryRepo
from boutique.utils.slugs import category_href
from boutique.utils.logging import get_logger

logger = get_logger(__name__)


def _validate(payload: CategoryIn) -> tuple[str, list[str]]:
    # les tirets servent de separateurs dans les URLs
    name = payload.name.strip()
    if not name:
        raise ValueError("Le nom de la catégorie est obligatoire.")
    if "-" in name:
        raise ValueError("Le nom de la catégorie ne peut pas contenir de tirets (-)")

    subcategories = [s.strip() for s in payload.subcategories if s.strip()]
    if any("-" in s for s in subcategories):
        raise ValueError("Les sous-catégories ne peuvent pas contenir de tirets (-)")

    return name, subcategories


class CategoryService:
    def __init__(self, db: Session):
        self.repo = CategoryRepo(db)

    def list_categories(self) -> list[CategoryOut]:
        return [CategoryOut.model_validate(c) for c in self.repo.list_categories()]

    def menu(self) -> list[MenuItem]:
        """Entrees de navigation: une par categorie, sous-menu si sous-categories."""
        items = []
        for category in self.repo.list_categories():
            subcategories = category.subcategories or []
            items.append(
                MenuItem(
                    label=category.name,
                    href=category_href(category.name),
                    dropdown=[
                        MenuLink(label=sub, href=category_href(category.name, sub))
                        for sub in subcategories
                    ] or None,
                )
            )
        return items

    def create_category(self, payload: CategoryIn) -> CategoryOut:
        name, subcategories = _validate(payload)
        created = self.repo.create_category(CategoryModel(name=name, subcategories=subcategories))

        logger.info(f"Categorie {created.id} creee: {name} ({len(subcategories)} sous-categories)")
        return CategoryOut.model_validate(created)

    def update_category(self, category_id: int, payload: CategoryIn) -> CategoryOut:
        category = self.repo.get_category(category_id)
        if not category:
            raise NotFoundError("Catégorie introuvable")

        name, subcategories = _validate(payload)
        updated = self.repo.update_category(category, name, subcategories)

        logger.info(f"Categorie {category_id} modifiee")
        return CategoryOut.model_validate(updated)

    def delete_category(self, category_id: int) -> None:
        category = self.repo.get_category(category_id)
        if not category:
            raise NotFoundError("Catégorie introuvable")

        self.repo.delete_category(category)
        logger.info(f"Categorie {category_id} supprimee")
