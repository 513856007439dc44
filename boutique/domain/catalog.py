# boutique/domain/catalog.py
"""
Regles pures de la grille produits: prix effectif, tri, pagination.

Les fonctions acceptent tout objet qui a les attributs d'un produit
(ProductOut ou ProductModel) et ne modifient jamais la liste recue.
"""
import unicodedata
from dataclasses import dataclass, replace
from decimal import Decimal
from typing import Any, Callable, Sequence

from boutique.utils.settings import PAGE_SIZE

DEFAULT_SORT = "recent"


def effective_price(product: Any) -> Decimal:
    #promo absente ou a zero -> prix de base
    return product.promo if product.promo else product.price


def _title_key(product: Any) -> str:
    # comparaison "locale": sans accents ni casse
    decomposed = unicodedata.normalize("NFKD", product.title)
    stripped = "".join(c for c in decomposed if not unicodedata.combining(c))
    return stripped.casefold()


def _created_at(product: Any):
    return product.created_at


def _sales(product: Any) -> int:
    return product.sales or 0


#cle -> (fonction de cle, ordre decroissant)
_SORTERS: dict[str, tuple[Callable[[Any], Any], bool]] = {
    "price_asc": (effective_price, False),
    "price_desc": (effective_price, True),
    "name_asc": (_title_key, False),
    "name_desc": (_title_key, True),
    "recent": (_created_at, True),
    "oldest": (_created_at, False),
    "best_selling": (_sales, True),
}

SORT_KEYS = tuple(_SORTERS)


def sort_products(products: Sequence[Any], sort_key: str) -> list:
    """
    Trie une copie de la liste selon la cle choisie.

    Le tri est stable (y compris en ordre decroissant): a cle egale l'ordre
    d'entree est conserve. Une cle inconnue renvoie l'ordre d'entree.
    """
    sorter = _SORTERS.get(sort_key)
    if sorter is None:
        return list(products)

    key, reverse = sorter
    return sorted(products, key=key, reverse=reverse)


def paginate(items: Sequence[Any], size: int = PAGE_SIZE) -> list[list]:
    """Decoupe en pages de `size`; la derniere garde le reste, 0 element -> 0 page."""
    if size < 1:
        raise ValueError("La taille de page doit etre >= 1")

    return [list(items[i:i + size]) for i in range(0, len(items), size)]


def clamp_page(page: int, page_count: int) -> int:
    # un filtre peut reduire le nombre de pages sous le curseur courant
    if 0 <= page < page_count:
        return page
    return 0


@dataclass(frozen=True)
class GridState:
    """
    Curseur de la grille: cle de tri et page courante.

    L'API est sans etat et recoit sort et page a chaque requete (seul with_page
    sert cote serveur); with_sort decrit la transition que le client applique
    quand l'utilisateur change de tri.
    """

    sort_key: str = DEFAULT_SORT
    page: int = 0

    def with_sort(self, sort_key: str) -> "GridState":
        # changer le tri invalide la position
        return GridState(sort_key=sort_key, page=0)

    def with_page(self, page: int, page_count: int) -> "GridState":
        return replace(self, page=clamp_page(page, page_count))


@dataclass(frozen=True)
class ListingFilter:
    """
    Descripteur d'une grille produits. Une seule vue parametree sert
    le magasin, les categories, sous-categories, promos et la recherche.
    """

    category: str | None = None
    subcategory: str | None = None
    promo_only: bool = False
    search: str | None = None

    def describe(self) -> str:
        parts = []
        if self.category:
            parts.append(f"category={self.category!r}")
        if self.subcategory:
            parts.append(f"subcategory={self.subcategory!r}")
        if self.promo_only:
            parts.append("promo")
        if self.search:
            parts.append(f"search={self.search!r}")
        return ", ".join(parts) or "all"
