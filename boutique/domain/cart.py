# boutique/domain/cart.py
"""
Fusion du panier et totaux du checkout.

Fonctions pures: elles renvoient une nouvelle liste de lignes, la
persistance et les notifications restent a la charge de l'appelant.
"""
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Sequence

from boutique.domain.schemas import CartLine
from boutique.utils.settings import DELIVERY_FEE

VARIANT_REQUIRED_MESSAGE = "Svp sélectionnez une couleur avant ajouter au panier."


class VariantRequiredError(ValueError):
    """Produit avec couleurs ajoute sans couleur valide."""


def require_variant(product: Any, selected_color: str | None) -> str | None:
    """
    Verifie qu'une couleur a ete choisie quand le produit en propose.
    Renvoie la couleur a retenir (None si le produit n'a pas de variantes).
    """
    colors = product.colors or []
    if not colors:
        return None

    if not selected_color or selected_color not in colors:
        raise VariantRequiredError(VARIANT_REQUIRED_MESSAGE)

    return selected_color


def snapshot_line(product: Any, selected_color: str | None) -> CartLine:
    return CartLine(
        id=product.id,
        title=product.title,
        price=product.price,
        promo=product.promo,
        image_urls=list(product.image_urls or []),
        colors=list(product.colors) if product.colors else None,
        quantity=1,
        selected_color=selected_color,
    )


def merge_line(lines: Sequence[CartLine], product: Any, selected_color: str | None = None) -> list[CartLine]:
    """
    Ajoute un produit au panier.

    Une ligne existante avec le meme id voit sa quantite augmenter de 1,
    quelle que soit la couleur choisie: une seule ligne par produit.
    Sinon une nouvelle ligne (quantite 1) est ajoutee a la fin.
    """
    merged = []
    found = False

    for line in lines:
        if not found and line.id == product.id:
            merged.append(line.model_copy(update={"quantity": line.quantity + 1}))
            found = True
        else:
            merged.append(line)

    if not found:
        merged.append(snapshot_line(product, selected_color))

    return merged


def set_quantity(lines: Sequence[CartLine], product_id: int, quantity: int) -> list[CartLine]:
    #quantite < 1 ignoree, le panier reste tel quel
    if quantity < 1:
        return list(lines)

    return [
        line.model_copy(update={"quantity": quantity}) if line.id == product_id else line
        for line in lines
    ]


def remove_line(lines: Sequence[CartLine], product_id: int) -> list[CartLine]:
    return [line for line in lines if line.id != product_id]


def cart_count(lines: Sequence[CartLine]) -> int:
    # le badge compte les lignes, pas les quantites
    return len(lines)


@dataclass(frozen=True)
class CartTotals:
    subtotal: Decimal
    delivery_fee: Decimal
    total: Decimal


def compute_totals(lines: Sequence[CartLine], delivery_fee: Decimal = DELIVERY_FEE) -> CartTotals:
    # le prix capture a l'ajout fait foi, meme pour un produit en promo
    subtotal = sum((line.price * line.quantity for line in lines), Decimal("0.00"))
    return CartTotals(
        subtotal=subtotal,
        delivery_fee=delivery_fee,
        total=subtotal + delivery_fee,
    )


@dataclass
class VariantSelection:
    """
    Etat du selecteur de couleurs d'une grille.

    Les choix sont gardes par id produit; un seul selecteur est ouvert a la fois.
    Etat cote client: l'API ne recoit que la couleur retenue (selected_color),
    verifiee ensuite par require_variant.
    """

    selections: dict[int, str] = field(default_factory=dict)
    open_product_id: int | None = None

    def toggle(self, product_id: int) -> None:
        self.open_product_id = None if self.open_product_id == product_id else product_id

    def select(self, product: Any, color: str) -> None:
        if color not in (product.colors or []):
            raise ValueError(f"Couleur inconnue pour {product.title}: {color}")

        self.selections[product.id] = color
        self.open_product_id = None

    def selected(self, product_id: int) -> str | None:
        return self.selections.get(product_id)
