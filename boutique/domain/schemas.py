# boutique/domain/schemas.py
from pydantic import BaseModel, Field, ConfigDict, EmailStr, computed_field, field_validator
from typing import List, Literal
from decimal import Decimal
from datetime import datetime

from boutique.utils.slugs import slugify


CartScope = Literal["browser", "account"]


def _taxonomy_name(value: str | None) -> str | None:
    # les tirets servent de separateurs dans les URLs de categorie
    if value is not None and "-" in value:
        raise ValueError("La catégorie ne peut pas contenir de tirets (-)")
    return value


class ProductIn(BaseModel):
    """Schema pour la creation d'un produit (admin)."""

    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1)
    price: Decimal = Field(..., ge=0, description="Prix de base en Dt")
    promo: Decimal | None = Field(None, ge=0, description="Prix promo, > 0 = en promotion")
    image_urls: List[str] = Field(..., min_length=1, description="La premiere image est la couverture")
    colors: List[str] | None = None
    status: bool = True
    category: str | None = None
    subcategory: str | None = None

    check_taxonomy = field_validator("category", "subcategory")(_taxonomy_name)


class ProductUpdate(BaseModel):
    """
    Schema pour la modification partielle d'un produit (admin).
    Un champ absent reste inchange; null n'est accepte que pour les colonnes optionnelles.
    """

    title: str | None = Field(None, min_length=1, max_length=200)
    description: str | None = Field(None, min_length=1)
    price: Decimal | None = Field(None, ge=0)
    promo: Decimal | None = Field(None, ge=0)
    image_urls: List[str] | None = Field(None, min_length=1)
    colors: List[str] | None = None
    status: bool | None = None
    category: str | None = None
    subcategory: str | None = None

    check_taxonomy = field_validator("category", "subcategory")(_taxonomy_name)

    @field_validator("title", "description", "price", "image_urls", "status")
    @classmethod
    def required_column(cls, value):
        # la valeur par defaut n'est pas validee, seul un null explicite arrive ici
        if value is None:
            raise ValueError("Ce champ ne peut pas etre vide")
        return value


class ProductOut(BaseModel):
    """Schema produit (response), aussi la forme validee des lignes lues en base."""

    id: int
    title: str
    description: str = ""
    price: Decimal
    promo: Decimal | None = None
    image_urls: List[str] = []
    colors: List[str] | None = None
    status: bool = True
    category: str | None = None
    subcategory: str | None = None
    sales: int | None = 0
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)

    @computed_field
    @property
    def slug(self) -> str:
        return slugify(self.title)

    @computed_field
    @property
    def on_promo(self) -> bool:
        return bool(self.promo and self.promo > 0)


class PageOut(BaseModel):
    """Une page de la grille produits."""

    items: List[ProductOut]
    page: int
    pages: int
    total: int
    sort: str


class SortOption(BaseModel):
    value: str
    label: str


class CartLine(BaseModel):
    """Copie du produit au moment de l'ajout, plus quantite et variante."""

    id: int
    title: str
    price: Decimal
    promo: Decimal | None = None
    image_urls: List[str] = []
    colors: List[str] | None = None
    quantity: int = Field(1, ge=1)
    selected_color: str | None = None


class AddToCartIn(BaseModel):
    product_id: int = Field(..., gt=0, description="ID produit (doit etre > 0)")
    selected_color: str | None = None


class QuantityIn(BaseModel):
    quantity: int = Field(..., ge=1, description="Quantite (doit etre >= 1)")


class CartOut(BaseModel):
    """Schema panier (response) avec les totaux du checkout."""

    scope: CartScope
    owner: str
    items: List[CartLine]
    count: int
    subtotal: Decimal
    delivery_fee: Decimal
    total: Decimal


class CartCountOut(BaseModel):
    count: int


class OrderCreate(BaseModel):
    """Schema pour la confirmation de commande.

    Les champs de livraison peuvent arriver vides, le service renvoie alors
    le message utilisateur habituel.
    """

    scope: CartScope
    owner: str = Field(..., min_length=1)
    name: str = ""
    phone: str = ""
    address: str = ""


class OrderOut(BaseModel):
    id: int
    name: str
    phone: str
    address: str
    items: List[CartLine]
    total_price: Decimal
    created_at: datetime


class CategoryIn(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    subcategories: List[str] = []


class CategoryOut(BaseModel):
    id: int
    name: str
    subcategories: List[str]

    model_config = ConfigDict(from_attributes=True)


class MenuLink(BaseModel):
    label: str
    href: str


class MenuItem(BaseModel):
    label: str
    href: str
    dropdown: List[MenuLink] | None = None


class TestimonialIn(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    stars: int = Field(..., ge=1, le=5)
    feedback: str = Field(..., min_length=1)


class TestimonialOut(BaseModel):
    id: int
    name: str
    stars: int
    feedback: str

    model_config = ConfigDict(from_attributes=True)


class UserCreate(BaseModel):
    """Schema pour l'inscription d'un client."""

    email: EmailStr
    name: str = Field(..., min_length=1, max_length=100, description="Nom complet")
    phone: str | None = None
    address: str | None = None


class UserRead(BaseModel):
    email: str
    name: str
    phone: str | None = None
    address: str | None = None

    model_config = ConfigDict(from_attributes=True)
