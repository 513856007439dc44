#import de tous les modeles pour que SQLAlchemy les enregistre dans Base.metadata

from boutique.data.models.product import ProductModel
from boutique.data.models.category import CategoryModel
from boutique.data.models.order import OrderModel
from boutique.data.models.user import UserModel
from boutique.data.models.browser_cart import BrowserCartModel
from boutique.data.models.testimonial import TestimonialModel

__all__ = [
    "ProductModel",
    "CategoryModel",
    "OrderModel",
    "UserModel",
    "BrowserCartModel",
    "TestimonialModel",
]
