#import wszystkich modeli zeby SQLAlchemy je zarejestrowal w base metadata

from cart_api.data.models.cart import CartModel
from cart_api.data.models.cart_item import CartItemModel

__all__ = ["CartModel", "CartItemModel"]
