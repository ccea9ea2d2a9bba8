# cart_api/domain/errors.py


class CartApiError(Exception):
    """Bazowy blad domeny koszyka."""


class CartNotFoundError(CartApiError):
    def __init__(self, cart_id: str):
        super().__init__(f"Cart {cart_id} not found")
        self.cart_id = cart_id


class CartItemNotFoundError(CartApiError):
    def __init__(self, item_id: str, cart_id: str):
        super().__init__(f"Item {item_id} not found in cart {cart_id}")
        self.item_id = item_id
        self.cart_id = cart_id
