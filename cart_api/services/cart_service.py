from contextlib import contextmanager
from typing import List

from sqlalchemy.orm import Session

from cart_api.domain.schemas import CartItemIn, CartOut
from cart_api.repos.cart_repo import CartRepo
from cart_api.utils.logging import get_logger

logger = get_logger(__name__)


class CartService:
    """
    Use case'y dla domeny cart.
    Kazda komenda (create, add, delete) to jedna transakcja:
    commit po sukcesie, rollback przy dowolnym bledzie.
    """

    def __init__(self, db: Session, repo: CartRepo | None = None):
        self.repo = repo or CartRepo(db)

    @contextmanager
    def _transaction(self):
        try:
            yield
            self.repo.commit()
        except Exception:
            self.repo.rollback()
            raise

    #query - odczyt
    def list_carts(self, limit: int, offset: int) -> List[CartOut]:
        with self._transaction():
            return self.repo.list_carts(limit, offset)

    def get_cart(self, cart_id: str) -> CartOut:
        with self._transaction():
            return self.repo.get_cart_by_id(cart_id)

    #commands
    def create_cart(self) -> CartOut:
        with self._transaction():
            cart = self.repo.create_cart()

        logger.info(f"Utworzono nowy koszyk {cart.id}")
        return cart

    def add_item(self, cart_id: str, payload: CartItemIn) -> CartOut:
        with self._transaction():
            cart = self.repo.add_item_to_cart(
                cart_id=cart_id,
                sku=payload.sku,
                product_name=payload.product_name,
                quantity=payload.quantity,
            )

        logger.info(
            f"Dodano {payload.quantity} x {payload.sku} do koszyka {cart_id}, "
            f"nowy total: {cart.total}"
        )
        return cart

    def delete_cart(self, cart_id: str) -> None:
        with self._transaction():
            self.repo.delete_cart(cart_id)

        logger.info(f"Usunieto koszyk {cart_id}")

    def delete_item(self, cart_id: str, item_id: str) -> None:
        with self._transaction():
            self.repo.delete_cart_item(item_id, cart_id)

        logger.info(f"Usunieto pozycje {item_id} z koszyka {cart_id}")
