# cart_api/repos/cart_repo.py
import uuid
from typing import List

from sqlalchemy import delete, insert, select, update
from sqlalchemy.dialects import mysql, postgresql, sqlite
from sqlalchemy.orm import Session

from cart_api.data.models.cart import CartModel
from cart_api.data.models.cart_item import CartItemModel
from cart_api.domain.errors import CartItemNotFoundError, CartNotFoundError
from cart_api.domain.schemas import CartItemOut, CartOut
from cart_api.utils.settings import CART_EXISTENCE_CHECK


class CartRepo:
    """
    Warstwa dostepu do tabel carts i cart_items.
    Kazda metoda to jedno lub kilka zapytan na wstrzyknietej sesji,
    commit/rollback robi serwis.
    """

    def __init__(self, db: Session, existence_check: bool = CART_EXISTENCE_CHECK):
        self.db = db
        self.existence_check = existence_check

    def commit(self):
        self.db.commit()

    def rollback(self):
        self.db.rollback()

    #odczyt
    def list_carts(self, limit: int, offset: int) -> List[CartOut]:
        rows = self.db.execute(
            select(CartModel.id, CartModel.total).limit(limit).offset(offset)
        ).all()

        return [self.get_cart_by_id(row.id) for row in rows]

    def get_cart_by_id(self, cart_id: str) -> CartOut:
        row = self.db.execute(
            select(CartModel.id, CartModel.total).where(CartModel.id == cart_id)
        ).first()

        if row is None:
            raise CartNotFoundError(cart_id)

        return CartOut(id=row.id, total=row.total, items=self.get_cart_items(row.id))

    def get_cart_items(self, cart_id: str) -> List[CartItemOut]:
        #bez ORDER BY, kolejnosc zalezy od bazy
        rows = self.db.execute(
            select(
                CartItemModel.id,
                CartItemModel.cart_id,
                CartItemModel.sku,
                CartItemModel.product_name,
                CartItemModel.quantity,
            ).where(CartItemModel.cart_id == cart_id)
        ).all()

        return [CartItemOut.model_validate(row) for row in rows]

    #zapis
    def create_cart(self) -> CartOut:
        cart_id = str(uuid.uuid4())

        self.db.execute(insert(CartModel).values(id=cart_id))

        row = self.db.execute(
            select(CartModel.id, CartModel.total).where(CartModel.id == cart_id)
        ).one()

        return CartOut(id=row.id, total=row.total, items=[])

    def add_item_to_cart(
        self,
        cart_id: str,
        sku: str,
        product_name: str,
        quantity: int,
    ) -> CartOut:
        exists = self.db.execute(
            select(CartModel.id).where(CartModel.id == cart_id)
        ).first()

        if exists is None and self.existence_check:
            raise CartNotFoundError(cart_id)

        self.db.execute(
            self._upsert_item(
                item_id=str(uuid.uuid4()),
                cart_id=cart_id,
                sku=sku,
                product_name=product_name,
                quantity=quantity,
            )
        )

        self.db.execute(
            update(CartModel)
            .where(CartModel.id == cart_id)
            .values(total=CartModel.total + quantity)
        )

        return self.get_cart_by_id(cart_id)

    def _upsert_item(self, item_id: str, cart_id: str, sku: str, product_name: str, quantity: int):
        """
        INSERT nowej pozycji albo zwiekszenie quantity gdy (cart_id, sku) juz istnieje.
        Skladnia zalezy od dialektu.
        """
        values = {
            "id": item_id,
            "cart_id": cart_id,
            "sku": sku,
            "product_name": product_name,
            "quantity": quantity,
        }
        dialect = self.db.get_bind().dialect.name

        if dialect in ("mysql", "mariadb"):
            stmt = mysql.insert(CartItemModel).values(**values)
            return stmt.on_duplicate_key_update(quantity=CartItemModel.quantity + quantity)

        if dialect == "postgresql":
            stmt = postgresql.insert(CartItemModel).values(**values)
        elif dialect == "sqlite":
            stmt = sqlite.insert(CartItemModel).values(**values)
        else:
            raise NotImplementedError(f"Upsert nie jest obslugiwany dla dialektu {dialect}")

        return stmt.on_conflict_do_update(
            index_elements=["cart_id", "sku"],
            set_={"quantity": CartItemModel.quantity + stmt.excluded.quantity},
        )

    def delete_cart(self, cart_id: str) -> None:
        #najpierw pozycje potem koszyk, 0 usunietych wierszy to nie blad
        self.db.execute(delete(CartItemModel).where(CartItemModel.cart_id == cart_id))
        self.db.execute(delete(CartModel).where(CartModel.id == cart_id))

    def delete_cart_item(self, item_id: str, cart_id: str) -> None:
        row = self.db.execute(
            select(CartItemModel.id, CartItemModel.cart_id, CartItemModel.quantity).where(
                CartItemModel.id == item_id,
                CartItemModel.cart_id == cart_id,
            )
        ).first()

        if row is None:
            raise CartItemNotFoundError(item_id, cart_id)

        self.db.execute(
            update(CartModel)
            .where(CartModel.id == cart_id)
            .values(total=CartModel.total - row.quantity)
        )

        self.db.execute(
            delete(CartItemModel).where(
                CartItemModel.id == item_id,
                CartItemModel.cart_id == cart_id,
            )
        )
