from sqlalchemy import Column, Integer, ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import relationship

from cart_api.data.database import Base


class CartItemModel(Base):
    __tablename__ = "cart_items"

    id = Column(String(36), primary_key=True)
    cart_id = Column(String(36), ForeignKey("carts.id"), nullable=False, index=True)
    sku = Column(String(255), nullable=False)
    product_name = Column(String(255), nullable=False, default="")

    quantity = Column(Integer, nullable=False, default=0)

    cart = relationship("CartModel", back_populates="items")

    # upsert dziala po tym kluczu
    __table_args__ = (UniqueConstraint("cart_id", "sku", name="uq_cart_items_cart_sku"),)
