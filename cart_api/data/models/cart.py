#cart_api/data/models/cart.py
from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from cart_api.data.database import Base


class CartModel(Base):
    __tablename__ = "carts"

    id = Column(String(36), primary_key=True)
    #suma ilosci z cart_items, aktualizowana przyrostowo
    total = Column(Integer, nullable=False, default=0, server_default="0")

    items = relationship("CartItemModel", back_populates="cart")
