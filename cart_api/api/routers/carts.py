#cart_api/api/routers/carts.py
import re

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from cart_api.api.responses import respond_with_error, respond_with_json
from cart_api.data.database import get_db
from cart_api.domain.errors import CartItemNotFoundError, CartNotFoundError
from cart_api.domain.schemas import (
    CartEnvelope,
    CartItemIn,
    CartOut,
    CartsEnvelope,
    ErrorOut,
    ResultOut,
)
from cart_api.services.cart_service import CartService
from cart_api.utils.settings import DEFAULT_PAGE_LIMIT

router = APIRouter(tags=["carts"])

CART_NOT_FOUND = "Cart not found"
ITEM_NOT_FOUND = "Cart item not found"

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
#tylko cyfry ASCII, bez spacji i "_"
_INT_RE = re.compile(r"[+-]?[0-9]+")

_errors = {
    404: {"model": ErrorOut},
    500: {"model": ErrorOut},
}


def get_service(db: Session):
    return CartService(db=db)


def _parse_int(raw: str | None) -> int:
    #jak strconv.Atoi z ignorowanym bledem: smieci -> 0, poza zakresem -> obciete do int64
    if raw is None or not _INT_RE.fullmatch(raw):
        return 0
    return max(INT64_MIN, min(INT64_MAX, int(raw)))


def parse_paging(limit: str | None, offset: str | None) -> tuple[int, int]:
    page_limit = _parse_int(limit)
    page_offset = _parse_int(offset)

    if page_limit <= 0:
        page_limit = DEFAULT_PAGE_LIMIT
    if page_offset < 0:
        page_offset = 0

    return page_limit, page_offset


@router.get("/carts", response_model=CartsEnvelope, responses=_errors)
def list_carts(
    limit: str | None = None,
    offset: str | None = None,
    db: Session = Depends(get_db),
):
    page_limit, page_offset = parse_paging(limit, offset)

    svc = get_service(db)
    try:
        carts = svc.list_carts(page_limit, page_offset)
    except CartNotFoundError:
        return respond_with_error(404, CART_NOT_FOUND)
    except SQLAlchemyError as e:
        return respond_with_error(500, str(e))

    # pusta strona traktowana jak 404
    if not carts:
        return respond_with_error(404, CART_NOT_FOUND)

    return respond_with_json(200, CartsEnvelope(carts=carts))


@router.get("/cart/{cart_id}", response_model=CartEnvelope, responses=_errors)
def get_cart(cart_id: str, db: Session = Depends(get_db)):
    svc = get_service(db)
    try:
        cart = svc.get_cart(cart_id)
    except CartNotFoundError:
        return respond_with_error(404, CART_NOT_FOUND)
    except SQLAlchemyError as e:
        return respond_with_error(500, str(e))

    return respond_with_json(200, CartEnvelope(cart=cart))


@router.post("/cart", response_model=CartOut, status_code=201, responses=_errors)
def create_cart(db: Session = Depends(get_db)):
    svc = get_service(db)
    try:
        cart = svc.create_cart()
    except SQLAlchemyError as e:
        return respond_with_error(500, str(e))

    return respond_with_json(201, cart)


@router.post(
    "/cart/{cart_id}",
    response_model=CartOut,
    responses={**_errors, 400: {"model": ErrorOut}},
)
def add_item_to_cart(cart_id: str, payload: CartItemIn, db: Session = Depends(get_db)):
    """
    Dodaje pozycje do koszyka albo zwieksza ilosc gdy SKU juz jest.
    Niepoprawne body obsluguje handler RequestValidationError (400).
    """
    svc = get_service(db)
    try:
        cart = svc.add_item(cart_id, payload)
    except CartNotFoundError:
        return respond_with_error(404, CART_NOT_FOUND)
    except SQLAlchemyError as e:
        return respond_with_error(500, str(e))

    return respond_with_json(200, cart)


@router.delete("/cart/{cart_id}", response_model=ResultOut, responses=_errors)
def delete_cart(cart_id: str, db: Session = Depends(get_db)):
    svc = get_service(db)
    try:
        svc.delete_cart(cart_id)
    except SQLAlchemyError as e:
        return respond_with_error(500, str(e))

    return respond_with_json(200, ResultOut())


@router.delete("/cart/{cart_id}/item/{item_id}", response_model=ResultOut, responses=_errors)
def delete_cart_item(cart_id: str, item_id: str, db: Session = Depends(get_db)):
    svc = get_service(db)
    try:
        svc.delete_item(cart_id, item_id)
    except CartItemNotFoundError:
        return respond_with_error(404, ITEM_NOT_FOUND)
    except SQLAlchemyError as e:
        return respond_with_error(500, str(e))

    return respond_with_json(200, ResultOut())
