# cart_api/api/responses.py
from typing import Any

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from cart_api.utils.logging import get_logger

logger = get_logger(__name__)


def respond_with_json(status_code: int, payload: Any) -> JSONResponse:
    """
    Zwraca payload jako JSON z podanym statusem.
    Blad serializacji nie daje pustego 200, tylko 500 z kopertą error.
    """
    try:
        content = jsonable_encoder(payload)
        return JSONResponse(status_code=status_code, content=content)
    except (TypeError, ValueError) as e:
        logger.error(f"Nie udalo sie zserializowac odpowiedzi: {e}")
        return JSONResponse(status_code=500, content={"error": "Failed to encode response"})


def respond_with_error(status_code: int, message: str) -> JSONResponse:
    if status_code >= 500:
        logger.error(message)
    else:
        logger.warning(message)
    return respond_with_json(status_code, {"error": message})
