from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from cart_api.api.responses import respond_with_error, respond_with_json
from cart_api.data.database import get_db

router = APIRouter(tags=["health"])


@router.get("/health")
def health(db: Session = Depends(get_db)):
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        return respond_with_error(503, f"Database unavailable: {e}")
    return respond_with_json(200, {"status": "ok"})
