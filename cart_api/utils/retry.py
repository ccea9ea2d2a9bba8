# cart_api/utils/retry.py
import logging

from sqlalchemy.exc import OperationalError
from tenacity import (
    before_sleep_log,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from cart_api.utils.settings import DB_CONNECT_ATTEMPTS
from cart_api.utils.logging import get_logger

logger = get_logger(__name__)


#tenacity retry, tylko przy starcie (baza moze jeszcze wstawac)
def db_retry(attempts: int = DB_CONNECT_ATTEMPTS, wait=None):
    return retry(
        reraise=True,
        stop=stop_after_attempt(attempts),
        wait=wait if wait is not None else wait_exponential(multiplier=0.5, min=0.5, max=5),
        retry=retry_if_exception_type(OperationalError),
        before_sleep=before_sleep_log(logger, logging.ERROR),
    )
