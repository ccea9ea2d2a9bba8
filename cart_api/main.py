# cart_api/main.py
import uvicorn

from cart_api.api import create_app
from cart_api.utils.settings import HOST, PORT
from cart_api.utils.logging import get_logger

logger = get_logger(__name__)

app = create_app()


def run():
    logger.info(f"Cart Service startuje na {HOST}:{PORT}")
    uvicorn.run(app, host=HOST, port=PORT)


if __name__ == "__main__":
    run()
