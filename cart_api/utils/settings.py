# cart_api/utils/settings.py
import os
from dotenv import load_dotenv

load_dotenv()

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./carts.db")
DB_ECHO = bool(int(os.getenv("DB_ECHO", "0")))
DB_CONNECT_ATTEMPTS = int(os.getenv("DB_CONNECT_ATTEMPTS", 5))

DEFAULT_PAGE_LIMIT = int(os.getenv("DEFAULT_PAGE_LIMIT", 10))
# 0 = stary tryb: brak koszyka wychodzi dopiero przy przeladowaniu
CART_EXISTENCE_CHECK = bool(int(os.getenv("CART_EXISTENCE_CHECK", "1")))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", 8000))
