# app/utils/settings.py
import os
from dotenv import load_dotenv

load_dotenv()

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./shop.db")
TOKEN_TTL_HOURS = int(os.getenv("TOKEN_TTL_HOURS", 24))
BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", 12))

# gorny limit ilosci jednej pozycji koszyka, takze po zsumowaniu
MAX_ITEM_QUANTITY = int(os.getenv("MAX_ITEM_QUANTITY", 1000))

DEFAULT_ADMIN_EMAIL = os.getenv("DEFAULT_ADMIN_EMAIL", "admin@ergolife.com")
DEFAULT_ADMIN_PASSWORD = os.getenv("DEFAULT_ADMIN_PASSWORD")
DEFAULT_ADMIN_NAME = os.getenv("DEFAULT_ADMIN_NAME", "Admin User")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_JSON = os.getenv("LOG_JSON", "").lower() in ("1", "true", "yes")

# wartosci kategorii oznaczajace "bez filtra"
ALL_CATEGORIES = {os.getenv("ALL_CATEGORIES", "all"), "Tất cả"}


def get_jwt_secret() -> str:
    # brak fallbacku - bez sekretu aplikacja nie startuje
    secret = os.getenv("JWT_SECRET", "")
    if not secret:
        raise RuntimeError("JWT_SECRET is not set")
    return secret
