import os
from dotenv import load_dotenv

load_dotenv()


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


# Storage: a configured DATABASE_URL selects the relational store,
# otherwise the app runs on the in-memory store.
DATABASE_URL = os.getenv("DATABASE_URL") or None
SEED_DEMO_DATA = _flag("SEED_DEMO_DATA", "true")
SQL_ECHO = _flag("SQL_ECHO", "false")

# Identity tokens
SECRET_KEY = os.getenv("SECRET_KEY", "super_secret_random_key_CHANGE_THIS")
ALGORITHM = os.getenv("ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "30"))

# HTTP
ALLOWED_ORIGINS = [o.strip() for o in os.getenv("ALLOWED_ORIGINS", "").split(",") if o.strip()]
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "5000"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
