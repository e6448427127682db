from dotenv import load_dotenv
import os

load_dotenv()

# environments allowed to put exception text into 500 responses
DEBUG_ENVIRONMENTS = {"development", "local", "test"}


def is_debug_env(app_env: str) -> bool:
    return app_env.strip().lower() in DEBUG_ENVIRONMENTS


class Settings:
    DATABASE_URL = os.getenv("DATABASE_URL", "sqlite+aiosqlite:///./ecoevents.db")
    APP_ENV = os.getenv("APP_ENV", "development")
    DEBUG = is_debug_env(APP_ENV)
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # largest value an INTEGER column can hold (signed 64-bit)
    MAX_DB_INTEGER = 2**63 - 1

    DEFAULT_PAGE_SIZE = 15
    MAX_PAGE_SIZE = 100
    # keeps (page - 1) * page_size inside MAX_DB_INTEGER
    MAX_PAGE = MAX_DB_INTEGER // MAX_PAGE_SIZE

    DEFAULT_COMMENT_AUTHOR = os.getenv("DEFAULT_COMMENT_AUTHOR", "anonymous")
    ADMIN_COMMENT_AUTHOR = os.getenv("ADMIN_COMMENT_AUTHOR", "administrator")

settings = Settings()
