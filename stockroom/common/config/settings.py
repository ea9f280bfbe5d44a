"""Application settings and environment variables."""

import os
from typing import Optional

from dotenv import load_dotenv

load_dotenv()  # Load environment variables from .env file


class Settings:
    DB_HOST: str = os.getenv("DB_HOST", "localhost")
    DB_PORT: int = int(os.getenv("DB_PORT", "3306"))
    DB_DATABASE: str = os.getenv("DB_NAME", "stockroom_db")
    DB_USER: str = os.getenv("DB_USER", "user")
    DB_PASSWORD: str = os.getenv("DB_PASSWORD", "password")

    # Remote inventory API, used when prices and stock are read over HTTP instead of MySQL
    CATALOG_API_BASE_URL: Optional[str] = os.getenv("CATALOG_API_BASE_URL")
    CATALOG_API_TOKEN: Optional[str] = os.getenv("CATALOG_API_TOKEN")
    CATALOG_API_TIMEOUT: int = int(os.getenv("CATALOG_API_TIMEOUT", "30"))

    # Daily stock health report
    REPORT_TIME: str = os.getenv("REPORT_TIME", "18:00")
    REPORT_TIMEZONE: str = os.getenv("REPORT_TIMEZONE", "America/Chicago")

    # Logging settings
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")  # INFO, DEBUG, WARNING, ERROR, CRITICAL


settings = Settings()
