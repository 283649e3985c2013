"""Application configuration settings"""

import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    # App settings
    APP_TITLE = os.getenv("APP_TITLE", "Six Cities API")
    TESTING = os.getenv("TESTING", "false").lower() in {"1", "true", "yes", "on"}
    DEBUG = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes", "on"}
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*").split(",")

    # Storage: "memory" or "prisma"
    STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "memory").lower()

    # Auth
    JWT_SECRET = os.getenv(
        "JWT_SECRET", "default-jwt-secret-change-me-in-production"
    )
    JWT_ISSUER = os.getenv("JWT_ISSUER", "six-cities")
    JWT_AUDIENCE = os.getenv("JWT_AUDIENCE", "six-cities-clients")
    JWT_EXPIRES_MINUTES = int(os.getenv("JWT_EXPIRES_MINUTES", "1440"))
    PASSWORD_SALT = os.getenv("SALT", "default-salt")

    # Listing limits
    DEFAULT_OFFER_COUNT = int(os.getenv("DEFAULT_OFFER_COUNT", "60"))
    DEFAULT_PREMIUM_OFFER_COUNT = int(os.getenv("DEFAULT_PREMIUM_OFFER_COUNT", "3"))
    DEFAULT_COMMENT_COUNT = int(os.getenv("DEFAULT_COMMENT_COUNT", "50"))

    # Offer rating is stored with this many decimals (half-up rounding)
    RATING_PRECISION = int(os.getenv("RATING_PRECISION", "1"))

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_PATH = os.getenv("LOG_PATH") or None
    LOG_FORMAT = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s - %(name)s - %(levelname)s - [%(correlation_id)s] - %(message)s",
    )
