from atams import AtamsBaseSettings


class Settings(AtamsBaseSettings):
    """
    Application Settings

    Inherits from AtamsBaseSettings which includes:
    - DATABASE_URL (required)
    - ATLAS_SSO_URL, ATLAS_APP_CODE, ATLAS_ENCRYPTION_KEY, ATLAS_ENCRYPTION_IV
    - ENCRYPTION_ENABLED, ENCRYPTION_KEY, ENCRYPTION_IV (response encryption)
    - LOGGING_ENABLED, LOG_LEVEL, LOG_TO_FILE, LOG_FILE_PATH
    - CORS_ORIGINS, CORS_ALLOW_CREDENTIALS, CORS_ALLOW_METHODS, CORS_ALLOW_HEADERS
    - RATE_LIMIT_ENABLED, RATE_LIMIT_REQUESTS, RATE_LIMIT_WINDOW
    - DEBUG

    All settings can be overridden via .env file or by redefining them here.
    """
    APP_NAME: str
    APP_VERSION: str
    DEBUG: bool = False
    API_PREFIX: str = "/api"

    # Create the hris schema and tables on startup
    DB_AUTO_CREATE: bool = False

    # QR attendance token settings
    QR_JWT_SECRET: str
    QR_JWT_ALG: str = "HS256"
    QR_TOKEN_TTL_SECONDS: int = 60

    # Check-ins after this local time (HH:MM) are marked late
    LATE_CHECKIN_AFTER: str = "09:15"

    # Atlas SSO request timeout for login/logout proxying
    ATLAS_TIMEOUT_SECONDS: float = 10.0


settings = Settings()
