
# academy/core/config.py

"""Application configuration from environment variables"""

from pydantic_settings import BaseSettings
from typing import List
import os

class Settings(BaseSettings):
    """Application settings from environment variables"""

    # Database
    MONGO_URI: str = os.getenv(
        'MONGO_URI',
        'mongodb://localhost:27017'
    )
    DATABASE_NAME: str = 'languageAcademy'
    USERS_COLLECTION: str = 'users'
    COURSES_COLLECTION: str = 'courses'
    SELECTED_COURSES_COLLECTION: str = 'selectedCourses'
    ENROLLED_COURSES_COLLECTION: str = 'enrolledCourses'

    # API
    API_TITLE: str = 'Language Academy Server'
    API_VERSION: str = '3.0.0'

    # Security - shared secret for signing session tokens
    ACCESS_TOKEN_SECRET: str = os.getenv('ACCESS_TOKEN_SECRET', 'change-me-in-production-now')
    JWT_ALGORITHM: str = 'HS256'
    ACCESS_TOKEN_EXPIRE_HOURS: int = 1

    # CORS
    CORS_ORIGINS: List[str] = [
        'http://localhost:3000',
        'http://localhost:5173',
        'http://127.0.0.1:3000',
        'http://127.0.0.1:5173',
    ]

    # Stripe
    STRIPE_SECRET_KEY: str = os.getenv('STRIPE_SECRET_KEY', '')
    STRIPE_API_URL: str = 'https://api.stripe.com/v1'
    PAYMENT_CURRENCY: str = 'usd'
    PAYMENT_TIMEOUT_SECONDS: float = 10.0

    # Server
    PORT: int = int(os.getenv('PORT', '5000'))

    # Logging
    LOG_LEVEL: str = os.getenv('LOG_LEVEL', 'INFO')

    class Config:
        env_file = '.env'
        case_sensitive = True

settings = Settings()
