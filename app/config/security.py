# app/config/security.py
# Token and session cookie configuration

import os
from dotenv import load_dotenv
from typing import Any, Dict

load_dotenv()


class SecurityConfig:
    """Security configuration for the application"""

    # Signed session token settings
    TOKEN = {
        'secret_key': os.getenv('ACCESS_TOKEN_SECRET'),
        'algorithm': os.getenv('ALGORITHM', 'HS256'),
        'expire_minutes': int(os.getenv('ACCESS_TOKEN_EXPIRE_MINUTES', 60)),
    }

    # Session cookie settings
    COOKIE = {
        'name': os.getenv('TOKEN_COOKIE_NAME', 'token'),
        'http_only': True,
        'path': '/',
    }

    ENVIRONMENT = os.getenv('ENVIRONMENT', 'development')

    # CORS
    CORS_ORIGINS = [
        origin.strip()
        for origin in os.getenv(
            'CORS_ORIGINS',
            'http://localhost:5173,http://localhost:3000,http://127.0.0.1:5173',
        ).split(',')
        if origin.strip()
    ]

    @classmethod
    def is_production(cls) -> bool:
        return cls.ENVIRONMENT.lower() == 'production'

    @classmethod
    def cookie_options(cls) -> Dict[str, Any]:
        """Cookie flags: cross-site in production, same-site strict everywhere else"""
        production = cls.is_production()
        return {
            'httponly': cls.COOKIE['http_only'],
            'path': cls.COOKIE['path'],
            'secure': production,
            'samesite': 'none' if production else 'strict',
        }
