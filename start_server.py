#!/usr/bin/env python3
"""
Launch the Employee Management API under uvicorn.

Refuses to start when the session signing secret is missing, and only
auto-reloads outside production unless RELOAD says otherwise.
"""

import logging
import os
from typing import Any, Dict

import uvicorn
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

REQUIRED_SETTINGS = ("ACCESS_TOKEN_SECRET",)


def check_environment() -> None:
    missing = [name for name in REQUIRED_SETTINGS if not os.getenv(name)]
    if missing:
        raise RuntimeError(f"Missing required environment variables: {', '.join(missing)}")


def server_options() -> Dict[str, Any]:
    production = os.getenv("ENVIRONMENT", "development").lower() == "production"
    reload_default = "false" if production else "true"
    return {
        "host": os.getenv("HOST", "0.0.0.0"),
        "port": int(os.getenv("PORT", "4545")),
        "reload": os.getenv("RELOAD", reload_default).lower() == "true",
        "log_level": "info",
    }


def main():
    load_dotenv()
    logging.basicConfig(level=logging.INFO)
    check_environment()

    options = server_options()
    logger.info(
        f"Serving database {os.getenv('DATABASE_NAME', 'Employee_Management')} "
        f"on {options['host']}:{options['port']} (reload={options['reload']})"
    )
    uvicorn.run("main:app", **options)


if __name__ == "__main__":
    main()
