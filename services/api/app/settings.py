"""Runtime configuration, read once from the environment."""

from __future__ import annotations

import os

SERVICE_NAME = "etsy-listing-sprint-assistant"
APP_VERSION = "1.0.0"

HOST = os.environ.get("HOST", "0.0.0.0")
PORT = int(os.environ.get("PORT", "8080"))

PAYMENT_URL = os.environ.get("PAYMENT_URL", "https://buy.stripe.com/test_eVq6oH8mqf5WeQJ2jQ")
PRICE_USD = float(os.environ.get("PRICE_USD", "19"))

MAX_BODY_BYTES = int(os.environ.get("MAX_BODY_BYTES", str(512 * 1024)))

CORS_ORIGINS = [
    o.strip() for o in os.environ.get("CORS_ORIGINS", "*").split(",") if o.strip()
]
