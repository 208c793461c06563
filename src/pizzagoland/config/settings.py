"""
Configuration settings for the PizzaGoland API
"""

import os
import logging

logger = logging.getLogger(__name__)

# Environment configuration
ENV = os.getenv("ENV", "PROD")  # PROD or QA
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", 8080))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# MongoDB configuration
MONGO_URI = os.getenv("MONGO_URI", "mongodb://localhost:27017")
MONGO_DB = os.getenv("MONGO_DB", "mongo")
MONGO_COLLECTION = os.getenv("MONGO_COLLECTION", "users")

# Per-call timeout for handler database operations
DB_TIMEOUT_SECONDS = float(os.getenv("DB_TIMEOUT_SECONDS", 5))
# Timeout for the startup connectivity check
DB_CONNECT_TIMEOUT_SECONDS = float(os.getenv("DB_CONNECT_TIMEOUT_SECONDS", 10))

# Validate configuration
if not MONGO_URI:
    raise ValueError("MONGO_URI environment variable must not be empty")
if DB_TIMEOUT_SECONDS <= 0:
    raise ValueError("DB_TIMEOUT_SECONDS must be a positive number")
if DB_CONNECT_TIMEOUT_SECONDS <= 0:
    raise ValueError("DB_CONNECT_TIMEOUT_SECONDS must be a positive number")

logger.info(f"Environment: {ENV}")
logger.info(f"MongoDB target - Database: {MONGO_DB}, Collection: {MONGO_COLLECTION}")
