"""
Entry point for the PizzaGoland API
"""

import logging
from dotenv import load_dotenv

# Load environment variables before the settings module reads them
load_dotenv()

from pizzagoland.app import app  # noqa: E402
from pizzagoland.config.settings import HOST, PORT  # noqa: E402

logger = logging.getLogger(__name__)

if __name__ == "__main__":
    import uvicorn
    logger.info(f"Starting PizzaGoland API on port {PORT}")
    uvicorn.run(app, host=HOST, port=PORT)
