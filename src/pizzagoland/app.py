"""
PizzaGoland API server
User CRUD over MongoDB plus a JSON message endpoint
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from pizzagoland import __version__
from pizzagoland.api.routes import messages, root, users
from pizzagoland.config.settings import LOG_LEVEL
from pizzagoland.database.connection import MongoConnector
from pizzagoland.utils.error_handling import setup_error_handling

# Configure logging
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)


def create_app(connector: Optional[MongoConnector] = None) -> FastAPI:
    """Build the application around a database connector.

    The connector is connected when the app starts and closed when it stops.
    A connection failure propagates out of startup so the server never
    begins serving without a database.
    """
    connector = connector if connector is not None else MongoConnector()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager"""
        await connector.connect()
        try:
            yield
        finally:
            await connector.close()

    app = FastAPI(
        title="PizzaGoland API",
        description="User management over MongoDB and a JSON message endpoint",
        version=__version__,
        lifespan=lifespan
    )
    app.state.connector = connector

    setup_error_handling(app)

    app.include_router(root.router, tags=["Root"])
    app.include_router(users.router, tags=["Users"])
    app.include_router(messages.router, tags=["Messages"])

    return app


# FastAPI app instance is exported for use by uvicorn
app = create_app()
