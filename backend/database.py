from typing import Callable, Optional

from fastapi import Depends, Request

from config.database import create_client, get_database
from config.settings import settings
from services.document_source import MongoDocumentSource
from utils.logger import get_logger

logger = get_logger(__name__)

def connect_to_mongo(app):
    try:
        app.state.mongo_client = create_client(settings.MONGODB_URI)
    except Exception as e:
        # Keep serving; requests report the failure until the server is reachable.
        logger.error(f"MongoDB connection error: {e}")
        app.state.mongo_client = create_client(settings.MONGODB_URI, ping=False)
    return app.state.mongo_client

def close_mongo_connection(app):
    client = getattr(app.state, "mongo_client", None)
    if client is not None:
        client.close()
        app.state.mongo_client = None

def get_mongo_client(request: Request):
    return request.app.state.mongo_client

def get_source_factory(client=Depends(get_mongo_client)) -> Callable[[Optional[str]], MongoDocumentSource]:
    """Dependency returning database name -> document source."""
    def factory(database: Optional[str] = None) -> MongoDocumentSource:
        return MongoDocumentSource(get_database(client, database))
    return factory
