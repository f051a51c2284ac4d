"""
MongoDB client construction.

Nothing here keeps a live connection around: callers own the client they get
back and pass the database handle on explicitly.
"""

from pymongo import MongoClient
from pymongo.database import Database

from config.settings import settings
from utils.logger import get_logger

logger = get_logger(__name__)

def create_client(uri: str = None, ping: bool = True) -> MongoClient:
    """Create a MongoDB client, optionally verifying the server answers."""
    mongo_uri = uri or settings.MONGODB_URI
    if not mongo_uri:
        raise ValueError("MONGODB_URI environment variable is required")
    
    client = MongoClient(mongo_uri)
    if ping:
        try:
            client.admin.command('ping')
            logger.info("Successfully connected to MongoDB")
        except Exception as e:
            logger.error(f"Error connecting to MongoDB: {e}")
            client.close()
            raise
    return client

def get_database(client: MongoClient, db_name: str = None) -> Database:
    """Get a database handle from an existing client."""
    return client[db_name or settings.DATABASE_NAME]
