"""
MongoDB-backed document source.
"""

from typing import Dict, List, Any

from pymongo.database import Database

from utils.logger import get_logger

logger = get_logger(__name__)

class MongoDocumentSource:
    """Reads collection names and bounded document samples from one database."""
    
    def __init__(self, database: Database):
        self.db = database
    
    @property
    def name(self) -> str:
        return self.db.name
    
    def list_collection_names(self) -> List[str]:
        """Get list of collections in the database."""
        return self.db.list_collection_names()
    
    def sample_documents(self, collection_name: str, limit: int) -> List[Dict[str, Any]]:
        """Get up to ``limit`` documents in the store's natural order."""
        return list(self.db[collection_name].find().limit(limit))
