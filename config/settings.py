"""
Environment-driven settings.
"""

import os
from dotenv import load_dotenv

load_dotenv()

class Settings:
    MONGODB_URI: str = os.getenv("MONGODB_URI", "mongodb://localhost:27017/")
    DATABASE_NAME: str = os.getenv("ATLAS_DATABASE_NAME", "testdb")
    
    # Diagram inference only needs a glimpse of each collection, standalone
    # extraction looks a bit further.
    ERD_SAMPLE_LIMIT: int = int(os.getenv("ERD_SAMPLE_LIMIT", "10"))
    SCHEMA_SAMPLE_LIMIT: int = int(os.getenv("SCHEMA_SAMPLE_LIMIT", "100"))
    MAX_DOCUMENT_DEPTH: int = int(os.getenv("MAX_DOCUMENT_DEPTH", "32"))
    SAMPLE_WORKERS: int = int(os.getenv("SAMPLE_WORKERS", "1"))
    
    API_V1_PREFIX: str = "/api/v1"
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

settings = Settings()
