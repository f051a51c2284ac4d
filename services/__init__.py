from services.document_source import MongoDocumentSource
from services.erd_generator import ErdGenerator

__all__ = ["MongoDocumentSource", "ErdGenerator"]
