"""
Schema discovery for MongoDB collections.

Samples each collection through an explicitly passed document source,
analyzes every sampled document and merges the results into one schema per
collection.
"""

from concurrent.futures import ThreadPoolExecutor
from typing import Dict, List, Any, Iterable, Optional, Protocol, Sequence, Tuple

from schema.document_analyzer import DEFAULT_MAX_DEPTH, analyze_document
from schema.relationship_detector import detect_relationships
from schema.schema_merger import merge_field_maps
from schema.types import Relationship, Schema
from utils.logger import get_logger

logger = get_logger(__name__)

class DocumentSource(Protocol):
    """What schema discovery needs from a document store."""

    def list_collection_names(self) -> List[str]:
        ...

    def sample_documents(self, collection_name: str, limit: int) -> List[Dict[str, Any]]:
        ...

class SchemaDiscoveryError(Exception):
    """Raised when the document source cannot be read."""

class SchemaDiscoverer:
    """Schema and relationship discovery over a document source."""

    def __init__(self, source: DocumentSource, max_depth: int = DEFAULT_MAX_DEPTH, max_workers: int = 1):
        self.source = source
        self.max_depth = max_depth
        self.max_workers = max(1, max_workers)

    def discover_collections(self) -> List[str]:
        """Get list of collections in the database."""
        try:
            return list(self.source.list_collection_names())
        except Exception as e:
            logger.error(f"Error discovering collections: {e}")
            raise SchemaDiscoveryError(f"Could not list collections: {e}") from e

    def resolve_collections(self, collections: Optional[Iterable[str]] = None) -> List[str]:
        """Requested collections, or every collection when none are given."""
        requested = list(collections or [])
        if requested:
            return requested
        return self.discover_collections()

    def analyze_collection(self, collection_name: str, limit: int) -> Schema:
        """Sample a collection and merge its documents into one schema."""
        try:
            sample_docs = list(self.source.sample_documents(collection_name, limit))
        except Exception as e:
            logger.error(f"Error sampling collection {collection_name}: {e}")
            raise SchemaDiscoveryError(f"Could not sample collection '{collection_name}': {e}") from e

        logger.debug(f"Sampled {len(sample_docs)} documents from {collection_name}")
        if not sample_docs:
            return Schema()

        return merge_field_maps(
            analyze_document(doc, max_depth=self.max_depth) for doc in sample_docs
        )

    def analyze_collections(self, collection_names: Sequence[str], limit: int) -> Dict[str, Schema]:
        """
        Analyze several collections, keeping the requested order.

        With more than one worker the samples are fetched concurrently and a
        collection whose sample fails is reported with an empty schema; run
        sequentially, the first failure aborts the whole call.
        """
        if self.max_workers == 1 or len(collection_names) < 2:
            return {name: self.analyze_collection(name, limit) for name in collection_names}

        schemas = {}
        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            futures = [
                (name, executor.submit(self.analyze_collection, name, limit))
                for name in collection_names
            ]
            for name, future in futures:
                try:
                    schemas[name] = future.result()
                except SchemaDiscoveryError as e:
                    logger.warning(f"Using an empty schema for {name}: {e}")
                    schemas[name] = Schema()
        return schemas

    def discover(self, collections: Optional[Iterable[str]] = None,
                 limit: int = 10) -> Tuple[Dict[str, Schema], List[Relationship]]:
        """
        Infer schemas and the relationships between them.

        Args:
            collections: Collections to analyze; all collections when empty
            limit: Documents sampled per collection

        Returns:
            Tuple of (schemas by collection, relationships)
        """
        collection_names = self.resolve_collections(collections)
        logger.info(f"Discovering schemas for {len(collection_names)} collections")

        schemas = self.analyze_collections(collection_names, limit)
        relationships = detect_relationships(schemas, known_collections=collection_names)

        logger.info(f"Discovered {len(schemas)} schemas and {len(relationships)} relationships")
        return schemas, relationships
