"""
MongoDB Job Posting Repository

Wraps the ``jobs`` collection behind JobPostingRepositoryInterface.
"""

import logging
from typing import Any, Dict, List, Optional

from pymongo import ASCENDING, DESCENDING, TEXT, MongoClient
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import PyMongoError

from .base import JobPostingRepositoryInterface, WriteResult

logger = logging.getLogger(__name__)


class AtlasJobPostingRepository(JobPostingRepositoryInterface):
    """
    Repository backed by a MongoDB (Atlas or self-hosted) collection.

    Connection Management:
    - Uses singleton MongoClient for connection pooling
    - Client is created once and reused across requests
    - PyMongo handles connection pool internally

    Error Handling:
    - Fail-fast: All errors propagate to caller
    - Index creation is the exception: failures are logged, not raised
    """

    _client: Optional[MongoClient] = None
    _db: Optional[Database] = None
    _collection: Optional[Collection] = None

    def __init__(self, mongodb_uri: str, database: str = "job_board", collection: str = "jobs"):
        """
        Initialize repository with connection parameters.

        Args:
            mongodb_uri: MongoDB connection string
            database: Database name (default: "job_board")
            collection: Collection name (default: "jobs")
        """
        self._mongodb_uri = mongodb_uri
        self._database_name = database
        self._collection_name = collection

    def _get_collection(self) -> Collection:
        """
        Get the MongoDB collection, creating client if needed.

        Uses class-level singleton for connection pooling.
        Thread-safe due to PyMongo's internal locking.
        """
        if AtlasJobPostingRepository._collection is None:
            AtlasJobPostingRepository._client = MongoClient(self._mongodb_uri)
            AtlasJobPostingRepository._db = AtlasJobPostingRepository._client[self._database_name]
            AtlasJobPostingRepository._collection = AtlasJobPostingRepository._db[self._collection_name]
            logger.info(
                f"Job posting repository connected: {self._database_name}.{self._collection_name}"
            )
        return AtlasJobPostingRepository._collection

    def find(
        self,
        filter: Dict[str, Any],
        sort: Optional[List[tuple]] = None,
        limit: int = 0,
        skip: int = 0,
    ) -> List[Dict[str, Any]]:
        """Find multiple job postings."""
        collection = self._get_collection()
        cursor = collection.find(filter)

        if sort:
            cursor = cursor.sort(sort)
        if skip > 0:
            cursor = cursor.skip(skip)
        if limit > 0:
            cursor = cursor.limit(limit)

        return list(cursor)

    def count_documents(self, filter: Dict[str, Any]) -> int:
        """Count documents matching the filter."""
        collection = self._get_collection()
        return collection.count_documents(filter)

    def insert_one(self, document: Dict[str, Any]) -> WriteResult:
        """
        Insert a single document.

        PyMongo sets ``_id`` on the passed dict, so callers can return the
        document as stored.
        """
        collection = self._get_collection()
        result = collection.insert_one(document)

        return WriteResult(
            inserted_count=1,
            inserted_id=str(result.inserted_id) if result.inserted_id else None,
        )

    def delete_all(self) -> int:
        """Remove every posting."""
        collection = self._get_collection()
        result = collection.delete_many({})
        return result.deleted_count

    def ensure_indexes(self) -> None:
        """Ensure search and sort indexes exist on the jobs collection."""
        collection = self._get_collection()
        try:
            collection.create_index(
                [
                    ("jobTitle", TEXT),
                    ("companyName", TEXT),
                    ("jobDescription", TEXT),
                    ("location", TEXT),
                ],
                name="job_text_search",
                background=True,
            )
            collection.create_index([("createdAt", DESCENDING)], name="created_at_desc", background=True)
            collection.create_index([("jobType", ASCENDING)], name="job_type", background=True)
            collection.create_index([("maxSalary", ASCENDING)], name="max_salary", background=True)
            logger.info("Job posting indexes ensured")
        except PyMongoError as e:
            logger.warning(f"Error creating job posting indexes (may already exist): {e}")

    @classmethod
    def reset_connection(cls) -> None:
        """
        Reset the connection pool.

        Used for testing or connection recovery.
        """
        if cls._client:
            cls._client.close()
        cls._client = None
        cls._db = None
        cls._collection = None
        logger.info("Job posting repository connection reset")
