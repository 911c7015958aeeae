"""
Repository Interface Definitions

Defines the abstract interface for job posting repository operations,
so the service layer never talks to pymongo directly.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List, Optional


@dataclass
class WriteResult:
    """
    Result of a write operation.

    Attributes:
        inserted_count: Number of documents inserted
        inserted_id: ID of the inserted document (stringified ObjectId)
    """
    inserted_count: int
    inserted_id: Optional[str] = None


class JobPostingRepositoryInterface(ABC):
    """
    Abstract interface for the job postings collection.

    Postings are append-only: there are no update or delete operations.
    All methods follow fail-fast semantics; store errors propagate.
    """

    @abstractmethod
    def find(
        self,
        filter: Dict[str, Any],
        sort: Optional[List[tuple]] = None,
        limit: int = 0,
        skip: int = 0,
    ) -> List[Dict[str, Any]]:
        """
        Find multiple job postings.

        Args:
            filter: MongoDB query filter
            sort: Sort order as list of (field, direction) tuples
            limit: Maximum documents to return (0 = no limit)
            skip: Number of documents to skip

        Returns:
            List of matching documents
        """
        pass

    @abstractmethod
    def count_documents(self, filter: Dict[str, Any]) -> int:
        """Count documents matching the filter."""
        pass

    @abstractmethod
    def insert_one(self, document: Dict[str, Any]) -> WriteResult:
        """
        Insert a single document.

        Returns:
            WriteResult with inserted_id set to the new document's _id
        """
        pass

    @abstractmethod
    def delete_all(self) -> int:
        """
        Remove every posting. Only used by the seed script's --clear flag.

        Returns:
            Number of deleted documents
        """
        pass

    @abstractmethod
    def ensure_indexes(self) -> None:
        """Ensure required indexes exist on the collection."""
        pass
