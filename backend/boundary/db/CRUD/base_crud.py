"""
Base CRUD operations for MongoDB collections.

Provides generic Create, Read, Update, Delete operations that can be
inherited and extended by collection-specific CRUD classes.

Dependencies: motor, pymongo, bson
System role: Foundation for all database CRUD operations
"""

from typing import Any, Mapping

from bson import ObjectId
from pymongo.results import DeleteResult, InsertOneResult, UpdateResult

from backend.boundary.db.connection import MongoGateway

Document = dict[str, Any]


def to_object_id(value: str | ObjectId) -> ObjectId:
    """
    Convert a path identifier into an ObjectId.

    Raises:
        bson.errors.InvalidId: If the value is not a 24-character hex string
    """
    if isinstance(value, ObjectId):
        return value
    return ObjectId(value)


class BaseCRUD:
    """
    Generic base class for CRUD operations on one named collection.

    Subclasses specify the collection name and can override or extend
    these methods for collection-specific queries.

    Attributes:
        collection_name: Name of the MongoDB collection to operate on
    """

    def __init__(self, collection_name: str) -> None:
        """
        Initialize CRUD with target collection.

        Args:
            collection_name: MongoDB collection for database operations
        """
        self.collection_name = collection_name

    def _collection(self, db: MongoGateway):
        return db.collection(self.collection_name)

    async def create(self, db: MongoGateway, document: Mapping[str, Any]) -> InsertOneResult:
        """
        Insert a new document.

        Args:
            db: Database gateway
            document: Field values; MongoDB generates the _id

        Returns:
            InsertOneResult with the generated inserted_id
        """
        return await self._collection(db).insert_one(dict(document))

    async def find(
        self,
        db: MongoGateway,
        criteria: Mapping[str, Any] | None = None,
    ) -> list[Document]:
        """
        Retrieve all documents matching a filter.

        Args:
            db: Database gateway
            criteria: MongoDB filter (None or empty for all documents)

        Returns:
            List of documents in natural order
        """
        cursor = self._collection(db).find(dict(criteria or {}))
        return await cursor.to_list(length=None)

    async def find_one(
        self,
        db: MongoGateway,
        criteria: Mapping[str, Any],
    ) -> Document | None:
        """
        Retrieve the first document matching a filter.

        Returns:
            Document if found, None otherwise
        """
        return await self._collection(db).find_one(dict(criteria))

    async def get_by_id(self, db: MongoGateway, id: str | ObjectId) -> Document | None:
        """
        Retrieve a single document by _id.

        Args:
            db: Database gateway
            id: ObjectId or its hex string

        Returns:
            Document if found, None otherwise
        """
        return await self.find_one(db, {"_id": to_object_id(id)})

    async def update_by_id(
        self,
        db: MongoGateway,
        id: str | ObjectId,
        fields: Mapping[str, Any],
    ) -> UpdateResult:
        """
        Set fields on a document by _id.

        Args:
            db: Database gateway
            id: ObjectId or its hex string
            fields: Fields to $set

        Returns:
            UpdateResult with matched/modified counts (zero when absent)
        """
        return await self._collection(db).update_one(
            {"_id": to_object_id(id)},
            {"$set": dict(fields)},
        )

    async def delete_by_id(self, db: MongoGateway, id: str | ObjectId) -> DeleteResult:
        """
        Delete a document by _id.

        Returns:
            DeleteResult; deleted_count is 0 if nothing matched
        """
        return await self._collection(db).delete_one({"_id": to_object_id(id)})
