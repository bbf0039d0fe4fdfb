"""
Anjali Furniture Backend — Abstract Data-Store Gateway
========================================================

What:  The contract every data store implements: list, get, create, update,
       and delete over the four storefront collections.
Why:   Route handlers depend on this interface only, so they can run against
       SQLAlchemy in production and an in-memory fake in tests.
How:   Public methods enforce the per-collection operation subset, then
       delegate to the abstract `_list` / `_get` / `_create` / `_update` /
       `_delete` hooks implemented by concrete stores.

Contract:
    - One round trip per operation; no batching, retries, or multi-step
      transactions
    - `list_all` always orders by created_at, newest first
    - Records are plain dicts (column name → value); the gateway does not
      inspect or validate field mappings
    - Every failure is raised as StoreError with a StoreErrorKind tag
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Dict, FrozenSet, List, Mapping

from app.exceptions import StoreError, StoreErrorKind

Record = Dict[str, Any]
Fields = Mapping[str, Any]
RecordId = Any


class Collection(str, Enum):
    """The resource collections exposed by the API, valued by table name."""

    PRODUCTS = "products"
    WOODS = "woods"
    CUSTOMER_REQUESTS = "customer_requests"
    CONFIG = "config"


class Operation(str, Enum):
    LIST = "list"
    GET = "get"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


# Woods have no single-record read; config is a read/update singleton
SUPPORTED_OPERATIONS: Dict[Collection, FrozenSet[Operation]] = {
    Collection.PRODUCTS: frozenset(Operation),
    Collection.WOODS: frozenset(
        {Operation.LIST, Operation.CREATE, Operation.UPDATE, Operation.DELETE}
    ),
    Collection.CUSTOMER_REQUESTS: frozenset(
        {Operation.LIST, Operation.CREATE, Operation.UPDATE, Operation.DELETE}
    ),
    Collection.CONFIG: frozenset({Operation.GET, Operation.UPDATE}),
}


def not_found(collection: Collection, record_id: RecordId) -> StoreError:
    """Builds the StoreError raised when no row matches an id."""
    return StoreError(
        message=f"No {collection.value} row found with id '{record_id}'",
        kind=StoreErrorKind.NOT_FOUND,
        collection=collection.value,
        context={"id": str(record_id)},
    )


class DataStore(ABC):
    """
    Abstract gateway over the storefront collections.

    Implementations:
        - SQLAlchemyStore: async SQLAlchemy against PostgreSQL (production)
        - InMemoryStore (tests/conftest.py): dict-backed fake for route tests
    """

    def supports(self, collection: Collection, operation: Operation) -> bool:
        return operation in SUPPORTED_OPERATIONS[collection]

    def _ensure_supported(self, collection: Collection, operation: Operation) -> None:
        if not self.supports(collection, operation):
            raise StoreError(
                message=(
                    f"Operation '{operation.value}' is not supported "
                    f"on '{collection.value}'"
                ),
                kind=StoreErrorKind.UNKNOWN,
                collection=collection.value,
            )

    # ── Public operations ─────────────────────────────────────────────────

    async def list_all(self, collection: Collection) -> List[Record]:
        """Returns every record in the collection, newest first."""
        self._ensure_supported(collection, Operation.LIST)
        return await self._list(collection)

    async def get_by_id(self, collection: Collection, record_id: RecordId) -> Record:
        """
        Returns exactly one record.

        Raises:
            StoreError(NOT_FOUND): no row has this id
            StoreError(CONFLICT): more than one row has this id
        """
        self._ensure_supported(collection, Operation.GET)
        return await self._get(collection, record_id)

    async def create(self, collection: Collection, fields: Fields) -> Record:
        """Inserts one record and returns it with its store-assigned id."""
        self._ensure_supported(collection, Operation.CREATE)
        return await self._create(collection, fields)

    async def update(
        self, collection: Collection, record_id: RecordId, fields: Fields
    ) -> Record:
        """
        Applies `fields` to the matching record and returns the result.
        Columns absent from `fields` are left unchanged.
        """
        self._ensure_supported(collection, Operation.UPDATE)
        if not fields:
            raise StoreError(
                message="No fields to update",
                kind=StoreErrorKind.UNKNOWN,
                collection=collection.value,
            )
        return await self._update(collection, record_id, fields)

    async def delete_by_id(self, collection: Collection, record_id: RecordId) -> None:
        """Deletes the record; a missing id raises StoreError(NOT_FOUND)."""
        self._ensure_supported(collection, Operation.DELETE)
        await self._delete(collection, record_id)

    # ── Implementation hooks ──────────────────────────────────────────────

    @abstractmethod
    async def _list(self, collection: Collection) -> List[Record]:
        ...

    @abstractmethod
    async def _get(self, collection: Collection, record_id: RecordId) -> Record:
        ...

    @abstractmethod
    async def _create(self, collection: Collection, fields: Fields) -> Record:
        ...

    @abstractmethod
    async def _update(
        self, collection: Collection, record_id: RecordId, fields: Fields
    ) -> Record:
        ...

    @abstractmethod
    async def _delete(self, collection: Collection, record_id: RecordId) -> None:
        ...
