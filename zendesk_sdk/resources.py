"""Resource operation sets and the resource registry.

Every resource type is described once by a `ResourceDescriptor`. An
`OperationSet` binds a descriptor to the shared request pipeline and exposes
list/show/show_many/create/update/delete. Parent scopes (``/tickets/7``)
reuse the same descriptors under a derived prefix.
"""

import asyncio
from collections.abc import Awaitable, Callable, Iterator, Mapping, Sequence
from typing import Any

from zendesk_sdk._internal.pipeline import Params, RequestPipeline, parse_params
from zendesk_sdk.exceptions import ZendeskAPIError, ZendeskShapeError
from zendesk_sdk.models.resource import ResourceDescriptor

Record = dict[str, Any]
Records = list[Record]
ResourceId = int | str

# =============================================================================
# Registry
# =============================================================================

TICKETS = ResourceDescriptor(singular="ticket", plural="tickets")
COMMENTS = ResourceDescriptor(singular="comment", plural="comments")
TICKET_FIELDS = ResourceDescriptor(singular="ticket_field", plural="ticket_fields")
ORGANIZATIONS = ResourceDescriptor(singular="organization", plural="organizations")
USERS = ResourceDescriptor(singular="user", plural="users")
USER_FIELDS = ResourceDescriptor(singular="user_field", plural="user_fields")
MACROS = ResourceDescriptor(singular="macro", plural="macros")
SEARCH = ResourceDescriptor(singular="search", plural="search", list_key="results")

TOP_LEVEL: dict[str, ResourceDescriptor] = {
    "tickets": TICKETS,
    "ticket_fields": TICKET_FIELDS,
    "organizations": ORGANIZATIONS,
    "users": USERS,
    "user_fields": USER_FIELDS,
    "macros": MACROS,
    "search": SEARCH,
}

# parent name -> (parent descriptor, child name -> child descriptor)
NESTED: dict[str, tuple[ResourceDescriptor, dict[str, ResourceDescriptor]]] = {
    "ticket": (TICKETS, {"comments": COMMENTS}),
    "organization": (ORGANIZATIONS, {"tickets": TICKETS}),
    "user": (USERS, {"tickets": TICKETS}),
}


def unwrap(envelope: Any, key: str) -> Any:
    """Extract the named field from a response envelope.

    Raises:
        ZendeskShapeError: If the envelope is not an object or lacks `key`.
    """
    if not isinstance(envelope, dict) or key not in envelope:
        raise ZendeskShapeError(f"Response has no '{key}' field")
    return envelope[key]


def stringify_ids(ids: Sequence[ResourceId] | str) -> str:
    if isinstance(ids, str):
        return ids
    return ",".join(str(resource_id) for resource_id in ids)


# =============================================================================
# Operation Sets
# =============================================================================


class OperationSet:
    """CRUD operations for one resource type at one URL prefix.

    Each call issues exactly one request. Failures surface as
    `ZendeskAPIError` (or a subclass); anything else raised along the way is
    wrapped in one with the original kept as ``__cause__``.
    """

    def __init__(self, descriptor: ResourceDescriptor, pipeline: RequestPipeline) -> None:
        self._descriptor = descriptor
        self._pipeline = pipeline

    @property
    def descriptor(self) -> ResourceDescriptor:
        return self._descriptor

    def __repr__(self) -> str:
        return f"OperationSet({self._descriptor.prefix}/{self._descriptor.plural})"

    async def list(self, params: Params = None, *, cancel: asyncio.Event | None = None) -> Records:
        """List records: GET {prefix}/{plural}.json."""
        d = self._descriptor
        return await self._fetch(
            self._pipeline.execute("GET", d.collection_path(), params, cancel=cancel),
            d.collection_key,
        )

    async def show(
        self,
        resource_id: ResourceId,
        params: Params = None,
        *,
        cancel: asyncio.Event | None = None,
    ) -> Record:
        """Fetch one record: GET {prefix}/{plural}/{id}.json."""
        d = self._descriptor
        return await self._fetch(
            self._pipeline.execute("GET", d.member_path(resource_id), params, cancel=cancel),
            d.singular,
        )

    async def show_many(
        self,
        ids: Sequence[ResourceId] | str,
        params: Params = None,
        *,
        cancel: asyncio.Event | None = None,
    ) -> Records:
        """Fetch several records by id: GET {prefix}/{plural}/show_many.json?ids=...

        The synthesized ``ids`` parameter overrides one passed in `params`.
        """
        d = self._descriptor
        merged = {**(parse_params(params) or {}), "ids": stringify_ids(ids)}
        return await self._fetch(
            self._pipeline.execute("GET", d.show_many_path(), merged, cancel=cancel),
            d.collection_key,
        )

    async def create(
        self,
        attributes: Record | None = None,
        *,
        cancel: asyncio.Event | None = None,
    ) -> Record:
        """Create a record: POST {prefix}/{plural}.json with {singular: attributes}."""
        d = self._descriptor
        return await self._fetch(
            self._pipeline.execute(
                "POST", d.collection_path(), {d.singular: attributes}, cancel=cancel
            ),
            d.singular,
        )

    async def update(
        self,
        resource_id: ResourceId,
        attributes: Record | None = None,
        *,
        cancel: asyncio.Event | None = None,
    ) -> Record:
        """Update a record: PUT {prefix}/{plural}/{id}.json with {singular: attributes}."""
        d = self._descriptor
        return await self._fetch(
            self._pipeline.execute(
                "PUT", d.member_path(resource_id), {d.singular: attributes}, cancel=cancel
            ),
            d.singular,
        )

    async def delete(self, resource_id: ResourceId, *, cancel: asyncio.Event | None = None) -> Any:
        """Delete a record: DELETE {prefix}/{plural}/{id}.json.

        Returns the raw envelope, usually ``{}``.
        """
        return await self._fetch(
            self._pipeline.execute(
                "DELETE", self._descriptor.member_path(resource_id), cancel=cancel
            ),
            None,
        )

    async def _fetch(self, request: Awaitable[Any], key: str | None) -> Any:
        try:
            envelope = await request
            return envelope if key is None else unwrap(envelope, key)
        except ZendeskAPIError:
            raise
        except Exception as e:
            raise ZendeskAPIError(str(e)) from e


def make_operations(
    pipeline: RequestPipeline,
    singular: str,
    plural: str,
    *,
    list_key: str | None = None,
) -> Callable[[str], OperationSet]:
    """Build a factory of operation sets for one resource type.

    Args:
        pipeline: Shared request pipeline.
        singular: Envelope key for one record.
        plural: Path segment and envelope key for collections.
        list_key: Envelope key of list responses when it is not `plural`.

    Returns:
        A function taking a URL prefix ('' for top level) and returning the
        bound OperationSet.
    """
    descriptor = ResourceDescriptor(singular=singular, plural=plural, list_key=list_key)

    def bind(prefix: str = "") -> OperationSet:
        return OperationSet(descriptor.scoped(prefix), pipeline)

    return bind


# =============================================================================
# Nesting
# =============================================================================


class ResourceScope(Mapping[str, OperationSet]):
    """Child operation sets scoped under one parent record.

    Children are reachable by key (``scope["comments"]``) or attribute
    (``scope.comments``).
    """

    def __init__(self, prefix: str, operations: dict[str, OperationSet]) -> None:
        self._prefix = prefix
        self._operations = operations

    @property
    def prefix(self) -> str:
        return self._prefix

    def __getitem__(self, name: str) -> OperationSet:
        return self._operations[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._operations)

    def __len__(self) -> int:
        return len(self._operations)

    def __getattr__(self, name: str) -> OperationSet:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._operations[name]
        except KeyError:
            raise AttributeError(f"{self._prefix} has no sub-resource '{name}'") from None

    def __repr__(self) -> str:
        return f"ResourceScope({self._prefix}: {', '.join(self._operations)})"


def make_scope(
    pipeline: RequestPipeline,
    parent: ResourceDescriptor,
    children: Mapping[str, ResourceDescriptor],
) -> Callable[[ResourceId], ResourceScope]:
    """Build a function mapping a parent id to its scoped child operations."""

    def scope(parent_id: ResourceId) -> ResourceScope:
        prefix = f"{parent.prefix}/{parent.plural}/{parent_id}"
        return ResourceScope(
            prefix,
            {name: OperationSet(child.scoped(prefix), pipeline) for name, child in children.items()},
        )

    return scope
