"""
Route Table - Presentation Layer

Immutable description of the API surface. The table is built once at
startup and handed to the router; it knows, per resource, which methods
the collection path and the item path accept.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from src.shared import EnumHttpMethod

DEFAULT_PREFIX = "/api"
DEFAULT_ID_PATTERN = r"[0-9a-z]{8,24}"


class RouteKind(str, Enum):
    COLLECTION = "collection"
    ITEM = "item"


@dataclass(frozen=True)
class ResourceRoute:
    """Allowed methods of one resource, e.g. ``tasks``."""

    name: str
    collection_methods: Tuple[str, ...]
    item_methods: Tuple[str, ...]

    def methods_for(self, kind: RouteKind) -> Tuple[str, ...]:
        if kind is RouteKind.COLLECTION:
            return self.collection_methods
        return self.item_methods


@dataclass(frozen=True)
class RouteMatch:
    resource: str
    kind: RouteKind
    allowed_methods: Tuple[str, ...]
    item_id: Optional[str] = None


@dataclass(frozen=True)
class RouteTable:
    resources: Tuple[ResourceRoute, ...]
    prefix: str = DEFAULT_PREFIX
    id_pattern: str = DEFAULT_ID_PATTERN

    def __post_init__(self) -> None:
        names = [resource.name for resource in self.resources]
        if len(names) != len(set(names)):
            raise ValueError(f"Duplicate resource names in route table: {names}")

    def collection_path(self, resource: ResourceRoute) -> str:
        return f"{self.prefix}/{resource.name}"

    def match(self, path: str) -> Optional[RouteMatch]:
        """
        Resolve a request path.

        ``/api/tasks`` matches the tasks collection, ``/api/tasks/<id>``
        the tasks item route when ``<id>`` matches the id pattern. The id
        is the segment after the last slash.
        """
        head, _, tail = path.rpartition("/")
        for resource in self.resources:
            base = self.collection_path(resource)
            if path == base:
                return RouteMatch(
                    resource=resource.name,
                    kind=RouteKind.COLLECTION,
                    allowed_methods=resource.collection_methods,
                )
            if head == base and re.fullmatch(self.id_pattern, tail):
                return RouteMatch(
                    resource=resource.name,
                    kind=RouteKind.ITEM,
                    allowed_methods=resource.item_methods,
                    item_id=tail,
                )
        return None


def build_route_table(prefix: str = DEFAULT_PREFIX) -> RouteTable:
    """Route table of the devices and tasks API."""
    get = EnumHttpMethod.GET.value
    return RouteTable(
        prefix=prefix.rstrip("/"),
        resources=(
            ResourceRoute(
                name="devices",
                collection_methods=(get,),
                item_methods=(get,),
            ),
            ResourceRoute(
                name="tasks",
                collection_methods=(get, EnumHttpMethod.POST.value),
                item_methods=(
                    get,
                    EnumHttpMethod.PUT.value,
                    EnumHttpMethod.DELETE.value,
                ),
            ),
        ),
    )
