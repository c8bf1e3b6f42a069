"""
Dependency resolution protocol for create/update operations

Order per write request:

    VALIDATING -> MERGING_OR_BUILDING -> CHECKING_UNIQUENESS
        -> CHECKING_DEPENDENCIES -> PERSISTING -> DONE

Any stage may reject the request; nothing is retried. Uniqueness runs before
the existence checks, and existence checks stop at the first missing
reference.
"""
import enum
import logging
from dataclasses import dataclass
from typing import Any, Callable, Collection, Optional, Sequence

from inventory_service.core.errors import DependentResourceNotFound, ResourceAlreadyExists
from inventory_service.core.maybe import ABSENT
from inventory_service.core.messages import render

logger = logging.getLogger(__name__)


class WriteStage(str, enum.Enum):
    """Stages of a write request"""
    VALIDATING = "validating"
    MERGING_OR_BUILDING = "merging_or_building"
    CHECKING_UNIQUENESS = "checking_uniqueness"
    CHECKING_DEPENDENCIES = "checking_dependencies"
    PERSISTING = "persisting"
    DONE = "done"


@dataclass(frozen=True)
class DependencyRef:
    """
    A foreign key field and the lookup that resolves it

    Attributes:
        field: Entity attribute holding the referenced id
        kind: Resource kind of the referenced row (e.g. "warehouse")
        lookup: Returns the referenced row or None
    """
    field: str
    kind: str
    lookup: Callable[[Any], Optional[Any]]

    def message(self, resource_id) -> str:
        return render(f"{self.kind}.not_found", id=resource_id)


def ensure_unique(
    resource: str,
    value,
    exists: Callable[[Any], bool],
    current=ABSENT,
) -> None:
    """
    Reject a value already taken by another row

    Args:
        resource: Resource kind, selects the conflict message
        value: Candidate unique value
        exists: Repository lookup
        current: The entity's own value before an update; equal values
            are never a conflict

    Raises:
        ResourceAlreadyExists
    """
    if current is not ABSENT and value == current:
        return

    if exists(value):
        logger.warning(f"{resource} with unique value {value!r} already exists")
        raise ResourceAlreadyExists(render(f"{resource}.already_exists", value=value), value=value)


def ensure_dependencies(
    entity,
    dependencies: Sequence[DependencyRef],
    only: Optional[Collection[str]] = None,
) -> None:
    """
    Resolve every foreign reference of an entity, in declaration order

    Stops at the first reference that does not resolve.

    Args:
        entity: Candidate entity
        dependencies: References wired by the owning service
        only: Restrict the checks to these fields (update payloads)

    Raises:
        DependentResourceNotFound
    """
    for ref in dependencies:
        if only is not None and ref.field not in only:
            continue

        resource_id = getattr(entity, ref.field)
        if ref.lookup(resource_id) is None:
            logger.warning(f"Dependent {ref.kind} {resource_id} not found")
            raise DependentResourceNotFound(ref.message(resource_id), kind=ref.kind, resource_id=resource_id)
