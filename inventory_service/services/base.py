"""
Shared business logic for resource services

Every write follows the same order: uniqueness, then dependent resources
(fail-fast, declaration order), then persistence. No check runs after a
write has started.
"""
from typing import Generic, List, Sequence, Tuple, TypeVar
from opentelemetry import trace
import logging

from inventory_service.core.dependencies import (
    DependencyRef,
    WriteStage,
    ensure_dependencies,
    ensure_unique,
)
from inventory_service.core.errors import ResourceNotFound
from inventory_service.core.merge import Patch, merge
from inventory_service.core.messages import render

logger = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)

E = TypeVar("E")


class EntityService(Generic[E]):
    """
    Base service for one resource

    Subclasses set ``resource`` (message and span prefix) and
    ``unique_fields``, and pass their dependency references to
    ``__init__`` in the order the entity declares the foreign keys.
    """

    resource: str = "resource"
    unique_fields: Tuple[str, ...] = ()

    def __init__(self, repository, dependencies: Sequence[DependencyRef] = ()):
        self.repository = repository
        self.dependencies: Tuple[DependencyRef, ...] = tuple(dependencies)

    def _span(self, operation: str):
        return tracer.start_as_current_span(f"{self.resource}_service.{operation}")

    def _unique_value(self, entity):
        values = tuple(getattr(entity, name) for name in self.unique_fields)
        return values if len(values) > 1 else values[0]

    @staticmethod
    def _enter(span, stage: WriteStage) -> None:
        span.set_attribute("write.stage", stage.value)

    def get_all(self) -> List[E]:
        """List every entity"""
        with self._span("get_all") as span:
            entities = self.repository.get_all()
            span.set_attribute(f"{self.resource}.count", len(entities))
            return entities

    def get(self, id: int) -> E:
        """Get entity by ID or raise ResourceNotFound"""
        with self._span("get") as span:
            span.set_attribute(f"{self.resource}.id", id)

            entity = self.repository.get(id)
            if entity is None:
                logger.warning(f"{self.resource} {id} not found")
                raise ResourceNotFound(render(f"{self.resource}.not_found", id=id))

            return entity

    def create(self, entity: E) -> E:
        """
        Create a new entity

        Process:
        1. Reject a taken unique value
        2. Resolve every foreign reference, stopping at the first miss
        3. Save and re-read
        """
        with self._span("create") as span:
            if self.unique_fields:
                self._enter(span, WriteStage.CHECKING_UNIQUENESS)
                ensure_unique(self.resource, self._unique_value(entity), self.repository.exists)

            self._enter(span, WriteStage.CHECKING_DEPENDENCIES)
            ensure_dependencies(entity, self.dependencies)

            self._enter(span, WriteStage.PERSISTING)
            id = self.repository.save(entity)

            self._enter(span, WriteStage.DONE)
            span.set_attribute(f"{self.resource}.id", id)
            logger.info(f"Created {self.resource} {id}")

            return self.repository.get(id)

    def update(self, id: int, patch: Patch) -> E:
        """
        Apply a partial update

        Only the unique fields and foreign keys the patch supplies are
        checked. A unique value equal to the entity's current one is not a
        conflict.
        """
        with self._span("update") as span:
            span.set_attribute(f"{self.resource}.id", id)
            found = self.get(id)

            self._enter(span, WriteStage.MERGING_OR_BUILDING)
            candidate = merge(found, patch)
            supplied = patch.supplied()

            if any(name in supplied for name in self.unique_fields):
                self._enter(span, WriteStage.CHECKING_UNIQUENESS)
                ensure_unique(
                    self.resource,
                    self._unique_value(candidate),
                    self.repository.exists,
                    current=self._unique_value(found),
                )

            self._enter(span, WriteStage.CHECKING_DEPENDENCIES)
            ensure_dependencies(candidate, self.dependencies, only=supplied)

            self._enter(span, WriteStage.PERSISTING)
            self.repository.update(candidate)

            self._enter(span, WriteStage.DONE)
            logger.info(f"Updated {self.resource} {id}: {', '.join(supplied)}")

            return self.repository.get(id)

    def delete(self, id: int) -> None:
        """Delete entity by ID or raise ResourceNotFound"""
        with self._span("delete") as span:
            span.set_attribute(f"{self.resource}.id", id)
            self.get(id)
            self.repository.delete(id)
            logger.info(f"Deleted {self.resource} {id}")

    def _report(self, operation: str, count, id: int = None):
        """
        Grouped counts for every entity, or the single row of one entity

        Raises ResourceNotFound when ``id`` names a missing entity.
        """
        with self._span(operation) as span:
            if id is None:
                rows = count()
                span.set_attribute(f"{self.resource}.report.rows", len(rows))
                return rows

            span.set_attribute(f"{self.resource}.id", id)
            self.get(id)
            return count(id)[0]
