"""
Sparse partial updates

A ``Patch`` subclass mirrors one entity dataclass with every field typed as
``Maybe[T]``. ``merge`` copies the present fields onto a copy of the entity
and keeps everything else.
"""
import dataclasses
import inspect
from typing import Any, ClassVar, Dict, List, Optional, TypeVar

from inventory_service.core.maybe import ABSENT, Present

E = TypeVar("E")


class Patch:
    """
    Base class for per-entity patch dataclasses

    Subclasses name their entity in the class statement and are decorated
    with ``@dataclass(frozen=True)``; every field must default to ``ABSENT``:

        @dataclass(frozen=True)
        class BuyerPatch(Patch, entity=Buyer):
            first_name: Maybe[str] = ABSENT

    Field names are checked against the entity when the subclass is defined.
    """

    __entity__: ClassVar[Optional[type]] = None

    def __init_subclass__(cls, entity: type = None, **kwargs):
        super().__init_subclass__(**kwargs)
        if entity is None:
            return

        if not dataclasses.is_dataclass(entity):
            raise TypeError(f"{cls.__name__}: entity {entity!r} is not a dataclass")

        entity_fields = {f.name for f in dataclasses.fields(entity)}
        unknown = [name for name in inspect.get_annotations(cls) if name not in entity_fields]
        if unknown:
            raise TypeError(f"{cls.__name__}: fields {unknown} do not exist on {entity.__name__}")

        cls.__entity__ = entity

    def present(self) -> Dict[str, Any]:
        """Values of the supplied fields, in declaration order"""
        return {
            f.name: getattr(self, f.name).value
            for f in dataclasses.fields(self)
            if isinstance(getattr(self, f.name), Present)
        }

    def supplied(self) -> List[str]:
        return [f.name for f in dataclasses.fields(self) if isinstance(getattr(self, f.name), Present)]

    def is_blank(self) -> bool:
        return all(getattr(self, f.name) is ABSENT for f in dataclasses.fields(self))


def merge(existing: E, patch: Patch) -> E:
    """
    Overlay a patch onto an entity

    Returns a new entity; ``existing`` is never modified. An all-absent patch
    returns ``existing`` unchanged.
    """
    entity = type(patch).__entity__
    if entity is not None and not isinstance(existing, entity):
        raise TypeError(f"{type(patch).__name__} cannot be merged onto {type(existing).__name__}")

    changes = patch.present()
    if not changes:
        return existing

    return dataclasses.replace(existing, **changes)
