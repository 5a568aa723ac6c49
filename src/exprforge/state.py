"""State access for accessor and element expressions.

The state object handed to Expression.try_evaluate() can be a mapping or
an arbitrary object. Accessor and element evaluators resolve names and
indexes through a StateAccess implementation instead of poking at the
object directly, so hosts can plug in their own resolution rules.

Resolution order of the default access: keyed mapping lookup first, then
public attributes and sequence indexing.
"""

from collections.abc import Mapping, Sequence
from typing import Any, Protocol

from exprforge.types import EvaluationError, PropertyNotFoundError


class StateAccess(Protocol):
    """Protocol for resolving properties and indexes against an instance.

    Both methods raise PropertyNotFoundError when the instance has no such
    member, and EvaluationError for any other resolution failure.
    """

    def get_property(self, instance: Any, name: str) -> Any:
        ...

    def get_index(self, instance: Any, index: Any) -> Any:
        ...


class MappingAccess:
    """Keyed lookup against mappings."""

    def get_property(self, instance: Any, name: str) -> Any:
        return self._lookup(instance, name)

    def get_index(self, instance: Any, index: Any) -> Any:
        return self._lookup(instance, index)

    def _lookup(self, instance: Any, key: Any) -> Any:
        if isinstance(instance, Mapping):
            try:
                return instance[key]
            except (KeyError, TypeError):
                pass
        raise PropertyNotFoundError(key)


class AttributeAccess:
    """Structured access: public attributes and integer sequence indexes.

    Methods are not properties; a callable attribute is treated as missing.
    """

    def get_property(self, instance: Any, name: str) -> Any:
        if not isinstance(name, str) or name.startswith("_"):
            raise PropertyNotFoundError(name)

        value = getattr(instance, name, _MISSING)
        if value is _MISSING or callable(value):
            raise PropertyNotFoundError(name)
        return value

    def get_index(self, instance: Any, index: Any) -> Any:
        if not isinstance(instance, Sequence):
            raise PropertyNotFoundError(index)

        if isinstance(index, bool) or not isinstance(index, int):
            raise EvaluationError(
                f"Index must be an integer, got {type(index).__name__}"
            )
        if 0 <= index < len(instance):
            return instance[index]
        raise EvaluationError(f"Index {index} is out of range")


class ChainedAccess:
    """Tries each access in order until one resolves the member."""

    def __init__(self, *accessors: StateAccess):
        self.accessors = accessors

    def get_property(self, instance: Any, name: str) -> Any:
        for access in self.accessors:
            try:
                return access.get_property(instance, name)
            except PropertyNotFoundError:
                continue
        raise PropertyNotFoundError(name)

    def get_index(self, instance: Any, index: Any) -> Any:
        for access in self.accessors:
            try:
                return access.get_index(instance, index)
            except PropertyNotFoundError:
                continue
        raise PropertyNotFoundError(index)


_MISSING = object()

default_access: StateAccess = ChainedAccess(MappingAccess(), AttributeAccess())
