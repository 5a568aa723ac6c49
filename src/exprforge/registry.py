"""Function registry for the ExprForge expression engine.

Maps expression type names (operator symbols or function names) to the
ExpressionEvaluator that gives them meaning. Expressions look their
evaluator up here at construction time when none is supplied explicitly.

Registries are ordinary objects: hosts build one at startup, extend it,
optionally freeze it, and pass it to expression builders. A lazily created
process-wide registry preloaded with the built-ins backs callers that do
not pass one.
"""

import logging
import threading
from types import MappingProxyType
from typing import Any, Mapping

from exprforge.evaluator import ExpressionEvaluator
from exprforge.types import (
    FunctionCategory,
    RegistryFrozenError,
    UnknownExpressionTypeError,
)

logger = logging.getLogger(__name__)


class FunctionRegistry:
    """Registry of expression evaluators by type name.

    Lookups read an immutable snapshot of the table. Registration takes a
    lock, copies the snapshot and swaps the new table in, so concurrent
    readers never see a partially applied registration. Once frozen, the
    registry rejects further registration.

    Example:
        registry = FunctionRegistry.with_builtins()
        registry.register("double", ExpressionEvaluator(evaluate=...))

        evaluator = registry.lookup("double")
    """

    def __init__(self, evaluators: Mapping[str, ExpressionEvaluator] | None = None):
        self._lock = threading.Lock()
        self._evaluators: Mapping[str, ExpressionEvaluator] = MappingProxyType(
            dict(evaluators or {})
        )
        self._frozen = False

    @classmethod
    def with_builtins(cls) -> "FunctionRegistry":
        """Create a registry preloaded with the built-in expression types."""
        from exprforge.builtins import register_builtins

        registry = cls()
        register_builtins(registry)
        return registry

    def register(self, name: str, evaluator: ExpressionEvaluator) -> None:
        """Register an evaluator for a type name.

        A later registration for the same name replaces the earlier one.

        Args:
            name: Expression type name, matched exactly and case-sensitively
            evaluator: Descriptor implementing the type

        Raises:
            RegistryFrozenError: If the registry has been frozen
            ValueError: If the name is empty
        """
        if not name:
            raise ValueError("Expression type name must not be empty")

        with self._lock:
            if self._frozen:
                raise RegistryFrozenError(
                    f"Cannot register '{name}': registry is frozen"
                )
            table = dict(self._evaluators)
            if name in table:
                logger.warning("Replacing registered expression type '%s'", name)
            table[name] = evaluator
            self._evaluators = MappingProxyType(table)

        logger.debug("Registered expression type '%s'", name)

    def lookup(self, name: str) -> ExpressionEvaluator:
        """Get the evaluator registered for a type name.

        Raises:
            UnknownExpressionTypeError: If nothing is registered under the name
        """
        evaluator = self._evaluators.get(name)
        if evaluator is None:
            raise UnknownExpressionTypeError(name)
        return evaluator

    def is_registered(self, name: str) -> bool:
        """Check if a type name is registered."""
        return name in self._evaluators

    def list_registered(self) -> list[str]:
        """List all registered type names."""
        return sorted(self._evaluators.keys())

    def list_by_category(self, category: FunctionCategory) -> list[str]:
        """List type names in a specific category."""
        return sorted(
            name
            for name, evaluator in self._evaluators.items()
            if evaluator.category == category
        )

    def freeze(self) -> None:
        """Reject all further registration."""
        with self._lock:
            self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def copy(self) -> "FunctionRegistry":
        """Return an unfrozen registry with the same entries."""
        return FunctionRegistry(self._evaluators)

    def export_documentation(self) -> dict[str, Any]:
        """Export the registry for documentation.

        Returns:
            Dict with all type definitions, also organized by category
        """
        by_category: dict[str, list[dict[str, Any]]] = {}
        functions: dict[str, dict[str, Any]] = {}
        for name in self.list_registered():
            doc = self._evaluators[name].to_dict(name)
            functions[name] = doc
            by_category.setdefault(doc["category"], []).append(doc)

        return {"functions": functions, "byCategory": by_category}

    def __contains__(self, name: object) -> bool:
        return name in self._evaluators

    def __len__(self) -> int:
        return len(self._evaluators)


_default_registry: FunctionRegistry | None = None
_default_lock = threading.Lock()


def default_registry() -> FunctionRegistry:
    """Return the process-wide registry, creating it on first use."""
    global _default_registry
    if _default_registry is None:
        with _default_lock:
            if _default_registry is None:
                _default_registry = FunctionRegistry.with_builtins()
    return _default_registry
