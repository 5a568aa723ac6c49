"""Evaluator descriptors for the ExprForge expression engine.

An ExpressionEvaluator bundles everything an expression type needs:
its declared return type, a validator that checks the shape of a node,
and an evaluation function that computes a (value, error) pair against
a state object. Descriptors also carry documentation metadata so the
registry can export a function reference.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable

from exprforge.types import FunctionCategory, ReturnType

if TYPE_CHECKING:
    from exprforge.expression import Expression

# (expression, state) -> (value, error)
EvaluateExpression = Callable[["Expression", Any], tuple[Any, "str | None"]]

# expression -> None, raises ExpressionValidationError
ValidateExpression = Callable[["Expression"], None]


def validate_nothing(expression: Expression) -> None:
    """Validator that accepts any shape."""
    pass


@dataclass(frozen=True)
class ExpressionEvaluator:
    """Information on how to validate and evaluate an expression type.

    Attributes:
        evaluate: Computes (value, error) for a node against a state object.
            Must not raise; faults are reported through the error string.
        return_type: Declared type of the value produced
        validate: Checks the node's children, raising ExpressionValidationError
        pure: False when evaluation may have effects outside the tree and
            state, e.g. host supplied lambdas
        category: Category for documentation organization
        description: Human-readable description
        examples: Example expressions using this type
    """

    evaluate: EvaluateExpression
    return_type: ReturnType = ReturnType.OBJECT
    validate: ValidateExpression = validate_nothing
    pure: bool = True
    category: FunctionCategory = FunctionCategory.CUSTOM
    description: str = ""
    examples: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self, name: str) -> dict[str, Any]:
        """Export for documentation."""
        return {
            "name": name,
            "description": self.description,
            "category": self.category.value,
            "returnType": self.return_type.value,
            "pure": self.pure,
            "examples": list(self.examples),
        }
