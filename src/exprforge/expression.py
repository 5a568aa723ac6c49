"""Expression trees for the ExprForge expression engine.

An Expression is a type name, the ExpressionEvaluator bound to it, and an
ordered tuple of child expressions. Trees can be validated without running
them, evaluated against an arbitrary state object to get a (value, error)
pair, and rendered back to canonical text.

Usage:
    expr = and_expression(
        make_expression(">", None, accessor("count"), constant_expression(0)),
        accessor("enabled"),
    )
    expr.validate_tree()
    value, error = expr.try_evaluate({"count": 3, "enabled": True})
    str(expr)  # "((count > 0) && enabled)"
"""

from __future__ import annotations

import logging
import re
from decimal import Decimal
from typing import Any, Callable, Iterable

from exprforge.evaluator import EvaluateExpression, ExpressionEvaluator
from exprforge.lexer import KEYWORDS
from exprforge.registry import FunctionRegistry, default_registry
from exprforge.types import (
    ExpressionError,
    ExpressionType,
    ExpressionValidationError,
    FunctionCategory,
    ReturnType,
)

logger = logging.getLogger(__name__)

_PLAIN_NAME = re.compile(r"[a-zA-Z_][a-zA-Z0-9_]*")


class Expression:
    """An expression which can be validated, evaluated and rendered.

    Attributes:
        type: Operator symbol, function name or structural marker
        evaluator: Descriptor giving the type its behavior
        children: Child expressions; order is significant
    """

    def __init__(
        self,
        type: str,
        evaluator: ExpressionEvaluator | None = None,
        *children: Expression,
        registry: FunctionRegistry | None = None,
    ):
        if not isinstance(type, str) or not type:
            raise ExpressionError("Expression type must be a non-empty string")

        self._type = type
        if evaluator is None:
            evaluator = (registry or default_registry()).lookup(type)
        self._evaluator = evaluator
        self._children: tuple[Expression, ...] = ()
        self.children = children

    @property
    def type(self) -> str:
        return self._type

    @property
    def evaluator(self) -> ExpressionEvaluator:
        return self._evaluator

    @property
    def children(self) -> tuple[Expression, ...]:
        return self._children

    @children.setter
    def children(self, children: Iterable[Expression]) -> None:
        """Replace all children at once.

        Raises:
            ExpressionError: If a child is not an Expression, or if the
                replacement would make this node its own descendant
        """
        children = tuple(children)
        for child in children:
            if not isinstance(child, Expression):
                raise ExpressionError(
                    f"Children of '{self._type}' must be expressions, "
                    f"got {type(child).__name__}"
                )
            if child._contains(self):
                raise ExpressionError(
                    f"Expression '{self._type}' cannot be its own descendant"
                )
        self._children = children

    @property
    def return_type(self) -> ReturnType:
        """Expected type of the value produced by evaluation."""
        return self._evaluator.return_type

    @property
    def is_pure(self) -> bool:
        """True when every evaluator in the tree is declared pure."""
        return self._evaluator.pure and all(child.is_pure for child in self._children)

    def validate(self) -> None:
        """Validate this node only.

        Raises:
            ExpressionValidationError: If the evaluator rejects the node
        """
        self._evaluator.validate(self)

    def validate_tree(self) -> None:
        """Validate the whole tree, pre-order.

        Stops at the first invalid node.

        Raises:
            ExpressionValidationError: For the first node that fails
        """
        self.validate()
        for child in self._children:
            child.validate_tree()

    def try_evaluate(self, state: Any) -> tuple[Any, str | None]:
        """Evaluate the expression against a state object.

        Args:
            state: Mapping or object that accessor expressions resolve against

        Returns:
            (value, error). If error is not None, evaluation failed and value
            should not be trusted.
        """
        try:
            return self._evaluator.evaluate(self, state)
        except Exception as e:
            logger.debug(
                "Evaluator for '%s' raised instead of returning an error",
                self._type,
                exc_info=True,
            )
            return None, error_message(e)

    def render(self) -> str:
        """Render the canonical text form of the expression."""
        children = self._children

        # Memory paths: a.b.c and a[0]. Names the lexer would not read back
        # as an identifier keep the accessor('name', instance) form.
        if (
            self._type == ExpressionType.ACCESSOR
            and 1 <= len(children) <= 2
            and isinstance(children[0], Constant)
            and is_plain_name(children[0].value)
        ):
            prop = children[0].value
            if len(children) == 1:
                return prop
            return f"{children[1].render()}.{prop}"

        if self._type == ExpressionType.ELEMENT and len(children) == 2:
            return f"{children[0].render()}[{children[1].render()}]"

        args = [child.render() for child in children]
        if not self._type[0].isalpha() and len(children) >= 2:
            return "(" + f" {self._type} ".join(args) + ")"
        return f"{self._type}({', '.join(args)})"

    def _contains(self, node: Expression) -> bool:
        """Check if node is this expression or one of its descendants."""
        stack: list[Expression] = [self]
        while stack:
            current = stack.pop()
            if current is node:
                return True
            stack.extend(current._children)
        return False

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.render()!r})"


class Constant(Expression):
    """A literal value wrapped as a leaf expression."""

    def __init__(self, value: Any):
        self._value = value
        super().__init__(
            ExpressionType.CONSTANT,
            ExpressionEvaluator(
                evaluate=_evaluate_constant,
                return_type=infer_return_type(value),
                validate=_validate_leaf,
                category=FunctionCategory.STRUCTURE,
                description="Literal value",
            ),
        )

    @property
    def value(self) -> Any:
        return self._value

    def render(self) -> str:
        return render_value(self._value)


def _evaluate_constant(expression: Expression, state: Any) -> tuple[Any, str | None]:
    return expression.value, None


def _validate_leaf(expression: Expression) -> None:
    if expression.children:
        raise ExpressionValidationError(
            f"{expression.type} cannot have children", expression
        )


# -----------------------------------------------------------------------------
# Helpers
# -----------------------------------------------------------------------------


def infer_return_type(value: Any) -> ReturnType:
    """Return type of a literal value."""
    if isinstance(value, bool):
        return ReturnType.BOOLEAN
    if isinstance(value, (int, float, Decimal)):
        return ReturnType.NUMBER
    if isinstance(value, str):
        return ReturnType.STRING
    return ReturnType.OBJECT


def render_value(value: Any) -> str:
    """Render a literal value in expression syntax."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        escaped = value.replace("\\", "\\\\").replace("'", "\\'")
        return f"'{escaped}'"
    if isinstance(value, (list, tuple)):
        return f"{ExpressionType.ARRAY}({', '.join(render_value(v) for v in value)})"
    return str(value)


def is_plain_name(name: Any) -> bool:
    """True if name reads back as an identifier rather than a keyword."""
    return (
        isinstance(name, str)
        and _PLAIN_NAME.fullmatch(name) is not None
        and name.lower() not in KEYWORDS
    )


def error_message(error: Exception) -> str:
    """Human-readable message for a fault caught during evaluation."""
    return str(error) or type(error).__name__


# -----------------------------------------------------------------------------
# Convenience constructors
# -----------------------------------------------------------------------------


def make_expression(
    type: str,
    evaluator: ExpressionEvaluator | None = None,
    *children: Expression,
    registry: FunctionRegistry | None = None,
) -> Expression:
    """Make an expression and validate it.

    Raises:
        UnknownExpressionTypeError: If no evaluator is supplied or registered
        ExpressionValidationError: If the node is malformed
    """
    expression = Expression(type, evaluator, *children, registry=registry)
    expression.validate()
    return expression


def and_expression(
    *children: Expression, registry: FunctionRegistry | None = None
) -> Expression:
    """Construct and validate an And expression."""
    return make_expression(ExpressionType.AND, None, *children, registry=registry)


def or_expression(
    *children: Expression, registry: FunctionRegistry | None = None
) -> Expression:
    """Construct and validate an Or expression."""
    return make_expression(ExpressionType.OR, None, *children, registry=registry)


def not_expression(
    child: Expression, registry: FunctionRegistry | None = None
) -> Expression:
    """Construct and validate a Not expression."""
    return make_expression(ExpressionType.NOT, None, child, registry=registry)


def constant_expression(value: Any) -> Constant:
    """Construct a constant expression."""
    return Constant(value)


def accessor(
    property: str,
    instance: Expression | None = None,
    registry: FunctionRegistry | None = None,
) -> Expression:
    """Construct and validate a property accessor.

    Args:
        property: Property to look up
        instance: Expression producing the object holding the property, or
            None to look the property up on the state itself
    """
    if instance is None:
        return make_expression(
            ExpressionType.ACCESSOR, None, Constant(property), registry=registry
        )
    return make_expression(
        ExpressionType.ACCESSOR, None, Constant(property), instance, registry=registry
    )


def element(
    collection: Expression,
    index: Expression | Any,
    registry: FunctionRegistry | None = None,
) -> Expression:
    """Construct and validate an indexer; a non-expression index becomes a constant."""
    if not isinstance(index, Expression):
        index = Constant(index)
    return make_expression(
        ExpressionType.ELEMENT, None, collection, index, registry=registry
    )


def delegate_expression(evaluate: EvaluateExpression) -> Expression:
    """Construct an expression from a raw (expression, state) -> (value, error) delegate."""
    return Expression(
        ExpressionType.LAMBDA,
        ExpressionEvaluator(
            evaluate=evaluate,
            pure=False,
            category=FunctionCategory.STRUCTURE,
        ),
    )


def lambda_expression(function: Callable[[Any], Any]) -> Expression:
    """Construct an expression from a function over the state.

    Exceptions raised by the function are caught and surfaced as the
    error string.
    """

    def evaluate(expression: Expression, state: Any) -> tuple[Any, str | None]:
        try:
            return function(state), None
        except Exception as e:
            return None, error_message(e)

    return delegate_expression(evaluate)
