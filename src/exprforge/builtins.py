"""Built-in expression types for ExprForge.

register_builtins() installs every built-in into a FunctionRegistry.
FunctionRegistry.with_builtins() and default_registry() call it for you.

Categories:
- Math: + - * / % ^ min max sum average
- Comparison: == != < <= > >=
- Logic: && || ! if exists
- String: concat length toLower toUpper trim replace startsWith endsWith contains
- Collection: count array first last
- Structure: accessor element

Unless an evaluator says otherwise, children are evaluated left to right
and the first child error is returned unchanged as the node's error.
"""

import operator
from collections.abc import Mapping
from decimal import Decimal
from functools import reduce
from typing import Any, Callable

from exprforge.evaluator import EvaluateExpression, ExpressionEvaluator, ValidateExpression
from exprforge.expression import Constant, Expression, error_message
from exprforge.registry import FunctionRegistry
from exprforge.state import StateAccess, default_access
from exprforge.types import (
    EvaluationError,
    ExpressionType,
    ExpressionValidationError,
    FunctionCategory,
    PropertyNotFoundError,
    ReturnType,
)


def register_builtins(registry: FunctionRegistry) -> None:
    """Register all built-in expression types with a registry."""
    _register_math_functions(registry)
    _register_comparison_functions(registry)
    _register_logic_functions(registry)
    _register_string_functions(registry)
    _register_collection_functions(registry)
    _register_structure_functions(registry)


# -----------------------------------------------------------------------------
# Evaluation helpers
# -----------------------------------------------------------------------------


def evaluate_children(expression: Expression, state: Any) -> tuple[list[Any], str | None]:
    """Evaluate children left to right, stopping at the first error."""
    args: list[Any] = []
    for child in expression.children:
        value, error = child.try_evaluate(state)
        if error is not None:
            return args, error
        args.append(value)
    return args, None


def apply(function: Callable[[list[Any]], Any]) -> EvaluateExpression:
    """Build an evaluate function that calls function with the child values.

    Faults raised by function become the error string.
    """

    def evaluate(expression: Expression, state: Any) -> tuple[Any, str | None]:
        args, error = evaluate_children(expression, state)
        if error is not None:
            return None, error
        try:
            return function(args), None
        except Exception as e:
            return None, error_message(e)

    return evaluate


def is_logic_true(value: Any) -> bool:
    """Only False and None are false."""
    if isinstance(value, bool):
        return value
    return value is not None


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float, Decimal)) and not isinstance(value, bool)


def _type_name(value: Any) -> str:
    if value is None:
        return "null"
    return type(value).__name__


def _numbers(name: str, args: list[Any]) -> list[Any]:
    """Check that every argument is a number."""
    if len(args) == 1 and isinstance(args[0], (list, tuple)):
        args = list(args[0])
    for value in args:
        if not _is_number(value):
            raise EvaluationError(f"{name} requires numbers, got {_type_name(value)}")
    return args


def _string(name: str, value: Any) -> str:
    """Check a string argument; null is treated as empty."""
    if value is None:
        return ""
    if not isinstance(value, str):
        raise EvaluationError(f"{name} requires a string, got {_type_name(value)}")
    return value


def _to_string(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


# -----------------------------------------------------------------------------
# Validation helpers
# -----------------------------------------------------------------------------


def validate_arity(minimum: int, maximum: int | None = None) -> ValidateExpression:
    """Validator checking the number of children."""

    def validate(expression: Expression) -> None:
        count = len(expression.children)
        if count < minimum:
            raise ExpressionValidationError(
                f"{expression.type} expects at least {minimum} argument(s), got {count}",
                expression,
            )
        if maximum is not None and count > maximum:
            raise ExpressionValidationError(
                f"{expression.type} expects at most {maximum} argument(s), got {count}",
                expression,
            )

    return validate


def validate_types(*allowed: ReturnType) -> ValidateExpression:
    """Validator checking children return types; OBJECT children always pass."""

    def validate(expression: Expression) -> None:
        for child in expression.children:
            if child.return_type != ReturnType.OBJECT and child.return_type not in allowed:
                expected = " or ".join(t.value for t in allowed)
                raise ExpressionValidationError(
                    f"{child} in {expression.type} is {child.return_type.value}, "
                    f"expected {expected}",
                    expression,
                )

    return validate


def validate_all(*validators: ValidateExpression) -> ValidateExpression:
    """Run validators in order."""

    def validate(expression: Expression) -> None:
        for validator in validators:
            validator(expression)

    return validate


def _numeric(minimum: int, maximum: int | None = None) -> ValidateExpression:
    return validate_all(validate_arity(minimum, maximum), validate_types(ReturnType.NUMBER))


def _textual(minimum: int, maximum: int | None = None) -> ValidateExpression:
    return validate_all(validate_arity(minimum, maximum), validate_types(ReturnType.STRING))


# -----------------------------------------------------------------------------
# Math
# -----------------------------------------------------------------------------


def _add(args: list[Any]) -> Any:
    return reduce(operator.add, _numbers("+", args))


def _subtract(args: list[Any]) -> Any:
    numbers = _numbers("-", args)
    if len(numbers) == 1:
        return -numbers[0]
    return reduce(operator.sub, numbers)


def _multiply(args: list[Any]) -> Any:
    return reduce(operator.mul, _numbers("*", args))


def _divide(args: list[Any]) -> Any:
    numbers = _numbers("/", args)
    result = numbers[0]
    for divisor in numbers[1:]:
        if divisor == 0:
            raise EvaluationError("Division by zero")
        result = result / divisor
    return result


def _mod(args: list[Any]) -> Any:
    numbers = _numbers("%", args)
    result = numbers[0]
    for divisor in numbers[1:]:
        if divisor == 0:
            raise EvaluationError("Modulo by zero")
        result = result % divisor
    return result


def _power(args: list[Any]) -> Any:
    result = reduce(operator.pow, _numbers("^", args))
    if isinstance(result, complex):
        raise EvaluationError("^ has no real result for a negative base")
    return result


def _min(args: list[Any]) -> Any:
    numbers = _numbers("min", args)
    if not numbers:
        raise EvaluationError("min requires at least one number")
    return min(numbers)


def _max(args: list[Any]) -> Any:
    numbers = _numbers("max", args)
    if not numbers:
        raise EvaluationError("max requires at least one number")
    return max(numbers)


def _sum(args: list[Any]) -> Any:
    return sum(_numbers("sum", args))


def _average(args: list[Any]) -> Any:
    numbers = _numbers("average", args)
    if not numbers:
        raise EvaluationError("average requires at least one number")
    return sum(numbers) / len(numbers)


def _register_math_functions(registry: FunctionRegistry) -> None:
    registry.register(
        ExpressionType.ADD,
        ExpressionEvaluator(
            evaluate=apply(_add),
            return_type=ReturnType.NUMBER,
            validate=_numeric(2),
            category=FunctionCategory.MATH,
            description="Adds numbers",
            examples=("price + tax",),
        ),
    )

    registry.register(
        ExpressionType.SUBTRACT,
        ExpressionEvaluator(
            evaluate=apply(_subtract),
            return_type=ReturnType.NUMBER,
            validate=_numeric(1),
            category=FunctionCategory.MATH,
            description="Subtracts numbers, or negates a single number",
            examples=("total - discount", "-balance"),
        ),
    )

    registry.register(
        ExpressionType.MULTIPLY,
        ExpressionEvaluator(
            evaluate=apply(_multiply),
            return_type=ReturnType.NUMBER,
            validate=_numeric(2),
            category=FunctionCategory.MATH,
            description="Multiplies numbers",
            examples=("quantity * unitPrice",),
        ),
    )

    registry.register(
        ExpressionType.DIVIDE,
        ExpressionEvaluator(
            evaluate=apply(_divide),
            return_type=ReturnType.NUMBER,
            validate=_numeric(2),
            category=FunctionCategory.MATH,
            description="Divides numbers; division by zero is an error",
            examples=("total / count",),
        ),
    )

    registry.register(
        ExpressionType.MOD,
        ExpressionEvaluator(
            evaluate=apply(_mod),
            return_type=ReturnType.NUMBER,
            validate=_numeric(2),
            category=FunctionCategory.MATH,
            description="Remainder of division; modulo by zero is an error",
            examples=("index % 2 == 0",),
        ),
    )

    registry.register(
        ExpressionType.POWER,
        ExpressionEvaluator(
            evaluate=apply(_power),
            return_type=ReturnType.NUMBER,
            validate=_numeric(2),
            category=FunctionCategory.MATH,
            description="Raises a number to a power",
            examples=("side ^ 2",),
        ),
    )

    registry.register(
        ExpressionType.MIN,
        ExpressionEvaluator(
            evaluate=apply(_min),
            return_type=ReturnType.NUMBER,
            validate=_numeric(1),
            category=FunctionCategory.MATH,
            description="Smallest of the numbers, or of a single array",
            examples=("min(a, b, c)", "min(scores)"),
        ),
    )

    registry.register(
        ExpressionType.MAX,
        ExpressionEvaluator(
            evaluate=apply(_max),
            return_type=ReturnType.NUMBER,
            validate=_numeric(1),
            category=FunctionCategory.MATH,
            description="Largest of the numbers, or of a single array",
            examples=("max(a, b, c)", "max(scores)"),
        ),
    )

    registry.register(
        ExpressionType.SUM,
        ExpressionEvaluator(
            evaluate=apply(_sum),
            return_type=ReturnType.NUMBER,
            validate=_numeric(1),
            category=FunctionCategory.MATH,
            description="Sum of the numbers, or of a single array",
            examples=("sum(subtotal, shipping)", "sum(lineTotals)"),
        ),
    )

    registry.register(
        ExpressionType.AVERAGE,
        ExpressionEvaluator(
            evaluate=apply(_average),
            return_type=ReturnType.NUMBER,
            validate=_numeric(1),
            category=FunctionCategory.MATH,
            description="Mean of the numbers, or of a single array",
            examples=("average(scores) >= 70",),
        ),
    )


# -----------------------------------------------------------------------------
# Comparison
# -----------------------------------------------------------------------------


def _equals(left: Any, right: Any) -> bool:
    """Equality across number types; booleans only equal booleans."""
    if isinstance(left, bool) != isinstance(right, bool):
        return False
    return left == right


def _compare(name: str, left: Any, right: Any) -> int:
    """Compare two numbers or two strings, returning -1, 0 or 1."""
    numbers = _is_number(left) and _is_number(right)
    strings = isinstance(left, str) and isinstance(right, str)
    if not (numbers or strings):
        raise EvaluationError(
            f"{name} cannot compare {_type_name(left)} and {_type_name(right)}"
        )
    if left < right:
        return -1
    if left > right:
        return 1
    return 0


def _comparison(name: str, test: Callable[[int], bool]) -> Callable[[list[Any]], bool]:
    def compare(args: list[Any]) -> bool:
        return test(_compare(name, args[0], args[1]))

    return compare


def _register_comparison_functions(registry: FunctionRegistry) -> None:
    registry.register(
        ExpressionType.EQUAL,
        ExpressionEvaluator(
            evaluate=apply(lambda args: _equals(args[0], args[1])),
            return_type=ReturnType.BOOLEAN,
            validate=validate_arity(2, 2),
            category=FunctionCategory.COMPARISON,
            description="True if both values are equal",
            examples=("status == 'active'",),
        ),
    )

    registry.register(
        ExpressionType.NOT_EQUAL,
        ExpressionEvaluator(
            evaluate=apply(lambda args: not _equals(args[0], args[1])),
            return_type=ReturnType.BOOLEAN,
            validate=validate_arity(2, 2),
            category=FunctionCategory.COMPARISON,
            description="True if the values differ",
            examples=("status != 'closed'",),
        ),
    )

    orderings = [
        (ExpressionType.LESS_THAN, lambda c: c < 0, "less than"),
        (ExpressionType.LESS_THAN_OR_EQUAL, lambda c: c <= 0, "less than or equal to"),
        (ExpressionType.GREATER_THAN, lambda c: c > 0, "greater than"),
        (ExpressionType.GREATER_THAN_OR_EQUAL, lambda c: c >= 0, "greater than or equal to"),
    ]
    for name, test, phrase in orderings:
        registry.register(
            name,
            ExpressionEvaluator(
                evaluate=apply(_comparison(name, test)),
                return_type=ReturnType.BOOLEAN,
                validate=validate_all(
                    validate_arity(2, 2),
                    validate_types(ReturnType.NUMBER, ReturnType.STRING),
                ),
                category=FunctionCategory.COMPARISON,
                description=f"True if the first value is {phrase} the second",
                examples=(f"age {name} 18",),
            ),
        )


# -----------------------------------------------------------------------------
# Logic
# -----------------------------------------------------------------------------


def _evaluate_and(expression: Expression, state: Any) -> tuple[Any, str | None]:
    """Stops at the first false child; later children are not evaluated."""
    for child in expression.children:
        value, error = child.try_evaluate(state)
        if error is not None:
            return None, error
        if not is_logic_true(value):
            return False, None
    return True, None


def _evaluate_or(expression: Expression, state: Any) -> tuple[Any, str | None]:
    """Stops at the first true child; later children are not evaluated."""
    for child in expression.children:
        value, error = child.try_evaluate(state)
        if error is not None:
            return None, error
        if is_logic_true(value):
            return True, None
    return False, None


def _evaluate_if(expression: Expression, state: Any) -> tuple[Any, str | None]:
    """Only the selected branch is evaluated."""
    condition, then_branch, else_branch = expression.children
    value, error = condition.try_evaluate(state)
    if error is not None:
        return None, error
    if is_logic_true(value):
        return then_branch.try_evaluate(state)
    return else_branch.try_evaluate(state)


def _evaluate_exists(expression: Expression, state: Any) -> tuple[Any, str | None]:
    """A lookup miss counts as not existing; other child errors propagate."""
    value, error = expression.children[0].try_evaluate(state)
    if isinstance(error, NotFoundMessage):
        return False, None
    if error is not None:
        return None, error
    return value is not None, None


def _register_logic_functions(registry: FunctionRegistry) -> None:
    registry.register(
        ExpressionType.AND,
        ExpressionEvaluator(
            evaluate=_evaluate_and,
            return_type=ReturnType.BOOLEAN,
            validate=validate_arity(2),
            category=FunctionCategory.LOGIC,
            description="True if every clause is true; stops at the first false clause",
            examples=("enabled && count > 0",),
        ),
    )

    registry.register(
        ExpressionType.OR,
        ExpressionEvaluator(
            evaluate=_evaluate_or,
            return_type=ReturnType.BOOLEAN,
            validate=validate_arity(2),
            category=FunctionCategory.LOGIC,
            description="True if any clause is true; stops at the first true clause",
            examples=("isAdmin || isOwner",),
        ),
    )

    registry.register(
        ExpressionType.NOT,
        ExpressionEvaluator(
            evaluate=apply(lambda args: not is_logic_true(args[0])),
            return_type=ReturnType.BOOLEAN,
            validate=validate_arity(1, 1),
            category=FunctionCategory.LOGIC,
            description="Negates a clause",
            examples=("!archived",),
        ),
    )

    registry.register(
        ExpressionType.IF,
        ExpressionEvaluator(
            evaluate=_evaluate_if,
            return_type=ReturnType.OBJECT,
            validate=validate_arity(3, 3),
            category=FunctionCategory.LOGIC,
            description="Returns the second argument if the first is true, else the third",
            examples=("if(vip, 0, shippingCost)",),
        ),
    )

    registry.register(
        ExpressionType.EXISTS,
        ExpressionEvaluator(
            evaluate=_evaluate_exists,
            return_type=ReturnType.BOOLEAN,
            validate=validate_arity(1, 1),
            category=FunctionCategory.LOGIC,
            description="True if the value resolves and is not null",
            examples=("exists(user.email)",),
        ),
    )


# -----------------------------------------------------------------------------
# String
# -----------------------------------------------------------------------------


def _length(args: list[Any]) -> int:
    return len(_string("length", args[0]))


def _replace(args: list[Any]) -> str:
    value = _string("replace", args[0])
    return value.replace(_string("replace", args[1]), _string("replace", args[2]))


def _starts_with(args: list[Any]) -> bool:
    if args[0] is None:
        return False
    return _string("startsWith", args[0]).startswith(_string("startsWith", args[1]))


def _ends_with(args: list[Any]) -> bool:
    if args[0] is None:
        return False
    return _string("endsWith", args[0]).endswith(_string("endsWith", args[1]))


def _contains(args: list[Any]) -> bool:
    collection, item = args
    if collection is None:
        return False
    if isinstance(collection, str):
        return _to_string(item) in collection
    if isinstance(collection, (Mapping, list, tuple, set, frozenset)):
        return item in collection
    raise EvaluationError(
        f"contains requires a string or collection, got {_type_name(collection)}"
    )


def _register_string_functions(registry: FunctionRegistry) -> None:
    registry.register(
        ExpressionType.CONCAT,
        ExpressionEvaluator(
            evaluate=apply(lambda args: "".join(_to_string(a) for a in args)),
            return_type=ReturnType.STRING,
            validate=validate_arity(1),
            category=FunctionCategory.STRING,
            description="Concatenates all arguments as strings; null is empty",
            examples=("concat(firstName, ' ', lastName)",),
        ),
    )

    registry.register(
        ExpressionType.LENGTH,
        ExpressionEvaluator(
            evaluate=apply(_length),
            return_type=ReturnType.NUMBER,
            validate=_textual(1, 1),
            category=FunctionCategory.STRING,
            description="Length of a string; null has length 0",
            examples=("length(name) > 0",),
        ),
    )

    registry.register(
        ExpressionType.TO_LOWER,
        ExpressionEvaluator(
            evaluate=apply(lambda args: _string("toLower", args[0]).lower()),
            return_type=ReturnType.STRING,
            validate=_textual(1, 1),
            category=FunctionCategory.STRING,
            description="Converts a string to lowercase",
            examples=("toLower(email)",),
        ),
    )

    registry.register(
        ExpressionType.TO_UPPER,
        ExpressionEvaluator(
            evaluate=apply(lambda args: _string("toUpper", args[0]).upper()),
            return_type=ReturnType.STRING,
            validate=_textual(1, 1),
            category=FunctionCategory.STRING,
            description="Converts a string to uppercase",
            examples=("toUpper(countryCode) == 'US'",),
        ),
    )

    registry.register(
        ExpressionType.TRIM,
        ExpressionEvaluator(
            evaluate=apply(lambda args: _string("trim", args[0]).strip()),
            return_type=ReturnType.STRING,
            validate=_textual(1, 1),
            category=FunctionCategory.STRING,
            description="Removes whitespace from both ends of a string",
            examples=("trim(name) != ''",),
        ),
    )

    registry.register(
        ExpressionType.REPLACE,
        ExpressionEvaluator(
            evaluate=apply(_replace),
            return_type=ReturnType.STRING,
            validate=_textual(3, 3),
            category=FunctionCategory.STRING,
            description="Replaces every occurrence of the second argument with the third",
            examples=("replace(phone, '-', '')",),
        ),
    )

    registry.register(
        ExpressionType.STARTS_WITH,
        ExpressionEvaluator(
            evaluate=apply(_starts_with),
            return_type=ReturnType.BOOLEAN,
            validate=_textual(2, 2),
            category=FunctionCategory.STRING,
            description="Tests if a string starts with a prefix",
            examples=("startsWith(sku, 'PRD-')",),
        ),
    )

    registry.register(
        ExpressionType.ENDS_WITH,
        ExpressionEvaluator(
            evaluate=apply(_ends_with),
            return_type=ReturnType.BOOLEAN,
            validate=_textual(2, 2),
            category=FunctionCategory.STRING,
            description="Tests if a string ends with a suffix",
            examples=("endsWith(email, '@example.com')",),
        ),
    )

    registry.register(
        ExpressionType.CONTAINS,
        ExpressionEvaluator(
            evaluate=apply(_contains),
            return_type=ReturnType.BOOLEAN,
            validate=validate_arity(2, 2),
            category=FunctionCategory.STRING,
            description="Tests if a string, array or mapping contains a value",
            examples=("contains(tags, 'urgent')", "contains(name, 'Inc')"),
        ),
    )


# -----------------------------------------------------------------------------
# Collection
# -----------------------------------------------------------------------------


def _count(args: list[Any]) -> int:
    value = args[0]
    if isinstance(value, (str, Mapping, list, tuple, set, frozenset)):
        return len(value)
    raise EvaluationError(f"count requires a collection, got {_type_name(value)}")


def _first(args: list[Any]) -> Any:
    value = args[0]
    if value is None:
        return None
    if not isinstance(value, (str, list, tuple)):
        raise EvaluationError(f"first requires an array, got {_type_name(value)}")
    return value[0] if value else None


def _last(args: list[Any]) -> Any:
    value = args[0]
    if value is None:
        return None
    if not isinstance(value, (str, list, tuple)):
        raise EvaluationError(f"last requires an array, got {_type_name(value)}")
    return value[-1] if value else None


def _register_collection_functions(registry: FunctionRegistry) -> None:
    registry.register(
        ExpressionType.COUNT,
        ExpressionEvaluator(
            evaluate=apply(_count),
            return_type=ReturnType.NUMBER,
            validate=validate_arity(1, 1),
            category=FunctionCategory.COLLECTION,
            description="Number of items in an array, mapping or string",
            examples=("count(items) >= 1",),
        ),
    )

    registry.register(
        ExpressionType.ARRAY,
        ExpressionEvaluator(
            evaluate=apply(list),
            return_type=ReturnType.OBJECT,
            validate=validate_arity(0),
            category=FunctionCategory.COLLECTION,
            description="Creates an array from its arguments",
            examples=("contains(array('a', 'b'), code)",),
        ),
    )

    registry.register(
        ExpressionType.FIRST,
        ExpressionEvaluator(
            evaluate=apply(_first),
            return_type=ReturnType.OBJECT,
            validate=validate_arity(1, 1),
            category=FunctionCategory.COLLECTION,
            description="First item of an array, or null if empty",
            examples=("first(items)",),
        ),
    )

    registry.register(
        ExpressionType.LAST,
        ExpressionEvaluator(
            evaluate=apply(_last),
            return_type=ReturnType.OBJECT,
            validate=validate_arity(1, 1),
            category=FunctionCategory.COLLECTION,
            description="Last item of an array, or null if empty",
            examples=("last(history)",),
        ),
    )


# -----------------------------------------------------------------------------
# Structure
# -----------------------------------------------------------------------------


class NotFoundMessage(str):
    """Error message for a property or index that could not be resolved.

    Compares and prints like any other error string; exists() uses the type
    to tell a lookup miss from a real failure.
    """


def _validate_accessor(expression: Expression) -> None:
    validate_arity(1, 2)(expression)
    prop = expression.children[0]
    if not isinstance(prop, Constant) or not isinstance(prop.value, str):
        raise ExpressionValidationError(
            f"{expression.type} property name must be a string constant, got {prop}",
            expression,
        )


def accessor_evaluator(access: StateAccess = default_access) -> ExpressionEvaluator:
    """Build the accessor evaluator on top of a StateAccess."""

    def evaluate(expression: Expression, state: Any) -> tuple[Any, str | None]:
        children = expression.children
        name = children[0].value
        instance = state
        if len(children) == 2:
            instance, error = children[1].try_evaluate(state)
            if error is not None:
                return None, error

        if instance is None:
            return None, NotFoundMessage(f"Cannot access '{name}' of null")
        try:
            return access.get_property(instance, name), None
        except PropertyNotFoundError as e:
            return None, NotFoundMessage(e)
        except Exception as e:
            return None, error_message(e)

    return ExpressionEvaluator(
        evaluate=evaluate,
        return_type=ReturnType.OBJECT,
        validate=_validate_accessor,
        category=FunctionCategory.STRUCTURE,
        description="Looks up a property on the state, or on the second argument",
        examples=("user.address.city",),
    )


def element_evaluator(access: StateAccess = default_access) -> ExpressionEvaluator:
    """Build the element (indexer) evaluator on top of a StateAccess."""

    def evaluate(expression: Expression, state: Any) -> tuple[Any, str | None]:
        args, error = evaluate_children(expression, state)
        if error is not None:
            return None, error

        collection, index = args
        if collection is None:
            return None, NotFoundMessage(f"Cannot index null with {index!r}")
        try:
            return access.get_index(collection, index), None
        except PropertyNotFoundError as e:
            return None, NotFoundMessage(e)
        except Exception as e:
            return None, error_message(e)

    return ExpressionEvaluator(
        evaluate=evaluate,
        return_type=ReturnType.OBJECT,
        validate=validate_arity(2, 2),
        category=FunctionCategory.STRUCTURE,
        description="Looks up an index of an array or a key of a mapping",
        examples=("items[0]", "prices['EUR']"),
    )


def _register_structure_functions(registry: FunctionRegistry) -> None:
    registry.register(ExpressionType.ACCESSOR, accessor_evaluator())
    registry.register(ExpressionType.ELEMENT, element_evaluator())
