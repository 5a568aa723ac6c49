"""Core types for the ExprForge expression engine.

This module defines the vocabulary shared by every layer:
- ReturnType: the value category an expression produces
- ExpressionType: names of the built-in expression types
- FunctionCategory: documentation grouping for registered types
- The exception hierarchy for construction, validation and evaluation
"""

from enum import Enum
from typing import Any


class ReturnType(Enum):
    """Type expected from evaluating an expression.

    BOOLEAN: True or False
    NUMBER: int, float or Decimal
    OBJECT: Any value is possible
    STRING: str
    """

    BOOLEAN = "boolean"
    NUMBER = "number"
    OBJECT = "object"
    STRING = "string"


class FunctionCategory(Enum):
    """Categories for organizing expression types in documentation."""

    MATH = "math"
    COMPARISON = "comparison"
    LOGIC = "logic"
    STRING = "string"
    COLLECTION = "collection"
    STRUCTURE = "structure"
    CUSTOM = "custom"


class ExpressionType:
    """Names of the built-in expression types.

    Symbolic names render infix, alphabetic names render as function calls.
    """

    # Math
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    MOD = "%"
    POWER = "^"
    MIN = "min"
    MAX = "max"
    SUM = "sum"
    AVERAGE = "average"

    # Comparison
    EQUAL = "=="
    NOT_EQUAL = "!="
    LESS_THAN = "<"
    LESS_THAN_OR_EQUAL = "<="
    GREATER_THAN = ">"
    GREATER_THAN_OR_EQUAL = ">="

    # Logic
    AND = "&&"
    OR = "||"
    NOT = "!"
    IF = "if"
    EXISTS = "exists"

    # String
    CONCAT = "concat"
    LENGTH = "length"
    TO_LOWER = "toLower"
    TO_UPPER = "toUpper"
    TRIM = "trim"
    REPLACE = "replace"
    STARTS_WITH = "startsWith"
    ENDS_WITH = "endsWith"
    CONTAINS = "contains"

    # Collection
    COUNT = "count"
    ARRAY = "array"
    FIRST = "first"
    LAST = "last"

    # Structure
    ACCESSOR = "accessor"
    ELEMENT = "element"
    CONSTANT = "constant"
    LAMBDA = "lambda"


# -----------------------------------------------------------------------------
# Errors
# -----------------------------------------------------------------------------


class ExpressionError(Exception):
    """Base class for expression construction and validation errors."""
    pass


class UnknownExpressionTypeError(ExpressionError):
    """No evaluator was supplied and the registry has no entry for the type."""

    def __init__(self, type_name: str):
        self.type_name = type_name
        super().__init__(f"Unknown expression type: {type_name}")


class ExpressionValidationError(ExpressionError):
    """An expression failed structural or type validation.

    Attributes:
        expression: The node whose validator rejected it, when known
    """

    def __init__(self, message: str, expression: Any = None):
        self.expression = expression
        super().__init__(message)


class RegistryFrozenError(ExpressionError):
    """Registration was attempted on a frozen registry."""
    pass


class EvaluationError(Exception):
    """Error during expression evaluation.

    Raised only inside evaluator implementations; every public evaluation
    entry point converts it into the error half of a (value, error) pair.
    """
    pass


class PropertyNotFoundError(EvaluationError):
    """A property or index could not be resolved against an instance."""

    def __init__(self, name: Any):
        self.name = name
        super().__init__(f"'{name}' does not exist")
