"""ExprForge: an embeddable expression engine.

This package provides:
- Expression: typed expression trees that validate, evaluate and render
- ExpressionEvaluator: the behavior bundle bound to an expression type
- FunctionRegistry: lookup table from type names to evaluators
- StateAccess: pluggable property and index resolution against state
- Parser: text to Expression trees through the same builder contract
"""

from exprforge.builtins import register_builtins
from exprforge.config import ExprForgeConfig, create_registry, load_extensions
from exprforge.evaluator import (
    EvaluateExpression,
    ExpressionEvaluator,
    ValidateExpression,
    validate_nothing,
)
from exprforge.expression import (
    Constant,
    Expression,
    accessor,
    and_expression,
    constant_expression,
    delegate_expression,
    element,
    lambda_expression,
    make_expression,
    not_expression,
    or_expression,
)
from exprforge.lexer import Lexer, LexerError, Token, TokenType
from exprforge.parser import ParseError, Parser, evaluate, parse
from exprforge.registry import FunctionRegistry, default_registry
from exprforge.state import (
    AttributeAccess,
    ChainedAccess,
    MappingAccess,
    StateAccess,
    default_access,
)
from exprforge.types import (
    EvaluationError,
    ExpressionError,
    ExpressionType,
    ExpressionValidationError,
    FunctionCategory,
    PropertyNotFoundError,
    RegistryFrozenError,
    ReturnType,
    UnknownExpressionTypeError,
)

__all__ = [
    # Expressions
    "Constant",
    "Expression",
    "accessor",
    "and_expression",
    "constant_expression",
    "delegate_expression",
    "element",
    "lambda_expression",
    "make_expression",
    "not_expression",
    "or_expression",
    # Evaluators and registry
    "EvaluateExpression",
    "ExpressionEvaluator",
    "FunctionRegistry",
    "ValidateExpression",
    "default_registry",
    "register_builtins",
    "validate_nothing",
    # State
    "AttributeAccess",
    "ChainedAccess",
    "MappingAccess",
    "StateAccess",
    "default_access",
    # Parsing
    "Lexer",
    "LexerError",
    "ParseError",
    "Parser",
    "Token",
    "TokenType",
    "evaluate",
    "parse",
    # Config
    "ExprForgeConfig",
    "create_registry",
    "load_extensions",
    # Types
    "EvaluationError",
    "ExpressionError",
    "ExpressionType",
    "ExpressionValidationError",
    "FunctionCategory",
    "PropertyNotFoundError",
    "RegistryFrozenError",
    "ReturnType",
    "UnknownExpressionTypeError",
]
