"""Tests for the ExprForge function registry."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from exprforge import (
    Expression,
    ExpressionEvaluator,
    FunctionCategory,
    FunctionRegistry,
    RegistryFrozenError,
    ReturnType,
    UnknownExpressionTypeError,
    constant_expression,
    default_registry,
    parse,
)
from exprforge.builtins import apply, validate_arity


def _double() -> ExpressionEvaluator:
    return ExpressionEvaluator(
        evaluate=apply(lambda args: args[0] * 2),
        return_type=ReturnType.NUMBER,
        validate=validate_arity(1, 1),
        category=FunctionCategory.MATH,
        description="Doubles a number",
    )


@pytest.fixture
def registry():
    return FunctionRegistry.with_builtins()


class TestFunctionRegistry:
    """Tests for registration and lookup."""

    def test_empty_registry(self):
        registry = FunctionRegistry()
        assert len(registry) == 0
        with pytest.raises(UnknownExpressionTypeError):
            registry.lookup("&&")

    def test_builtins_registered(self, registry):
        for name in ["&&", "||", "!", "+", "==", "accessor", "element", "concat"]:
            assert registry.is_registered(name)

    def test_structural_leaf_types_are_not_registered(self, registry):
        assert "constant" not in registry
        assert "lambda" not in registry

    def test_register_and_lookup(self, registry):
        evaluator = _double()
        registry.register("double", evaluator)
        assert registry.lookup("double") is evaluator

    def test_lookup_is_case_sensitive(self, registry):
        registry.register("Double", _double())
        assert registry.is_registered("Double")
        assert not registry.is_registered("double")

    def test_later_registration_overwrites(self, registry):
        first = _double()
        second = _double()
        registry.register("double", first)
        registry.register("double", second)
        assert registry.lookup("double") is second

    def test_empty_name_rejected(self, registry):
        with pytest.raises(ValueError):
            registry.register("", _double())

    def test_registered_type_is_used_by_new_expressions(self, registry):
        registry.register("double", _double())
        expr = Expression("double", None, constant_expression(21), registry=registry)
        assert expr.evaluator is registry.lookup("double")
        assert expr.try_evaluate(None) == (42, None)

    def test_registered_type_is_used_by_parser(self, registry):
        registry.register("double", _double())
        assert parse("double(4) + 1", registry).try_evaluate(None) == (9, None)

    def test_private_registry_does_not_leak(self, registry):
        registry.register("onlyHere", _double())
        assert not default_registry().is_registered("onlyHere")

    def test_default_registry_is_shared(self):
        assert default_registry() is default_registry()
        assert default_registry().is_registered("&&")

    def test_list_registered_is_sorted(self, registry):
        names = registry.list_registered()
        assert names == sorted(names)

    def test_list_by_category(self, registry):
        logic = registry.list_by_category(FunctionCategory.LOGIC)
        assert set(logic) == {"&&", "||", "!", "if", "exists"}


class TestFreeze:
    """Tests for frozen registries."""

    def test_frozen_registry_rejects_registration(self, registry):
        registry.freeze()
        assert registry.frozen
        with pytest.raises(RegistryFrozenError):
            registry.register("double", _double())

    def test_frozen_registry_still_looks_up(self, registry):
        registry.freeze()
        assert registry.lookup("&&") is not None

    def test_copy_is_unfrozen(self, registry):
        registry.freeze()
        copy = registry.copy()
        assert not copy.frozen
        copy.register("double", _double())
        assert copy.is_registered("double")
        assert not registry.is_registered("double")


class TestDocumentation:
    """Tests for export_documentation()."""

    def test_export_documentation(self, registry):
        docs = registry.export_documentation()
        assert docs["functions"]["+"]["returnType"] == "number"
        assert docs["functions"]["+"]["category"] == "math"
        assert "math" in docs["byCategory"]
        assert any(d["name"] == "&&" for d in docs["byCategory"]["logic"])

    def test_export_includes_custom_types(self, registry):
        registry.register("double", _double())
        doc = registry.export_documentation()["functions"]["double"]
        assert doc["description"] == "Doubles a number"
        assert doc["pure"] is True


class TestConcurrency:
    """Lookups stay consistent while registrations happen."""

    def test_concurrent_lookup_and_register(self, registry):
        def register_many():
            for i in range(200):
                registry.register(f"fn{i}", _double())

        def lookup_many():
            for _ in range(2000):
                registry.lookup("&&")
            return True

        with ThreadPoolExecutor(max_workers=4) as pool:
            writer = pool.submit(register_many)
            readers = [pool.submit(lookup_many) for _ in range(3)]
            writer.result()
            assert all(r.result() for r in readers)

        assert all(registry.is_registered(f"fn{i}") for i in range(200))
