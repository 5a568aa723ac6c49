"""Configuration and registry factory for ExprForge hosts."""

from __future__ import annotations

import importlib
import logging
import os
from dataclasses import dataclass, field

from exprforge.registry import FunctionRegistry

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass
class ExprForgeConfig:
    """Engine configuration.

    Attributes:
        log_level: Logging level name used by the CLI
        extensions: Modules whose register(registry) function is called
            when a registry is created
        freeze_registry: Freeze the registry once extensions are loaded
    """

    log_level: str = "WARNING"
    extensions: list[str] = field(default_factory=list)
    freeze_registry: bool = False

    @classmethod
    def from_env(cls) -> ExprForgeConfig:
        """Create config from environment variables.

        EXPRFORGE_LOG_LEVEL: logging level name (default WARNING)
        EXPRFORGE_EXTENSIONS: comma-separated module names
        EXPRFORGE_FREEZE_REGISTRY: 1/true/yes/on to freeze
        """
        extensions = [
            name.strip()
            for name in os.environ.get("EXPRFORGE_EXTENSIONS", "").split(",")
            if name.strip()
        ]
        return cls(
            log_level=os.environ.get("EXPRFORGE_LOG_LEVEL", "WARNING").upper(),
            extensions=extensions,
            freeze_registry=os.environ.get("EXPRFORGE_FREEZE_REGISTRY", "").lower()
            in _TRUE_VALUES,
        )


def load_extensions(registry: FunctionRegistry, modules: list[str]) -> None:
    """Import each module and call its register(registry) function.

    Raises:
        ImportError: If a module cannot be imported
        ValueError: If a module has no register() function
    """
    for module_name in modules:
        module = importlib.import_module(module_name)
        register = getattr(module, "register", None)
        if not callable(register):
            raise ValueError(
                f"Extension module '{module_name}' has no register(registry) function"
            )
        register(registry)
        logger.info("Loaded expression extension '%s'", module_name)


def create_registry(config: ExprForgeConfig | None = None) -> FunctionRegistry:
    """Create a registry with the built-ins and configured extensions."""
    config = config or ExprForgeConfig.from_env()

    registry = FunctionRegistry.with_builtins()
    load_extensions(registry, config.extensions)
    if config.freeze_registry:
        registry.freeze()
    return registry
