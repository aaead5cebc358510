"""Strategy registry: format name to BinaryStrategy class.

The three built-in formats are always present. Plugins add more
through the ``register_binary_strategies`` hook; built-in names are
reserved and cannot be overridden.
"""

from __future__ import annotations

from typing import Any

from spatialwriter.domain.types import BinaryFormat
from spatialwriter.writer.strategies import (
    BinaryStrategy,
    EwkbBinaryStrategy,
    MySQLBinaryStrategy,
    WkbBinaryStrategy,
)

BUILTIN_STRATEGIES: dict[str, type[BinaryStrategy]] = {
    BinaryFormat.WKB: WkbBinaryStrategy,
    BinaryFormat.EWKB: EwkbBinaryStrategy,
    BinaryFormat.MYSQL: MySQLBinaryStrategy,
}


def _normalize(name: str) -> str:
    return name.strip().lower()


class StrategyRegistry:
    """Lookup table of available binary strategies."""

    def __init__(self) -> None:
        self._strategies: dict[str, type[BinaryStrategy]] = {
            str(k): v for k, v in BUILTIN_STRATEGIES.items()
        }

    def register(self, name: str, strategy_cls: type[Any]) -> None:
        """Register a custom strategy class under *name*.

        Raises:
            ValueError: If *name* is empty, built-in, or taken by another class.
            TypeError: If *strategy_cls* has no callable ``execute_strategy``.
        """
        normalized = _normalize(name)
        if not normalized:
            msg = "Strategy name must not be empty"
            raise ValueError(msg)

        if normalized in BUILTIN_STRATEGIES:
            msg = f"Strategy {normalized!r} conflicts with a built-in format"
            raise ValueError(msg)

        if not isinstance(strategy_cls, type) or not callable(
            getattr(strategy_cls, "execute_strategy", None)
        ):
            msg = f"Strategy {normalized!r} must be a class with an execute_strategy method"
            raise TypeError(msg)

        existing = self._strategies.get(normalized)
        if existing is not None and existing is not strategy_cls:
            msg = f"Strategy {normalized!r} is already registered"
            raise ValueError(msg)

        self._strategies[normalized] = strategy_cls

    def get(self, name: str) -> type[BinaryStrategy]:
        """Return the class registered under *name*.

        Raises:
            KeyError: If nothing is registered under *name*.
        """
        normalized = _normalize(name)
        try:
            return self._strategies[normalized]
        except KeyError:
            msg = f"Unknown binary format {name!r}. Expected one of {self.names()}"
            raise KeyError(msg) from None

    def create(self, name: str, **kwargs: Any) -> BinaryStrategy:
        """Instantiate the strategy registered under *name*."""
        return self.get(name)(**kwargs)

    def names(self) -> list[str]:
        return sorted(self._strategies)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and _normalize(name) in self._strategies
