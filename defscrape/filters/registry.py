"""
Filter Registry

Immutable mapping from filter name to a text transform. A registry is never
changed once built; adding filters produces a new registry.

Usage:
    from defscrape.filters import FilterRegistryBuilder, default_registry

    builder = FilterRegistryBuilder.with_defaults()

    @builder.filter("strip_currency")
    def strip_currency(value):
        return value.lstrip("£$€")

    registry = builder.build()
    registry.apply_chain(["trim", "strip_currency"], " £12 ")  # "12"
"""

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Dict, Iterable, Iterator, List, Optional

from defscrape.diagnostics import get_logger
from defscrape.filters.builtin import BUILTIN_FILTERS

logger = get_logger(__name__)

FilterFunction = Callable[[str], str]

# Returned when a filter raises instead of returning a value
FILTER_ERROR = "FILTER_ERROR"


@dataclass(frozen=True)
class FilterInfo:
    """A registered filter and its description."""

    name: str
    func: FilterFunction
    description: str = ""

    def __call__(self, value: str) -> str:
        try:
            return self.func(value)
        except Exception as e:
            logger.warning(f"Filter '{self.name}' failed on {value[:40]!r}: {e}")
            return FILTER_ERROR


class FilterRegistry(Mapping):
    """Read-only name -> filter mapping."""

    def __init__(self, filters: Optional[Dict[str, FilterInfo]] = None):
        self._filters = MappingProxyType(dict(filters or {}))

    def __getitem__(self, name: str) -> FilterInfo:
        return self._filters[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._filters)

    def __len__(self) -> int:
        return len(self._filters)

    def __repr__(self) -> str:
        return f"FilterRegistry({sorted(self._filters)})"

    def apply(self, name: str, value: str) -> str:
        """Run one filter, unknown names leave the value unchanged."""
        info = self._filters.get(name)
        if info is None:
            logger.debug(f"Unknown filter '{name}' skipped")
            return value
        return info(value)

    def apply_chain(self, names: Iterable[str], value: str) -> str:
        """Run filters left to right, each one fed the previous result."""
        for name in names:
            value = self.apply(name, value)
        return value

    def unknown(self, names: Iterable[str]) -> List[str]:
        """Names from ``names`` that are not registered, in order, no repeats."""
        missing = []
        for name in names:
            if name not in self._filters and name not in missing:
                missing.append(name)
        return missing

    def extend(self, filters: Dict[str, FilterFunction]) -> "FilterRegistry":
        """Return a new registry with ``filters`` added (or replaced)."""
        builder = FilterRegistryBuilder(self)
        for name, func in filters.items():
            builder.add(name, func)
        return builder.build()


class FilterRegistryBuilder:
    """Collects filters and builds an immutable FilterRegistry."""

    def __init__(self, base: Optional[FilterRegistry] = None):
        self._filters: Dict[str, FilterInfo] = dict(base.items()) if base else {}

    @classmethod
    def with_defaults(cls) -> "FilterRegistryBuilder":
        builder = cls()
        for name, (func, description) in BUILTIN_FILTERS.items():
            builder.add(name, func, description)
        return builder

    def add(self, name: str, func: FilterFunction, description: str = "") -> "FilterRegistryBuilder":
        if not name or "|" in name or "}}" in name:
            raise ValueError(f"Invalid filter name: {name!r}")
        if name in self._filters:
            logger.warning(f"Overriding existing filter '{name}'")
        self._filters[name] = FilterInfo(
            name=name,
            func=func,
            description=description or (func.__doc__ or "").strip().split("\n")[0],
        )
        return self

    def filter(self, name: str = None, description: str = "") -> Callable[[FilterFunction], FilterFunction]:
        """Decorator form of ``add``."""
        def decorator(func: FilterFunction) -> FilterFunction:
            self.add(name or func.__name__, func, description)
            return func
        return decorator

    def build(self) -> FilterRegistry:
        return FilterRegistry(self._filters)


_DEFAULT_REGISTRY = FilterRegistryBuilder.with_defaults().build()


def default_registry() -> FilterRegistry:
    """The baseline registry; shared, safe because it cannot be changed."""
    return _DEFAULT_REGISTRY
