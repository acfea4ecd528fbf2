from __future__ import annotations

from typing import Any

_REGISTRY: dict[str, type] = {}


def register_visualisation(cls: type) -> type:
    """Class decorator to register a visualisation by its ID."""
    key = getattr(cls, "id", None)
    if not key:
        raise ValueError(f"{cls.__name__} must define id")
    _REGISTRY[key] = cls
    return cls


def create_visualisation(key: str, **kwargs: Any) -> Any:
    cls = _REGISTRY.get(key)
    if not cls:
        raise KeyError(f"No visualisation registered for id '{key}'")
    return cls(**kwargs)


def visualisation_name(key: str) -> str:
    cls = _REGISTRY.get(key)
    if not cls:
        raise KeyError(f"No visualisation registered for id '{key}'")
    return cls.name


def list_ids() -> list[str]:
    return list(_REGISTRY.keys())
