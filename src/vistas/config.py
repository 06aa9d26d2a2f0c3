"""ContextVar-based render configuration for Vistas.

Rendering reads its settings from a ContextVar, so a setting changed in one
thread or task never leaks into a render running elsewhere.

Usage:
    from vistas.config import RenderConfig, render_config_context

    with render_config_context(RenderConfig(strict_required=True)):
        html = render(view)  # raises MissingAttributeError on unset required attrs

"""

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Any

DEFAULT_MAX_DEPTH = 200


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable render configuration.

    Attributes:
        strict_required: Raise MissingAttributeError when an element is
            rendered while one of its required attributes is unset. Off by
            default: unset required attributes are simply omitted.
        max_depth: Maximum nesting of draw calls before RenderDepthError is
            raised. Guards against views nested inside themselves.
            None disables the guard.

    """

    strict_required: bool = False
    max_depth: int | None = DEFAULT_MAX_DEPTH

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> "RenderConfig":
        """Create RenderConfig from a mapping, ignoring unknown keys.

        Example:
            >>> RenderConfig.from_dict({"strict_required": True, "other": 1}).strict_required
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


_DEFAULT_CONFIG: RenderConfig = RenderConfig()

_render_config: ContextVar[RenderConfig] = ContextVar(
    "render_config",
    default=_DEFAULT_CONFIG,
)


def get_render_config() -> RenderConfig:
    """Get the render configuration active in the current context."""
    return _render_config.get()


def set_render_config(config: RenderConfig) -> None:
    """Set render configuration for the current context."""
    _render_config.set(config)


def reset_render_config() -> None:
    """Reset the current context to the default configuration."""
    _render_config.set(_DEFAULT_CONFIG)


@contextmanager
def render_config_context(config: RenderConfig) -> Iterator[None]:
    """Temporarily use ``config``, restoring the previous one on exit.

    Example:
        >>> with render_config_context(RenderConfig(max_depth=8)):
        ...     get_render_config().max_depth
        8

    """
    previous = _render_config.get()
    _render_config.set(config)
    try:
        yield
    finally:
        _render_config.set(previous)


__all__ = [
    "DEFAULT_MAX_DEPTH",
    "RenderConfig",
    "get_render_config",
    "set_render_config",
    "reset_render_config",
    "render_config_context",
]
