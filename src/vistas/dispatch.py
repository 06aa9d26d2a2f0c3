"""Tagged dispatch with a lazily evaluated fallback.

``switch_case`` selects a case by key. Cases that are expensive or unsafe to
compute are passed as zero-argument callables and only run when selected:

    >>> switch_case("boolean", {"value": 'x="1"', "boolean": lambda: "x"}, "")
    'x'
    >>> switch_case(3, {2: lambda: "two"}, default=lambda: "other")
    'other'

Any callable case is treated as a producer, so a case whose value is itself a
function must be wrapped: ``{"k": lambda: func}``.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Final

from vistas.errors import DispatchConfigurationError
from vistas.utils.logger import get_logger

logger = get_logger(__name__)


class _Missing:
    __slots__ = ()

    def __repr__(self) -> str:
        return "<MISSING>"


MISSING: Final = _Missing()

type Case[T] = T | Callable[[], T]


def _resolve[T](case: Case[T]) -> T:
    return case() if callable(case) else case


def switch_case[K, T](
    key: K,
    cases: Mapping[K, Case[T]],
    default: Case[T] | _Missing = MISSING,
) -> T:
    """Return the case selected by ``key``, falling back to ``default``.

    Args:
        key: Lookup key
        cases: Mapping from key to a value or a zero-argument producer
        default: Value or producer used when ``key`` is absent. Mandatory.

    Returns:
        The selected value, invoked first if it is a producer.

    Raises:
        DispatchConfigurationError: If no default was supplied. Raised before
            the lookup, so a miswired call fails even when the key is present.
    """
    if default is MISSING:
        raise DispatchConfigurationError(key)
    if key in cases:
        return _resolve(cases[key])
    logger.debug("switch_case: key %r not in %s, using default", key, list(cases))
    return _resolve(default)


__all__ = ["MISSING", "switch_case"]
