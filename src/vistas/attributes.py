"""Attribute descriptors and attribute rendering.

An attribute renders as ``name="value"`` (VALUE kind) or as its bare name
(BOOLEAN kind). Unset attributes contribute nothing, not even a separator:

    >>> render_optional_attribute("href", "/home")
    'href="/home"'
    >>> render_optional_attribute("controls", True, AttrKind.BOOLEAN)
    'controls'
    >>> render_optional_attribute("href", None)
    ''

Values are inserted verbatim; escaping is the caller's responsibility.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, replace
from enum import StrEnum
from typing import TYPE_CHECKING, Any

from vistas.dispatch import switch_case

if TYPE_CHECKING:
    from vistas.views import AttributedView

# Rendered after an element's own attributes, in this order.
GLOBAL_ATTRIBUTES: tuple[str, ...] = ("class", "id", "style", "title")


class AttrKind(StrEnum):
    """How an attribute is written into the opening tag."""

    VALUE = "value"
    BOOLEAN = "boolean"


@dataclass(frozen=True, slots=True)
class TagAttr:
    """Attribute descriptor: name, current value and rendering kind.

    Element schemas hold descriptors with no value; rendering works on
    copies made with :meth:`with_value`, so a schema shared by many
    elements is never mutated.
    """

    name: str
    value: Any = None
    kind: AttrKind = AttrKind.VALUE

    @property
    def is_boolean(self) -> bool:
        return self.kind == AttrKind.BOOLEAN

    def with_value(self, value: Any) -> TagAttr:
        return replace(self, value=value)

    def render(self) -> str:
        return render_optional_attribute(self.name, self.value, self.kind)


def boolean(name: str) -> TagAttr:
    """Shorthand for a BOOLEAN descriptor."""
    return TagAttr(name, kind=AttrKind.BOOLEAN)


def _format_value(value: Any) -> str:
    # draggable="true", not draggable="True"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def render_optional_attribute(
    label: str,
    value: Any = None,
    kind: AttrKind | str = AttrKind.VALUE,
) -> str:
    """Render one attribute fragment.

    Args:
        label: Attribute name
        value: Attribute value; None renders nothing
        kind: AttrKind.VALUE or AttrKind.BOOLEAN (or their string values)

    Returns:
        ``label="value"`` for VALUE kind, ``label`` for a truthy BOOLEAN,
        otherwise the empty string. Unknown kinds render nothing.
    """
    if value is None:
        return ""
    return switch_case(
        kind,
        {
            AttrKind.VALUE: lambda: f'{label}="{_format_value(value)}"',
            AttrKind.BOOLEAN: lambda: label if value else "",
        },
        "",
    )


def _join(fragments: Iterable[str]) -> str:
    return " ".join(f for f in fragments if f)


def render_global_attributes(view: AttributedView) -> str:
    """Render class, id, style and title of ``view``, space separated."""
    values = view.global_values
    return _join(render_optional_attribute(name, values[name]) for name in GLOBAL_ATTRIBUTES)


def render_common_attributes(
    view: AttributedView,
    attributes: Iterable[TagAttr] = (),
    include_global: bool = True,
) -> str:
    """Render declared attributes followed by the global attributes.

    Args:
        view: View whose global attributes are rendered
        attributes: Descriptors carrying their current values, in output order
        include_global: Whether to append the global attributes

    Returns:
        Fragments joined by single spaces, with no leading or trailing
        separator. Empty when nothing is set.
    """
    return _join(
        (
            _join(attr.render() for attr in attributes),
            render_global_attributes(view) if include_global else "",
        )
    )


__all__ = [
    "GLOBAL_ATTRIBUTES",
    "AttrKind",
    "TagAttr",
    "boolean",
    "render_common_attributes",
    "render_global_attributes",
    "render_optional_attribute",
]
