"""Generic element factory.

An ElementSchema is the declarative attribute table of one HTML tag: its
name plus required and optional attribute descriptors. Calling a schema
with content produces an ElementView:

    >>> A = ElementSchema("a", required=(TagAttr("href"),), optional=(boolean("download"),))
    >>> A("docs").href("/docs").download().class_("nav").render()
    '<a href="/docs" download class="nav">docs</a>'

Every declared attribute is reachable as a chainable mutator named after it.
BOOLEAN mutators default their argument to True. Python spellings map onto
attribute names: a trailing underscore is dropped (``for_`` -> ``for``) and
inner underscores become hyphens (``accept_charset`` -> ``accept-charset``).

Required attributes are declared, not enforced: an unset one is omitted from
the output unless ``RenderConfig.strict_required`` is on.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from vistas.attributes import GLOBAL_ATTRIBUTES, TagAttr, render_common_attributes
from vistas.config import get_render_config
from vistas.dispatch import switch_case
from vistas.draw import draw
from vistas.errors import MissingAttributeError, UnknownAttributeError
from vistas.stringbuilder import StringBuilder
from vistas.views import BuiltinView

if TYPE_CHECKING:
    from vistas.builder import ElementBuilder


def _candidate_names(name: str) -> tuple[str, ...]:
    stripped = name.rstrip("_") or name
    return (name, stripped, stripped.replace("_", "-"))


@dataclass(frozen=True, slots=True)
class ElementSchema:
    """Tag name and attribute table for one kind of element.

    Attributes:
        tag: HTML tag name
        required: Attributes the element needs to be meaningful
        optional: Attributes the element accepts

    Schemas are immutable and shared by every element built from them.
    """

    tag: str
    required: tuple[TagAttr, ...] = ()
    optional: tuple[TagAttr, ...] = ()
    _by_name: dict[str, TagAttr] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "required", tuple(self.required))
        object.__setattr__(self, "optional", tuple(self.optional))
        by_name: dict[str, TagAttr] = {}
        for attr in self.attributes:
            if attr.name in by_name:
                msg = f"<{self.tag}> declares attribute '{attr.name}' twice"
                raise ValueError(msg)
            by_name[attr.name] = attr
        object.__setattr__(self, "_by_name", by_name)

    @property
    def attributes(self) -> tuple[TagAttr, ...]:
        """Required followed by optional descriptors, in render order."""
        return self.required + self.optional

    @property
    def required_names(self) -> tuple[str, ...]:
        return tuple(attr.name for attr in self.required)

    def attribute(self, name: str) -> TagAttr | None:
        """Look up a declared attribute by HTML or Python spelling."""
        for candidate in _candidate_names(name):
            attr = self._by_name.get(candidate)
            if attr is not None:
                return attr
        return None

    def is_required(self, name: str) -> bool:
        return any(attr.name == name for attr in self.required)

    def __call__(self, *content: Any) -> ElementView:
        """Create an element wrapping ``content``."""
        return ElementView(self, content)

    def create(self, *values: Any) -> ElementView | ElementBuilder:
        """Create an element from positional required-attribute values.

        With one value per required attribute the finished ElementView is
        returned; with fewer, an ElementBuilder holding the given values.

        Raises:
            TypeError: If more values than required attributes are given.
        """
        from vistas.builder import ElementBuilder

        names = self.required_names
        if len(values) > len(names):
            msg = f"<{self.tag}> takes at most {len(names)} attribute values ({len(values)} given)"
            raise TypeError(msg)
        slots = dict(zip(names, values, strict=False))
        return switch_case(
            len(values),
            {len(names): lambda: ElementView(self, None, slots)},
            default=lambda: ElementBuilder(self, None, slots),
        )


class SchemaAttributes:
    """Schema-driven attribute storage shared by elements and builders.

    Subclasses provide ``schema`` and ``_values`` slots and decide what a
    mutator returns through ``_after_set``.
    """

    __slots__ = ()

    schema: ElementSchema
    _values: dict[str, Any]

    @property
    def tag_name(self) -> str:
        return self.schema.tag

    def _resolve(self, name: str) -> TagAttr:
        attr = self.schema.attribute(name)
        if attr is None:
            raise UnknownAttributeError(self.schema.tag, name)
        return attr

    def _after_set(self, attr: TagAttr) -> Any:
        return self

    def set(self, name: str, value: Any) -> Any:
        """Set an attribute by name and return the resulting view.

        Global attributes (class, id, style, title) are accepted too.

        Raises:
            UnknownAttributeError: If the schema does not declare ``name``.
        """
        if name in GLOBAL_ATTRIBUTES:
            setattr(self, f"_{name}", value)
            return self
        attr = self._resolve(name)
        self._values[attr.name] = value
        return self._after_set(attr)

    def get(self, name: str) -> Any:
        """Return the current value of an attribute, None when unset."""
        if name in GLOBAL_ATTRIBUTES:
            return getattr(self, f"_{name}")
        return self._values.get(self._resolve(name).name)

    def __getattr__(self, name: str) -> Callable[..., Any]:
        # Only reached when normal lookup fails; never resolve private names
        # so unset slots and dunder probes keep raising AttributeError.
        if name.startswith("_") or name in ("schema", "content"):
            raise AttributeError(name)
        attr = self._resolve(name)

        if attr.is_boolean:

            def mutator(value: Any = True) -> Any:
                return self.set(attr.name, value)

        else:

            def mutator(value: Any) -> Any:
                return self.set(attr.name, value)

        mutator.__name__ = name
        mutator.__qualname__ = f"{type(self).__name__}.{name}"
        return mutator

    def _current_attributes(self) -> list[TagAttr]:
        return [attr.with_value(self._values.get(attr.name)) for attr in self.schema.attributes]


class ElementView(SchemaAttributes, BuiltinView):
    """A concrete HTML element: tag, content and attribute values.

    Content is fixed at construction. Attribute values change through the
    chainable mutators until the element is rendered.
    """

    __slots__ = ("schema", "content", "_values")

    def __init__(
        self,
        schema: ElementSchema,
        content: Any = None,
        values: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__()
        self.schema = schema
        self.content = content
        self._values: dict[str, Any] = dict(values or {})

    def raw(self) -> str:
        tag = self.schema.tag
        if get_render_config().strict_required:
            missing = tuple(
                attr.name for attr in self.schema.required if self._values.get(attr.name) is None
            )
            if missing:
                raise MissingAttributeError(tag, missing)

        attrs = render_common_attributes(self, self._current_attributes())
        sb = StringBuilder()
        sb.append("<").append(tag)
        if attrs:
            sb.append(" ").append(attrs)
        sb.append(">")
        sb.append(draw(self.content))
        sb.append("</").append(tag).append(">")
        return sb.build()

    def __repr__(self) -> str:
        return f"ElementView({self.schema.tag!r}, attrs={self._values!r})"


def define_element(
    tag: str,
    required: Iterable[TagAttr] = (),
    optional: Iterable[TagAttr] = (),
) -> ElementSchema:
    """Build the schema for ``tag``; call the result to create elements."""
    return ElementSchema(tag, tuple(required), tuple(optional))


__all__ = [
    "ElementSchema",
    "ElementView",
    "SchemaAttributes",
    "define_element",
]
