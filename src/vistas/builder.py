"""Deferred builder for elements with several required attributes.

A builder collects attribute values over chained calls. The call that fills
the last required attribute returns the finished ElementView instead of the
builder, so the rest of the chain operates on the real element:

    >>> from vistas.tags import img
    >>> b = img()                     # ElementBuilder
    >>> b = b.alt("A cat")            # still an ElementBuilder
    >>> view = b.src("cat.png")       # ElementView
    >>> view.class_("photo").render()
    '<img src="cat.png" alt="A cat" class="photo"></img>'

Required attributes may be set in any order. An ElementView accepts every
mutator a builder does, so chains need not care which one they hold.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from vistas.dispatch import switch_case
from vistas.element import ElementView, SchemaAttributes
from vistas.errors import IncompleteElementError
from vistas.utils.logger import get_logger
from vistas.views import AttributedView

if TYPE_CHECKING:
    from vistas.attributes import TagAttr
    from vistas.element import ElementSchema

logger = get_logger(__name__)


class ElementBuilder(SchemaAttributes, AttributedView):
    """Partially configured element, valid until its required attributes are set.

    Global and optional attributes set on the builder are carried over to the
    finished element. Rendering a builder raises IncompleteElementError.
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

    @property
    def missing(self) -> tuple[str, ...]:
        """Required attribute names still unset, in declaration order."""
        return tuple(name for name in self.schema.required_names if self._values.get(name) is None)

    @property
    def is_complete(self) -> bool:
        return not self.missing

    def _after_set(self, attr: TagAttr) -> ElementBuilder | ElementView:
        if not self.schema.is_required(attr.name):
            return self
        return switch_case(self.is_complete, {True: self._finish}, default=self)

    def _finish(self) -> ElementView:
        logger.debug("builder for <%s> complete", self.schema.tag)
        view = ElementView(self.schema, self.content, self._values)
        return view.inherit_global_attrs(self)

    def render(self) -> str:
        raise IncompleteElementError(self.schema.tag, self.missing)

    def __repr__(self) -> str:
        return f"ElementBuilder({self.schema.tag!r}, missing={self.missing!r})"


__all__ = ["ElementBuilder"]
