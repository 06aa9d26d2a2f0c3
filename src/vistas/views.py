"""View capability hierarchy.

View (render only)
└── AttributedView (class, id, style, title)
    ├── BuiltinView (render := raw)
    │   └── ElementView
    ├── ForEachView
    └── ElementBuilder

Concrete views implement ``raw()`` (builtin markup) or ``render()`` directly.
The abstract implementations raise AbstractRenderError naming the subclass.
"""

from __future__ import annotations

from typing import Any, Self

from vistas.errors import AbstractRenderError


class View:
    """Anything that renders to a markup fragment."""

    __slots__ = ()

    def render(self) -> str:
        """Return the markup for this view and its whole subtree."""
        raise AbstractRenderError("render", type(self).__name__)

    def __html__(self) -> str:
        return self.render()

    def __str__(self) -> str:
        return self.render()


class AttributedView(View):
    """View carrying the global attributes class, id, style and title.

    Mutators store the value and return the view, so calls chain:

        >>> p("hi").class_("lead").id("intro")

    ``class`` is a Python keyword, hence ``class_``.
    """

    __slots__ = ("_class", "_id", "_style", "_title")

    def __init__(self) -> None:
        self._class: str | None = None
        self._id: str | None = None
        self._style: str | None = None
        self._title: str | None = None

    def class_(self, class_name: str | None) -> Self:
        self._class = class_name
        return self

    def id(self, new_id: str | None) -> Self:
        self._id = new_id
        return self

    def style(self, style_definitions: str | None) -> Self:
        self._style = style_definitions
        return self

    def title(self, text: str | None) -> Self:
        self._title = text
        return self

    @property
    def global_values(self) -> dict[str, Any]:
        """Current global attribute values keyed by attribute name."""
        return {"class": self._class, "id": self._id, "style": self._style, "title": self._title}

    def inherit_global_attrs(self, view: AttributedView) -> Self:
        """Copy class, id, style and title from ``view`` onto this view.

        Only the four slots are copied; content, tag and element attributes
        stay as they are. Later changes to ``view`` do not propagate.
        """
        self._class = view._class
        self._id = view._id
        self._style = view._style
        self._title = view._title
        return self


class BuiltinView(AttributedView):
    """View whose markup is produced by ``raw()``."""

    __slots__ = ()

    def raw(self) -> str:
        """Build the view's markup from HTML tags."""
        raise AbstractRenderError("raw", type(self).__name__)

    def render(self) -> str:
        return self.raw()


__all__ = ["AttributedView", "BuiltinView", "View"]
