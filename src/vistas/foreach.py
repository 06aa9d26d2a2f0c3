"""Sequence-projection view.

    >>> for_each([1, 2, 3], lambda n: li(n * 2)).render()
    '<li>2</li><li>4</li><li>6</li>'

The projector runs at render time, once per item, every time the view is
rendered. Results are not cached, so the projector must be pure for
repeated renders to agree. Items are never skipped; project to ``""`` to
leave an item out of the output.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from typing import Any

from vistas.draw import draw
from vistas.views import AttributedView


class ForEachView[T](AttributedView):
    """Renders each item of ``elements`` through ``projector``, in order.

    Global attributes can be set and inherited but are not rendered; there
    is no wrapping tag to carry them.
    """

    __slots__ = ("elements", "projector")

    def __init__(self, elements: Iterable[T], projector: Callable[[T], Any]) -> None:
        super().__init__()
        # Generators are materialized so every render sees the same items.
        self.elements: Sequence[T] = (
            elements if isinstance(elements, Sequence) else tuple(elements)
        )
        self.projector = projector

    def render(self) -> str:
        return "".join(draw(self.projector(element)) for element in self.elements)

    def __repr__(self) -> str:
        return f"ForEachView({len(self.elements)} elements)"


def for_each[T](data: Iterable[T], projector: Callable[[T], Any]) -> ForEachView[T]:
    """Create a view that maps ``data`` through ``projector`` at render time."""
    return ForEachView(data, projector)


__all__ = ["ForEachView", "for_each"]
