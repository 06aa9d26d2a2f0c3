"""Recursive draw: one rendering path for views, sequences and scalars.

    >>> draw(["a", 1, None, [p("b")]])
    'a1<p>b</p>'

Every view that embeds caller-supplied content draws it through ``draw``,
so a content slot accepts a view, text, a number or any nesting of lists
and tuples of those.
"""

from __future__ import annotations

from contextvars import ContextVar
from typing import Any

from vistas.config import get_render_config
from vistas.errors import RenderDepthError
from vistas.utils.logger import get_logger
from vistas.views import View

logger = get_logger(__name__)

_depth: ContextVar[int] = ContextVar("draw_depth", default=0)


def draw(content: Any) -> str:
    """Reduce ``content`` to markup.

    Args:
        content: A View, a list/tuple of drawable content, or a scalar

    Returns:
        The view's ``render()``; the concatenation of drawn items for a
        list or tuple; ``""`` for None; ``str(content)`` otherwise.

    Raises:
        RenderDepthError: If nesting exceeds ``RenderConfig.max_depth``.
    """
    match content:
        case str():
            return content
        case None:
            return ""
        case View() | list() | tuple():
            pass
        case _:
            return str(content)

    depth = _depth.get() + 1
    max_depth = get_render_config().max_depth
    if max_depth is not None and depth > max_depth:
        logger.debug("draw depth %d exceeds max_depth=%d", depth, max_depth)
        raise RenderDepthError(max_depth)

    token = _depth.set(depth)
    try:
        if isinstance(content, View):
            return content.render()
        return "".join(draw(item) for item in content)
    finally:
        _depth.reset(token)


def render(view: Any) -> str:
    """Render a view tree to its final markup string.

    Equivalent to ``view.render()`` for a single view; also accepts
    anything ``draw`` accepts.
    """
    return draw(view)


html = render


__all__ = ["draw", "html", "render"]
