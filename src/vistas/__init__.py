"""
Vistas: declarative HTML views for Python

Compose a tree of views, then collapse it into one markup string. Views,
lists of views, text and numbers can be mixed freely wherever content is
accepted.

Quick Start:
    >>> from vistas import render
    >>> from vistas.tags import a, li, p, ul
    >>> page = [
    ...     p("Hello").class_("lead"),
    ...     ul(li(a("Docs").href("/docs")), li("About")),
    ... ]
    >>> render(page)
    '<p class="lead">Hello</p><ul><li><a href="/docs">Docs</a></li><li>About</li></ul>'

Lists from data:
    >>> from vistas import for_each
    >>> render(ul(for_each(["a", "b"], lambda x: li(x))))
    '<ul><li>a</li><li>b</li></ul>'

Custom elements:
    >>> from vistas import TagAttr, boolean, define_element
    >>> dialog = define_element("dialog", optional=(boolean("open"),))
    >>> render(dialog("Hi").open())
    '<dialog open>Hi</dialog>'

Text is inserted as given; escape untrusted input before composing it.
"""

from vistas.attributes import (
    GLOBAL_ATTRIBUTES,
    AttrKind,
    TagAttr,
    boolean,
    render_common_attributes,
    render_global_attributes,
    render_optional_attribute,
)
from vistas.builder import ElementBuilder
from vistas.config import (
    RenderConfig,
    get_render_config,
    render_config_context,
    reset_render_config,
    set_render_config,
)
from vistas.dispatch import switch_case
from vistas.draw import draw, html, render
from vistas.element import ElementSchema, ElementView, define_element
from vistas.errors import (
    AbstractRenderError,
    DispatchConfigurationError,
    IncompleteElementError,
    MissingAttributeError,
    RenderDepthError,
    UnknownAttributeError,
    VistasError,
)
from vistas.foreach import ForEachView, for_each
from vistas.views import AttributedView, BuiltinView, View

__version__ = "0.1.0"

__all__ = [
    # Rendering
    "draw",
    "html",
    "render",
    # Views
    "AttributedView",
    "BuiltinView",
    "ElementBuilder",
    "ElementSchema",
    "ElementView",
    "ForEachView",
    "View",
    "define_element",
    "for_each",
    # Attributes
    "GLOBAL_ATTRIBUTES",
    "AttrKind",
    "TagAttr",
    "boolean",
    "render_common_attributes",
    "render_global_attributes",
    "render_optional_attribute",
    # Dispatch
    "switch_case",
    # Configuration
    "RenderConfig",
    "get_render_config",
    "render_config_context",
    "reset_render_config",
    "set_render_config",
    # Errors
    "AbstractRenderError",
    "DispatchConfigurationError",
    "IncompleteElementError",
    "MissingAttributeError",
    "RenderDepthError",
    "UnknownAttributeError",
    "VistasError",
    # Metadata
    "__version__",
]
