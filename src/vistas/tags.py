"""HTML element catalog.

Each tag is an ElementSchema; calling it with content creates the element:

    >>> from vistas.tags import a, li, ul
    >>> ul(li("one"), li(a("two").href("#two"))).render()
    '<ul><li>one</li><li><a href="#two">two</a></li></ul>'

``img`` takes attributes rather than content: ``img(src, alt)`` returns the
element, ``img()`` or ``img(src)`` a builder that completes once both are
set. Python keywords carry a trailing underscore (``del_``).

Grouped as in https://www.w3schools.com/TAGS/ref_byfunc.asp
"""

from __future__ import annotations

from typing import Any

from vistas.attributes import TagAttr, boolean
from vistas.builder import ElementBuilder
from vistas.element import ElementSchema, ElementView, define_element

TAGS: dict[str, ElementSchema] = {}


def _tag(
    name: str,
    required: tuple[str, ...] = (),
    optional: tuple[TagAttr | str, ...] = (),
) -> ElementSchema:
    schema = define_element(
        name,
        (TagAttr(attr) for attr in required),
        (attr if isinstance(attr, TagAttr) else TagAttr(attr) for attr in optional),
    )
    TAGS[name] = schema
    return schema


# Basic HTML
h1 = _tag("h1")
h2 = _tag("h2")
h3 = _tag("h3")
h4 = _tag("h4")
h5 = _tag("h5")
h6 = _tag("h6")
p = _tag("p")
br = _tag("br")
hr = _tag("hr")

# Formatting
abbr = _tag("abbr")
address = _tag("address")
b = _tag("b")
bdi = _tag("bdi")
bdo = _tag("bdo", required=("dir",))
blockquote = _tag("blockquote", optional=("cite",))
cite = _tag("cite")
code = _tag("code")
del_ = _tag("del", optional=("cite", "datetime"))
dfn = _tag("dfn")
em = _tag("em")
i = _tag("i")
ins = _tag("ins", optional=("cite", "datetime"))
mark = _tag("mark")
meter = _tag("meter", required=("value",), optional=("form", "high", "low", "max", "min", "optimum"))
pre = _tag("pre")
progress = _tag("progress", required=("max", "value"))
q = _tag("q", required=("cite",))
s = _tag("s")
samp = _tag("samp")
strong = _tag("strong")
sub = _tag("sub")
sup = _tag("sup")
time = _tag("time", required=("datetime",))
u = _tag("u")

# Forms and input
button = _tag(
    "button",
    required=("type",),
    optional=(
        boolean("autofocus"),
        boolean("disabled"),
        "form",
        "formaction",
        "formenctype",
        "formmethod",
        boolean("formnovalidate"),
        "formtarget",
        "name",
        "value",
    ),
)

# Images
IMG = _tag(
    "img",
    required=("src", "alt"),
    optional=("crossorigin", boolean("ismap"), "loading", "longdesc", "referrerpolicy", "usemap"),
)
canvas = _tag("canvas")
figure = _tag("figure")
figcaption = _tag("figcaption")
picture = _tag("picture")
svg = _tag("svg")


def img(*values: Any) -> ElementView | ElementBuilder:
    """Image: ``img(src, alt)`` or a builder when given fewer values."""
    return IMG.create(*values)


# Audio / video
_MEDIA_FLAGS = (boolean("autoplay"), boolean("controls"), boolean("loop"), boolean("muted"))

audio = _tag("audio", optional=(*_MEDIA_FLAGS, "preload"))
source = _tag("source", optional=("media", "src", "srcset", "type"))
video = _tag("video", optional=(*_MEDIA_FLAGS, "poster", "preload"))

# Links
a = _tag(
    "a",
    required=("href",),
    optional=(boolean("download"), "hreflang", "media", "referrerpolicy", "rel", "target", "type"),
)
nav = _tag("nav")

# Lists
ul = _tag("ul")
ol = _tag("ol", optional=(boolean("reversed"), "start", "type"))
li = _tag("li")

# Tables
table = _tag("table")
caption = _tag("caption")
th = _tag("th", optional=("abbr", "colspan", "headers", "rowspan", "scope"))
tr = _tag("tr")
td = _tag("td", optional=("colspan", "headers", "rowspan"))
thead = _tag("thead")
tbody = _tag("tbody")
tfoot = _tag("tfoot")

# Style and semantics
div = _tag("div")
span = _tag("span")
header = _tag("header")
footer = _tag("footer")
main = _tag("main")
section = _tag("section")
article = _tag("article")
aside = _tag("aside")
details = _tag("details", optional=(boolean("open"),))
summary = _tag("summary")
data = _tag("data")
