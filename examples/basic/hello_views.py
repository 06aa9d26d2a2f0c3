"""Compose a small page and print its HTML."""

from vistas import for_each, render
from vistas.tags import a, h1, img, li, p, section, ul

links = [("Docs", "/docs"), ("About", "/about")]

page = section(
    h1("Hello").id("top"),
    p("Built from views.").class_("lead"),
    ul(for_each(links, lambda link: li(a(link[0]).href(link[1])))),
    img().alt("Logo").src("logo.png").class_("logo"),
)

print(render(page))
