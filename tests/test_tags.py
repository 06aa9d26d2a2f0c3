"""Tests for the HTML element catalog."""

from __future__ import annotations

import pytest

from vistas import render
from vistas.element import ElementSchema
from vistas.tags import (
    TAGS,
    a,
    audio,
    br,
    button,
    del_,
    details,
    h1,
    li,
    ol,
    p,
    source,
    table,
    td,
    th,
    tr,
    ul,
    video,
)


class TestCatalog:
    """Registry contents."""

    def test_registry_maps_names_to_schemas(self) -> None:
        assert TAGS["p"] is p
        assert all(isinstance(schema, ElementSchema) for schema in TAGS.values())
        assert all(name == schema.tag for name, schema in TAGS.items())

    def test_keyword_tag_name(self) -> None:
        assert TAGS["del"] is del_
        assert render(del_("old").datetime("2024-01-01")) == '<del datetime="2024-01-01">old</del>'

    @pytest.mark.parametrize("name", ["h1", "h6", "div", "span", "section", "summary", "data"])
    def test_plain_tags(self, name: str) -> None:
        assert render(TAGS[name]("x")) == f"<{name}>x</{name}>"


class TestEndToEnd:
    """Whole documents built from the catalog."""

    def test_paragraph_without_attributes(self) -> None:
        html = render(p("hi"))
        assert "<p" in html
        assert "</p>" in html
        assert "hi" in html
        assert html == "<p>hi</p>"

    def test_boolean_and_class(self) -> None:
        html = render(video("clip").controls().class_("x"))
        assert html == '<video controls class="x">clip</video>'

    def test_media_attributes(self) -> None:
        view = video(source().src("m.webm").type("video/webm")).poster("p.png").muted().loop()
        assert render(view) == (
            '<video loop muted poster="p.png">'
            '<source src="m.webm" type="video/webm"></source>'
            "</video>"
        )

    def test_audio_preload(self) -> None:
        assert render(audio().preload("none")) == '<audio preload="none"></audio>'

    def test_link(self) -> None:
        view = a("Docs").href("/docs").target("_blank").download()
        assert render(view) == '<a href="/docs" download target="_blank">Docs</a>'

    def test_button(self) -> None:
        view = button("Go").type("submit").disabled().name("go")
        assert render(view) == '<button type="submit" disabled name="go">Go</button>'

    def test_ordered_list(self) -> None:
        view = ol(li("a"), li("b")).reversed().start(5)
        assert render(view) == '<ol reversed start="5"><li>a</li><li>b</li></ol>'

    def test_table(self) -> None:
        view = table(tr(th("Name").scope("col"), th("Qty")), tr(td("Pen"), td(3).colspan(1)))
        assert render(view) == (
            '<table><tr><th scope="col">Name</th><th>Qty</th></tr>'
            '<tr><td>Pen</td><td colspan="1">3</td></tr></table>'
        )

    def test_details_open(self) -> None:
        assert render(details("x").open()) == "<details open>x</details>"

    def test_void_element(self) -> None:
        assert render(p("a", br(), "b")) == "<p>a<br></br>b</p>"

    def test_mixed_document(self) -> None:
        page = [h1("Title").id("top"), ul([li(n) for n in range(2)])]
        assert render(page) == '<h1 id="top">Title</h1><ul><li>0</li><li>1</li></ul>'
