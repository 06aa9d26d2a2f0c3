"""Tests for the sequence-projection view."""

from __future__ import annotations

from vistas import for_each, render
from vistas.foreach import ForEachView
from vistas.tags import li, ul


class TestForEachView:
    """Projection at render time."""

    def test_numbers(self) -> None:
        assert for_each([1, 2, 3], lambda n: n * 2).render() == "246"

    def test_views(self) -> None:
        view = ul(for_each(["a", "b"], lambda x: li(x)))
        assert render(view) == "<ul><li>a</li><li>b</li></ul>"

    def test_empty(self) -> None:
        assert for_each([], lambda x: x).render() == ""

    def test_projector_output_may_be_sequence(self) -> None:
        assert for_each(["a", "b"], lambda x: [x, "|"]).render() == "a|b|"

    def test_skip_by_projecting_empty(self) -> None:
        assert for_each(range(5), lambda n: n if n % 2 else "").render() == "13"

    def test_projector_called_once_per_item_per_render(self) -> None:
        calls: list[int] = []

        def project(n: int) -> int:
            calls.append(n)
            return n

        view = for_each([1, 2], project)
        assert calls == []
        view.render()
        assert calls == [1, 2]
        view.render()
        assert calls == [1, 2, 1, 2]

    def test_sequence_changes_are_seen(self) -> None:
        data = ["a"]
        view = for_each(data, lambda x: x)
        data.append("b")
        assert view.render() == "ab"

    def test_generator_is_materialized(self) -> None:
        view = for_each((n for n in range(3)), str)
        assert view.render() == view.render() == "012"

    def test_global_attributes_not_rendered(self) -> None:
        view = for_each(["a"], lambda x: x).class_("c")
        assert isinstance(view, ForEachView)
        assert view.render() == "a"

    def test_repr(self) -> None:
        assert repr(for_each([1, 2], str)) == "ForEachView(2 elements)"
