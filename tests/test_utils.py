"""Tests for Vistas utility modules."""

import logging


class TestGetLogger:
    """Tests for get_logger namespacing."""

    def test_prefixes_name(self) -> None:
        from vistas.utils.logger import get_logger

        assert get_logger("mymodule").name == "vistas.mymodule"

    def test_keeps_vistas_names(self) -> None:
        from vistas.utils.logger import get_logger

        assert get_logger("vistas").name == "vistas"
        assert get_logger("vistas.draw").name == "vistas.draw"

    def test_dispatch_fallback_is_logged(self, caplog) -> None:
        from vistas.dispatch import switch_case

        with caplog.at_level(logging.DEBUG, logger="vistas"):
            switch_case("missing", {"a": 1}, 0)
        assert any("using default" in record.getMessage() for record in caplog.records)


class TestStringBuilder:
    """Tests for StringBuilder accumulation."""

    def test_append_chains_and_builds(self) -> None:
        from vistas.stringbuilder import StringBuilder

        sb = StringBuilder()
        assert sb.append("<p>").append("hi").append("</p>") is sb
        assert sb.build() == "<p>hi</p>"

    def test_empty_fragments_skipped(self) -> None:
        from vistas.stringbuilder import StringBuilder

        sb = StringBuilder().append("").extend(["a", "", "b"])
        assert len(sb) == 2
        assert sb.build() == "ab"

    def test_bool(self) -> None:
        from vistas.stringbuilder import StringBuilder

        assert not StringBuilder()
        assert StringBuilder().append("x")
