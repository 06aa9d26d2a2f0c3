"""Exception hierarchy and message formatting."""

import pytest

from vistas.errors import (
    AbstractRenderError,
    DispatchConfigurationError,
    IncompleteElementError,
    MissingAttributeError,
    RenderDepthError,
    UnknownAttributeError,
    VistasError,
)


class TestErrorHierarchy:
    """Every error derives from VistasError."""

    @pytest.mark.parametrize(
        "err",
        [
            DispatchConfigurationError("k"),
            AbstractRenderError("raw", "Thing"),
            UnknownAttributeError("a", "src"),
            MissingAttributeError("a", ("href",)),
            IncompleteElementError("img", ("alt",)),
            RenderDepthError(10),
        ],
    )
    def test_is_vistas_error(self, err: VistasError) -> None:
        assert isinstance(err, VistasError)

    def test_builtin_bases(self) -> None:
        assert isinstance(AbstractRenderError("raw", "T"), NotImplementedError)
        assert isinstance(UnknownAttributeError("a", "x"), AttributeError)


class TestErrorMessages:
    """Messages identify the offending key, type or tag."""

    def test_dispatch(self) -> None:
        assert "'k'" in str(DispatchConfigurationError("k"))

    def test_abstract(self) -> None:
        assert str(AbstractRenderError("raw", "Thing")) == "Implementation of raw() missing at Thing!"

    def test_unknown_attribute(self) -> None:
        err = UnknownAttributeError("p", "href")
        assert str(err) == "<p> does not declare attribute 'href'"
        assert err.tag == "p"
        assert err.name == "href"

    def test_missing_attribute(self) -> None:
        err = MissingAttributeError("img", ("src", "alt"))
        assert str(err) == "<img> is missing required attribute(s): src, alt"

    def test_depth(self) -> None:
        assert "32" in str(RenderDepthError(32))
