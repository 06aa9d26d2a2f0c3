"""Exception classes for Vistas.

Rendering is forgiving by design of the data model: absent attribute values
render as nothing and unknown content renders as its string form. The errors
below are raised for wiring mistakes in the code that builds a view tree.
"""

from __future__ import annotations


class VistasError(Exception):
    """Base exception for all Vistas errors.

    Subclass this for specific error categories.
    """

    pass


class DispatchConfigurationError(VistasError):
    """A tagged dispatch was called without a default case."""

    def __init__(self, key: object) -> None:
        self.key = key
        super().__init__(f"Default case for switch_case not provided (key={key!r})")


class AbstractRenderError(VistasError, NotImplementedError):
    """A view type does not supply its own production rule.

    Raised when ``render()`` or ``raw()`` is invoked on a view class that
    inherits the abstract implementation.
    """

    def __init__(self, method: str, type_name: str) -> None:
        """Initialize abstract render error.

        Args:
            method: Name of the missing method ("render" or "raw")
            type_name: Name of the offending view type
        """
        self.method = method
        self.type_name = type_name
        super().__init__(f"Implementation of {method}() missing at {type_name}!")


class UnknownAttributeError(VistasError, AttributeError):
    """An attribute name is not declared by the element schema."""

    def __init__(self, tag: str, name: str) -> None:
        # AttributeError.__init__ resets .name, so it must run first
        super().__init__(f"<{tag}> does not declare attribute '{name}'")
        self.tag = tag
        self.name = name


class MissingAttributeError(VistasError):
    """Required attribute is unset at render time (strict mode only)."""

    def __init__(self, tag: str, names: tuple[str, ...]) -> None:
        self.tag = tag
        self.names = names
        super().__init__(f"<{tag}> is missing required attribute(s): {', '.join(names)}")


class IncompleteElementError(VistasError):
    """A builder was rendered before all required attributes were set."""

    def __init__(self, tag: str, missing: tuple[str, ...]) -> None:
        self.tag = tag
        self.missing = missing
        super().__init__(
            f"Builder for <{tag}> is incomplete; set {', '.join(missing)} before rendering"
        )


class RenderDepthError(VistasError):
    """Draw recursion exceeded the configured maximum depth.

    Usually means a view was nested inside itself.
    """

    def __init__(self, max_depth: int) -> None:
        self.max_depth = max_depth
        super().__init__(
            f"Maximum draw depth of {max_depth} exceeded; the view tree may contain a cycle"
        )
