"""Exception classes for tsdecl.

Provides standardized exceptions for error handling throughout tsdecl.
Rendering itself is lenient; these signal construction bugs in the
calling generator, not data problems.
"""

from __future__ import annotations


class TsDeclError(Exception):
    """Base exception for all tsdecl errors.

    Subclass this for specific error categories.
    """

    pass


class AbstractNodeError(TsDeclError, NotImplementedError):
    """The abstract rendering hook was invoked on a node without one.

    Raised when ``Node.body`` is reached on the base class, i.e. a caller
    bypassed the node catalogue.
    """

    def __init__(self, node_type: str) -> None:
        """Initialize abstract node error.

        Args:
            node_type: Class name of the node that has no body
        """
        self.node_type = node_type
        super().__init__(f"{node_type}.body() is abstract")


class SerializationError(TsDeclError, ValueError):
    """Error while reconstructing a node tree from serialized data.

    Raised for a missing or unknown ``_type`` discriminator, or when the
    decoded root is not of the expected kind.
    """

    def __init__(self, message: str, type_name: str | None = None) -> None:
        """Initialize serialization error.

        Args:
            message: Description of the problem
            type_name: Offending ``_type`` value (optional)
        """
        self.type_name = type_name
        super().__init__(message)
