"""Exceptions raised while serializing a sketch.

Every error describes a defect in the caller-supplied model or settings, so
none of them is caught inside the package.
"""


class DXFError(ValueError):
    """Base class for serialization errors."""


class InvalidValue(DXFError):
    """A value cannot be formatted as a DXF number."""


class TransformError(DXFError):
    """A transformation cannot be applied to a geometric attribute."""


class UnsupportedEntity(DXFError):
    """A node has no encoder."""


class UnknownUnit(DXFError):
    """A unit name has no defined conversion."""
