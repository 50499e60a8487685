"""
Exception types raised while sorting a document.
"""


class SorterError(Exception):
    """Base class for all sorter failures."""


class StructureError(SorterError):
    """The document has no body container or is not well-formed XML."""


class SerializationError(SorterError):
    """The reordered document could not be rendered back to text."""


class AcquisitionError(SorterError):
    """No document text was supplied, or the source could not be read."""
