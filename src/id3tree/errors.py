class ID3Error(Exception):
    """Base class for errors raised by id3tree"""


class ShapeMismatch(ID3Error, ValueError):
    """Attribute names, rows and labels do not line up"""


class EmptyInput(ID3Error, OSError):
    """A data source has no header line"""


class TreeStructureError(ID3Error, RuntimeError):
    """A tree node violates the Leaf/Decision invariants"""
