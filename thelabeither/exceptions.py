class AbsentValueError(LookupError):
    """
    Raised when reading the payload of the side of an ``Either`` that isn't
    present, e.g. ``Left(1).right``.
    """
