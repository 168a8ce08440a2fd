"""Exceptions raised by the rendering pipeline."""


class DomainError(ArithmeticError):
    """Input geometry or camera configuration outside the valid domain.

    A domain error aborts the frame being rendered; no partial grid is returned.
    """


class ZeroLengthVectorError(DomainError):
    """Raised when normalising a vector of zero length."""


class DegenerateProjectionError(DomainError):
    """Raised when a point lies on the camera plane (camera-relative z == 0)."""
