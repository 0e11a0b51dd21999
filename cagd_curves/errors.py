"""
Exception and warning types raised by the curve modules.
"""


class DimensionMismatch(ValueError):
    """Matrix/vector shapes are incompatible for the requested product."""


class DegreeNotImplemented(NotImplementedError):
    """A matrix-based conversion was requested for an unsupported degree.

    Callers needing other degrees should use the generic Bernstein /
    de Casteljau functions in :mod:`cagd_curves.bezier` instead.
    """

    def __init__(self, what, degree):
        super().__init__(f"{what} not implemented for degree {degree}")
        self.degree = degree


class KnotVectorWarning(UserWarning):
    """Emitted when an invalid knot vector is replaced by a uniform one."""
