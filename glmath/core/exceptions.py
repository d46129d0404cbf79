"""
Exception hierarchy for glmath.

All exceptions inherit from GlmathError to allow catching any
library-specific error. Most numerical edge cases in glmath are handled
as silent no-ops (zero-length normalize, singular invert); the
exceptions here cover invalid construction and the explicitly checked
code paths.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class GlmathError(Exception):
    """Base exception for all glmath errors."""
    pass


class ValidationError(GlmathError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks, e.g. an
    unknown scalar kind or non-numeric components.
    """
    pass


class DimensionError(ValidationError):
    """
    Component count or matrix shape is wrong.

    Raised when a vector receives the wrong number of components or a
    matrix is built from data of the wrong shape.
    """
    pass


class NumericalError(GlmathError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular.

    Only raised by the checked inversion path; plain ``invert()`` leaves a
    singular matrix unchanged instead.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        determinant: The determinant that was found to be zero
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        determinant: float | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.determinant = determinant
