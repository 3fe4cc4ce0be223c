"""
snapvector/errors.py
--------------------
The single failure carrier for EuclideanVector contract violations.
Each kind holds the literal message template reported to the caller.
"""
import logging
from enum import Enum

logger = logging.getLogger(__name__)


class VectorErrorKind(Enum):
    INDEX_OUT_OF_RANGE = "Index {index} is not valid for this EuclideanVector object"
    DIMENSION_MISMATCH = "Dimensions of LHS({lhs}) and RHS({rhs}) do not match"
    DIVISION_BY_ZERO = "Invalid vector division by 0"
    ZERO_DIMENSIONS_NORM = "EuclideanVector with no dimensions does not have a norm"
    ZERO_DIMENSIONS_UNIT = "EuclideanVector with no dimensions does not have a unit vector"
    ZERO_NORM_UNIT = "EuclideanVector with euclidean normal of 0 does not have a unit vector"


class EuclideanVectorError(Exception):
    ''' Raised when an operation on an EuclideanVector breaks its contract.

    Attributes:
        kind (VectorErrorKind): Which contract was broken. None when the
            error was built from a bare message.
    '''

    def __init__(self, message, kind=None):
        super().__init__(message)
        self.kind = kind

    @property
    def message(self):
        return self.args[0]


def vector_error(kind, **fields):
    """
    Builds (but does not raise) the error for `kind`.

    Args:
        kind (VectorErrorKind): The failure tag.
        **fields: Values for the message placeholders (index, lhs, rhs).

    Returns:
        EuclideanVectorError: Ready to be raised at the call site.
    """
    message = kind.value.format(**fields)
    logger.debug("EuclideanVector contract violation (%s): %s", kind.name, message)
    return EuclideanVectorError(message, kind)
