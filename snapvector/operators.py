"""
snapvector/operators.py
-----------------------
Free algebraic functions on EuclideanVector objects.
The Python operators on the class (+, -, *, /, ==, !=) delegate here, so
these are the named forms of the same contracts.

Every function that can fail validates before it allocates or writes, so a
failure never leaves a half-built result behind.
"""
import numbers

import numpy as np

from . import vector as _vector
from .errors import VectorErrorKind, vector_error


def check_dimensions(lhs, rhs):
    ''' Raises DIMENSION_MISMATCH unless both vectors have the same dimension. '''
    l_dims = lhs.get_num_dimensions()
    r_dims = rhs.get_num_dimensions()
    if l_dims != r_dims:
        raise vector_error(VectorErrorKind.DIMENSION_MISMATCH, lhs=l_dims, rhs=r_dims)


def check_divisor(n):
    ''' Raises DIVISION_BY_ZERO for a zero divisor (either sign). '''
    if n == 0:
        raise vector_error(VectorErrorKind.DIVISION_BY_ZERO)


def is_scalar(value):
    ''' True for real numbers (Python or numpy), False for bools and vectors. '''
    return isinstance(value, numbers.Real) and not isinstance(value, (bool, np.bool_))


def add(o1, o2):
    """ Returns o1 + o2 as a new vector. """
    check_dimensions(o1, o2)
    return _vector.EuclideanVector._wrap(o1._magnitudes + o2._magnitudes)


def sub(o1, o2):
    """ Returns o1 - o2 as a new vector. """
    check_dimensions(o1, o2)
    return _vector.EuclideanVector._wrap(o1._magnitudes - o2._magnitudes)


def dot(o1, o2):
    """
    Dot product of two vectors of equal dimension.

    The products are accumulated one index at a time, from 0 upwards.
    Float addition is not associative, so a pairwise/BLAS reduction
    (np.dot) could round differently.
    """
    check_dimensions(o1, o2)

    res = 0.0
    for x, y in zip(o1._magnitudes.tolist(), o2._magnitudes.tolist()):
        res += x * y
    return res


def scalar_mul(o, n):
    """ Returns a new vector with every magnitude multiplied by n. """
    return _vector.EuclideanVector._wrap(float(n) * o._magnitudes)


def scalar_div(o, n):
    """ Returns a new vector with every magnitude divided by n. """
    check_divisor(n)
    return _vector.EuclideanVector._wrap(o._magnitudes / float(n))


def eq(o1, o2):
    '''
    Exact equality: same dimension and bit-for-bit equal magnitudes.
    No tolerance is applied, and NaN is never equal to anything.
    '''
    if o1.get_num_dimensions() != o2.get_num_dimensions():
        return False
    return bool(np.all(o1._magnitudes == o2._magnitudes))


def ne(o1, o2):
    return not eq(o1, o2)
