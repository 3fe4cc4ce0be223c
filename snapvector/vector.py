"""
snapvector/vector.py
--------------------
Defines the EuclideanVector: a fixed-dimension, owning vector of doubles.
Every vector holds its own numpy float64 store; copies duplicate it and
moves hand it over, so no two vectors ever share memory.
"""
import logging
import operator
from collections import deque

import numpy as np

from . import operators
from .display import format_vector
from .errors import VectorErrorKind, vector_error

logger = logging.getLogger(__name__)

# Shape of a default-constructed vector: one dimension holding 0.0
DEFAULT_DIMENSIONS = 1
DEFAULT_MAGNITUDE = 0.0


def _create_magnitudes(size, magnitude):
    ''' Allocates a store of `size` slots, all set to `magnitude`. '''
    size = operator.index(size)
    if size < 0:
        raise ValueError(f"EuclideanVector cannot have a negative number of dimensions ({size}).")
    return np.full(size, magnitude, dtype=np.float64)


def _empty_magnitudes():
    return np.empty(0, dtype=np.float64)


class EuclideanVector:
    ''' A real-valued vector whose dimension is fixed at construction.

    The vector exclusively owns a contiguous float64 store. All algebra is
    available both as Python operators and as the named functions in
    `snapvector.operators`:

        a + b, a - b        elementwise (dimensions must match)
        a * b               dot product (float)
        a * s, s * a, a / s scaling by a real number
        a += b, a -= b, a *= s, a /= s
        a == b, a != b      exact comparison

    Element access is always bounds checked. Unlike Python lists, negative
    indices are invalid rather than counting from the end.

    Attributes:
        _magnitudes (np.ndarray): The owned 1-D float64 store. Its length is
            the number of dimensions; a moved-from vector has an empty store.
    '''
    __slots__ = ['_magnitudes']

    # Opt out of numpy's ufunc dispatch so np.float64(2) * v reaches __rmul__
    __array_ufunc__ = None

    # Mutable value type
    __hash__ = None

    def __init__(self, size=DEFAULT_DIMENSIONS, magnitude=DEFAULT_MAGNITUDE):
        """
        Args:
            size (int): Number of dimensions (>= 0). Defaults to 1.
            magnitude (float): Value placed in every dimension. Defaults to 0.0.
        """
        self._magnitudes = _create_magnitudes(size, magnitude)

    # --- Alternate Constructors ---
    @classmethod
    def from_iterable(cls, values):
        ''' Copies the values, in order, into a new vector. '''
        if isinstance(values, EuclideanVector):
            return values.copy()
        if isinstance(values, np.ndarray):
            if values.ndim != 1:
                raise ValueError(f"EuclideanVector needs a 1-D array, got shape {values.shape}.")
            return cls._wrap(np.array(values, dtype=np.float64))
        return cls._wrap(np.fromiter((float(v) for v in values), dtype=np.float64))

    @classmethod
    def from_range(cls, sequence, start=0, stop=None):
        """
        Copies sequence[start:stop] into a new vector (the begin/end pair form).

        Requires 0 <= start <= stop <= len(sequence); negative positions do
        not count from the end.
        """
        size = len(sequence)
        start = operator.index(start)
        stop = size if stop is None else operator.index(stop)
        if not 0 <= start <= stop <= size:
            raise ValueError(f"Invalid range [{start}, {stop}) for a sequence of length {size}.")
        return cls.from_iterable(sequence[i] for i in range(start, stop))

    @classmethod
    def _wrap(cls, magnitudes):
        ''' Builds a vector that takes ownership of an existing float64 array. '''
        ev = cls.__new__(cls)
        ev._magnitudes = magnitudes
        return ev

    # --- Copy / Move ---
    def copy(self):
        ''' Returns an independent (deep) copy of this vector. '''
        return self._wrap(self._magnitudes.copy())

    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo):
        return self.copy()

    def move(self):
        """
        Transfers this vector's store to a new vector and returns it.

        The source is left as a valid, empty vector (0 dimensions). Any
        later index into it fails with an INDEX_OUT_OF_RANGE error.
        """
        moved = self._wrap(self._magnitudes)
        self._magnitudes = _empty_magnitudes()
        logger.debug("Moved %d-dimensional store out of EuclideanVector", moved.get_num_dimensions())
        return moved

    def copy_from(self, other):
        ''' Copy assignment: replaces this vector's contents with a copy of other's. '''
        if other is not self:
            self._magnitudes = other._magnitudes.copy()
        return self

    def move_from(self, other):
        ''' Move assignment: takes other's store and leaves other empty. '''
        if other is not self:
            self._magnitudes = other.move()._magnitudes
        return self

    # --- Observers ---
    def get_num_dimensions(self):
        return self._magnitudes.shape[0]

    def __len__(self):
        return self.get_num_dimensions()

    def _check_index(self, i):
        i = operator.index(i)
        if i < 0 or i >= self.get_num_dimensions():
            raise vector_error(VectorErrorKind.INDEX_OUT_OF_RANGE, index=i)
        return i

    def at(self, i):
        ''' Returns the magnitude in dimension i. '''
        return float(self._magnitudes[self._check_index(i)])

    def set_at(self, i, value):
        ''' Sets the magnitude in dimension i. '''
        self._magnitudes[self._check_index(i)] = float(value)

    def __getitem__(self, i):
        return self.at(i)

    def __setitem__(self, i, value):
        self.set_at(i, value)

    def __iter__(self):
        return iter(self._magnitudes.tolist())

    # --- Derived Values ---
    def euclidean_norm(self):
        ''' sqrt(sum(m[i]^2)), accumulated in ascending index order. '''
        if self.get_num_dimensions() == 0:
            raise vector_error(VectorErrorKind.ZERO_DIMENSIONS_NORM)
        return float(np.sqrt(operators.dot(self, self)))

    def unit_vector(self):
        ''' Returns a new vector pointing the same way with a norm of 1. '''
        if self.get_num_dimensions() == 0:
            raise vector_error(VectorErrorKind.ZERO_DIMENSIONS_UNIT)

        norm = self.euclidean_norm()
        if norm == 0:
            raise vector_error(VectorErrorKind.ZERO_NORM_UNIT)
        return self._wrap(self._magnitudes / norm)

    # --- In-place Operators ---
    # Preconditions are checked before the store is touched, so a failed
    # operation leaves the receiver unchanged.
    def __iadd__(self, other):
        if not isinstance(other, EuclideanVector):
            return NotImplemented
        operators.check_dimensions(self, other)
        self._magnitudes += other._magnitudes
        return self

    def __isub__(self, other):
        if not isinstance(other, EuclideanVector):
            return NotImplemented
        operators.check_dimensions(self, other)
        self._magnitudes -= other._magnitudes
        return self

    def __imul__(self, n):
        if not operators.is_scalar(n):
            return NotImplemented
        self._magnitudes *= float(n)
        return self

    def __itruediv__(self, n):
        if not operators.is_scalar(n):
            return NotImplemented
        operators.check_divisor(n)
        self._magnitudes /= float(n)
        return self

    # --- Binary Operators ---
    def __add__(self, other):
        if not isinstance(other, EuclideanVector):
            return NotImplemented
        return operators.add(self, other)

    def __sub__(self, other):
        if not isinstance(other, EuclideanVector):
            return NotImplemented
        return operators.sub(self, other)

    def __mul__(self, other):
        # vector * vector is the dot product; vector * real scales
        if isinstance(other, EuclideanVector):
            return operators.dot(self, other)
        if operators.is_scalar(other):
            return operators.scalar_mul(self, other)
        return NotImplemented

    def __rmul__(self, other):
        if operators.is_scalar(other):
            return operators.scalar_mul(self, other)
        return NotImplemented

    def __truediv__(self, other):
        if not operators.is_scalar(other):
            return NotImplemented
        return operators.scalar_div(self, other)

    def __eq__(self, other):
        if not isinstance(other, EuclideanVector):
            return NotImplemented
        return operators.eq(self, other)

    def __ne__(self, other):
        if not isinstance(other, EuclideanVector):
            return NotImplemented
        return operators.ne(self, other)

    # --- Conversions ---
    def to_list(self):
        ''' Random-access copy of the magnitudes. '''
        return self._magnitudes.tolist()

    def to_deque(self):
        ''' Doubly-linked copy of the magnitudes. '''
        return deque(self._magnitudes.tolist())

    def to_array(self):
        ''' Returns the magnitudes as a new numpy array for calculation. '''
        return self._magnitudes.copy()

    def __str__(self):
        return format_vector(self)

    def __repr__(self):
        return f"EuclideanVector.from_iterable({self._magnitudes.tolist()!r})"

