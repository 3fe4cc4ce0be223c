''' snapvector: Fixed-dimension Euclidean vectors for the Snap Suite of Tools.

    EuclideanVector is an owning, value-semantic vector of doubles with the
    usual vector algebra (+, -, dot, scaling, norm, unit vector).
'''
import logging

__version__ = "1.0.0"

# Import the Vector class
from .vector import EuclideanVector

# Import Errors
from .errors import EuclideanVectorError, VectorErrorKind

# Import Free Operators and Display
from .operators import add, sub, dot, scalar_mul, scalar_div, eq, ne
from .display import format_vector, write_vector

logging.getLogger(__name__).addHandler(logging.NullHandler())
