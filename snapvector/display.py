"""
snapvector/display.py
---------------------
Textual output for EuclideanVector objects.

Format:  '[' + magnitudes separated by single spaces + ']'
         e.g. [-2.5 1.3 0.9], and [] for a vector with no dimensions.

Magnitudes use the compact general format ('g', six significant digits),
which is how a C-style output stream prints a double by default. Whole
numbers therefore print without a trailing '.0' (e.g. [0 -3 1 15]).
"""
MAGNITUDE_FORMAT = "g"
SEPARATOR = " "


def format_magnitude(val):
    ''' Renders one magnitude. '''
    return format(val, MAGNITUDE_FORMAT)


def format_vector(vector):
    """
    Returns the bracketed text form of a vector.

    Args:
        vector: Any EuclideanVector (or iterable of floats).

    Returns:
        str: e.g. "[-2.5 1.3 0.9]"
    """
    return "[" + SEPARATOR.join(format_magnitude(m) for m in vector) + "]"


def write_vector(stream, vector):
    """
    Writes the text form of a vector to a text sink (file, sys.stdout,
    io.StringIO, ...) and returns the sink so writes can be chained.
    """
    stream.write(format_vector(vector))
    return stream
