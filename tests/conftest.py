"""
Shared test fixtures for the snapvector suite.
"""
import pytest

from snapvector import EuclideanVector


@pytest.fixture
def empty_vector():
    """A valid vector with no dimensions (the moved-from state)."""
    ev = EuclideanVector(1)
    ev.move()
    return ev


@pytest.fixture
def vec_a():
    return EuclideanVector.from_iterable([3.0, 8.0, 1.0])


@pytest.fixture
def vec_b():
    return EuclideanVector.from_iterable([-4.0, 2.0, 2.0])
