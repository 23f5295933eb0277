"""
Shared fixtures for the rlebw tests.
"""

import random

import pytest

from rlebw.image import BLACK, WHITE, BWImage

from .helpers import random_pixels


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def white_4x2():
    return BWImage.create(4, 2, WHITE)


@pytest.fixture
def black_4x2():
    return BWImage.create(4, 2, BLACK)


@pytest.fixture
def striped():
    """3x3 image with alternating pixels (maximally fragmented rows)."""
    return BWImage.from_pixels([[1, 0, 1], [0, 1, 0], [1, 0, 1]])


@pytest.fixture
def random_pair(rng):
    """Two random 13x7 images of the same size."""
    a = BWImage.from_pixels(random_pixels(rng, 13, 7))
    b = BWImage.from_pixels(random_pixels(rng, 13, 7, density=0.3))
    return a, b
