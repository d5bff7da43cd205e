import random

import pytest

from core.vector import Vector3


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def random_vectors(rng):
    return [Vector3(rng.uniform(-50, 50), rng.uniform(-50, 50), rng.uniform(-50, 50))
            for _ in range(25)]
