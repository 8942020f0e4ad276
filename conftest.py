import numpy as np
import pytest

from distributions.sampler import DistributionParams


@pytest.fixture
def rng():
    """Fixed random stream so statistical assertions are repeatable."""
    return np.random.default_rng(20171201)


@pytest.fixture
def neumann_params():
    return DistributionParams(alpha=1.98, p_zero=0.333, p_one=0.333)
