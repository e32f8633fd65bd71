import numpy as np
import pytest

from scicn.tools.qc import compute_gini


def test_even_coverage_has_zero_gini():
    Y = np.full((100, 3), 50)
    assert np.allclose(compute_gini(Y), 0.)


def test_concentrated_coverage():
    Y = np.zeros((10, 2))
    Y[0, 0] = 100
    Y[:, 1] = np.arange(1, 11)

    gini = compute_gini(Y)

    assert gini[0] == pytest.approx(1. - 1. / 10)
    assert 0. < gini[1] < gini[0]


def test_order_of_bins_does_not_matter():
    Y = np.random.default_rng(3).poisson(20, size=(200, 4))
    assert np.allclose(compute_gini(Y), compute_gini(Y[::-1]))


def test_invalid_input():
    with pytest.raises(ValueError):
        compute_gini(np.ones(10))
    with pytest.raises(ValueError):
        compute_gini(np.zeros((10, 2)))
