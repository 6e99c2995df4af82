import numpy as np
import pytest

from psauc.core.auc import auc
from psauc.core.bootstrap import bootstrap_auc_ci


def _toy(n=200, seed=1):
    rng = np.random.default_rng(seed)
    t = rng.integers(0, 2, n)
    s = rng.normal(size=n) + 1.0 * t
    return s, t


def test_bootstrap_seed_reproducible():
    s, t = _toy()
    a = bootstrap_auc_ci(s, t, n_boot=200, seed=42)
    b = bootstrap_auc_ci(s, t, n_boot=200, seed=42)
    c = bootstrap_auc_ci(s, t, n_boot=200, seed=43)
    assert a == b
    assert a[1:] != c[1:]


def test_bootstrap_brackets_point_estimate():
    s, t = _toy()
    area, lo, hi = bootstrap_auc_ci(s, t, n_boot=300, seed=0)
    assert area == pytest.approx(auc(s, t))
    assert 0.0 <= lo < area < hi <= 1.0


def test_bootstrap_leaves_global_rng_alone():
    s, t = _toy()
    np.random.seed(123)
    before = np.random.get_state()[1].copy()
    bootstrap_auc_ci(s, t, n_boot=50, seed=7)
    assert np.array_equal(np.random.get_state()[1], before)


def test_bootstrap_accepts_generator():
    s, t = _toy()
    a = bootstrap_auc_ci(s, t, n_boot=100, rng=np.random.default_rng(5))
    b = bootstrap_auc_ci(s, t, n_boot=100, seed=5)
    assert a == b


def test_bootstrap_perfect_separation():
    assert bootstrap_auc_ci([0.9, 0.8, 0.2, 0.1], [1, 1, 0, 0], n_boot=20, seed=0) == [1.0, 1.0, 1.0]


def test_bootstrap_rejects_bad_args():
    s, t = _toy()
    with pytest.raises(ValueError):
        bootstrap_auc_ci(s, t, n_boot=0)
    with pytest.raises(ValueError):
        bootstrap_auc_ci(s, t, confidence=0.0)
    with pytest.raises(ValueError):
        bootstrap_auc_ci(s, np.zeros_like(t))


def test_bootstrap_rejects_seed_and_rng_together():
    s, t = _toy()
    with pytest.raises(ValueError):
        bootstrap_auc_ci(s, t, n_boot=10, seed=1, rng=np.random.default_rng(1))
