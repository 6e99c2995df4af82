import numpy as np
import pytest
from sklearn.metrics import roc_curve

from psauc.core.auc import auc
from psauc.core.roc import roc_curve_points, trapezoid_area


def _toy(n=150, seed=2):
    rng = np.random.default_rng(seed)
    t = rng.integers(0, 2, n)
    s = np.round(rng.random(n) + 0.3 * t, 1)
    return s, t


def test_roc_matches_sklearn():
    s, t = _toy()
    fpr, tpr, thr = roc_curve_points(s, t)
    ref_fpr, ref_tpr, ref_thr = roc_curve(t, s, drop_intermediate=False)
    assert np.allclose(fpr, ref_fpr)
    assert np.allclose(tpr, ref_tpr)
    assert np.allclose(thr[1:], ref_thr[1:])
    assert np.isinf(thr[0])


def test_roc_endpoints_and_area():
    s, t = _toy()
    fpr, tpr, _ = roc_curve_points(s, t)
    assert (fpr[0], tpr[0]) == (0.0, 0.0)
    assert (fpr[-1], tpr[-1]) == (1.0, 1.0)
    assert np.all(np.diff(fpr) >= 0) and np.all(np.diff(tpr) >= 0)
    assert trapezoid_area(fpr, tpr) == pytest.approx(auc(s, t))


def test_roc_all_tied():
    fpr, tpr, thr = roc_curve_points([0.3] * 4, [0, 1, 0, 1])
    assert fpr.tolist() == [0.0, 1.0]
    assert tpr.tolist() == [0.0, 1.0]
    assert thr[1] == 0.3
