# -*- coding: utf-8 -*-
"""
AUC of scores (propensity scores, predicted risks) against binary labels.
 - auc:          Mann-Whitney statistic / (m * n), ties count 1/2.
 - auc_with_ci:  AUC with a DeLong normal-approximation interval.

m = number of treated (label 1), n = number of comparators (label 0).
"""
from statistics import NormalDist
import math
import numpy as np


def _to_numpy(x):
    # torch tensors come in from eval.discrimination
    if hasattr(x, "detach"):
        x = x.detach().cpu().numpy()
    return np.asarray(x)


def check_inputs(propensity_scores, treatment):
    """
    Validate and convert inputs. Returns (scores float64, treatment int8).
    Raises ValueError on any violation.
    """
    s = _to_numpy(propensity_scores)
    t = _to_numpy(treatment)
    if s.ndim != 1 or t.ndim != 1:
        raise ValueError("scores and treatment must be 1-D")
    if s.shape[0] != t.shape[0]:
        raise ValueError(f"length mismatch: {s.shape[0]} scores vs {t.shape[0]} labels")
    if s.shape[0] == 0:
        raise ValueError("empty input")
    try:
        s = s.astype(np.float64)
    except (TypeError, ValueError) as e:
        raise ValueError(f"scores must be numeric: {e}") from e
    if not np.all(np.isfinite(s)):
        raise ValueError("scores must be finite (no NaN or inf)")
    if not np.all(np.isin(t, (0, 1))):
        raise ValueError("treatment labels must be 0 or 1")
    t = t.astype(np.int8)
    n_pos = int(t.sum())
    if n_pos == 0 or n_pos == t.shape[0]:
        raise ValueError("both treatment groups must be present to compute an AUC")
    return s, t


def midrank(x) -> np.ndarray:
    """1-based ranks; tied values share the average of their ranks."""
    x = np.asarray(x, dtype=np.float64)
    _, inv, counts = np.unique(x, return_inverse=True, return_counts=True)
    ends = np.cumsum(counts)
    starts = ends - counts
    mid = (starts + ends + 1) / 2.0
    return mid[inv.ravel()]


def _auc_groups(cases: np.ndarray, controls: np.ndarray) -> float:
    m, n = len(cases), len(controls)
    r = midrank(np.concatenate([cases, controls]))
    return float((r[:m].sum() - m * (m + 1) / 2.0) / (m * n))


def auc(propensity_scores, treatment) -> float:
    s, t = check_inputs(propensity_scores, treatment)
    return _auc_groups(s[t == 1], s[t == 0])


def delong_variance(propensity_scores, treatment):
    """
    AUC and its DeLong variance estimate.
    Placement values:
        V10_i = (pooled rank of case i - rank among cases) / n
        V01_j = 1 - (pooled rank of control j - rank among controls) / m
    Var = var(V10) / m + var(V01) / n  (sample variances, ddof=1)
    """
    s, t = check_inputs(propensity_scores, treatment)
    cases, controls = s[t == 1], s[t == 0]
    m, n = len(cases), len(controls)
    if m < 2 or n < 2:
        raise ValueError("a confidence interval needs at least two subjects per treatment group")
    tz = midrank(np.concatenate([cases, controls]))
    tx = midrank(cases)
    ty = midrank(controls)
    v10 = (tz[:m] - tx) / n
    v01 = 1.0 - (tz[m:] - ty) / m
    area = float(v10.mean())
    var = float(np.var(v10, ddof=1) / m + np.var(v01, ddof=1) / n)
    return area, var


def normal_quantile(confidence: float) -> float:
    """Two-sided standard normal quantile, e.g. 0.95 -> 1.95996."""
    if not 0.0 < confidence < 1.0:
        raise ValueError(f"confidence must be in (0, 1), got {confidence}")
    return NormalDist().inv_cdf(0.5 + confidence / 2.0)


def auc_with_ci(propensity_scores, treatment, confidence: float = 0.95):
    """Returns [auc, lower, upper]; bounds truncated to [0, 1]."""
    z = normal_quantile(confidence)
    area, var = delong_variance(propensity_scores, treatment)
    half = z * math.sqrt(max(var, 0.0))
    return [area, max(0.0, area - half), min(1.0, area + half)]
