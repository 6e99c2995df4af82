import numpy as np

from .auc import check_inputs


def roc_curve_points(propensity_scores, treatment):
    """
    ROC points, one per distinct score (descending), from (0,0) to (1,1).
    Returns (fpr, tpr, thresholds); thresholds[0] is +inf.
    """
    s, t = check_inputs(propensity_scores, treatment)
    # sort by score descending
    order = np.argsort(-s, kind="mergesort")
    s = s[order]; t = t[order]
    tp = np.cumsum(t)
    fp = np.cumsum(1 - t)
    # last index of each run of equal scores
    last = np.r_[np.flatnonzero(np.diff(s)), len(s) - 1]
    tpr = np.r_[0.0, tp[last] / float(tp[-1])]
    fpr = np.r_[0.0, fp[last] / float(fp[-1])]
    thresholds = np.r_[np.inf, s[last]]
    return fpr, tpr, thresholds


def trapezoid_area(x, y) -> float:
    x = np.asarray(x, dtype=np.float64); y = np.asarray(y, dtype=np.float64)
    return float(np.sum(np.diff(x) * (y[1:] + y[:-1]) / 2.0))
