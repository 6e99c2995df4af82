# -*- coding: utf-8 -*-
"""
Percentile bootstrap interval for the AUC.

Treated and comparator subjects are resampled separately (stratified), so
every replicate keeps both groups at their original sizes.
"""
import numpy as np

from .auc import check_inputs, _auc_groups


def bootstrap_auc_ci(propensity_scores, treatment, n_boot: int = 1000,
                     confidence: float = 0.95, seed=None, rng=None):
    """
    Returns [auc, lower, upper].

    The generator is local to the call: either `rng` as given or a fresh
    np.random.default_rng(seed), never both. The global numpy random state
    is left alone.
    """
    if n_boot < 1:
        raise ValueError(f"n_boot must be >= 1, got {n_boot}")
    if not 0.0 < confidence < 1.0:
        raise ValueError(f"confidence must be in (0, 1), got {confidence}")
    s, t = check_inputs(propensity_scores, treatment)
    cases, controls = s[t == 1], s[t == 0]
    if rng is not None and seed is not None:
        raise ValueError("pass either seed or rng, not both")
    if rng is None:
        rng = np.random.default_rng(seed)

    boots = np.empty(n_boot, dtype=np.float64)
    for b in range(n_boot):
        bc = rng.choice(cases, size=len(cases), replace=True)
        bn = rng.choice(controls, size=len(controls), replace=True)
        boots[b] = _auc_groups(bc, bn)

    alpha = 1.0 - confidence
    lo, hi = np.quantile(boots, [alpha / 2, 1 - alpha / 2])
    return [_auc_groups(cases, controls), float(lo), float(hi)]
