# -*- coding: utf-8 -*-
"""
Run configuration for AUC evaluation.

YAML layout (flat, or nested under a top-level `auc:` key):

    auc:
      method: bootstrap      # delong | bootstrap
      confidence: 0.95
      n_bootstrap: 2000
      seed: 1337
      score_col: propensity_score
      treatment_col: treatment
"""
from dataclasses import dataclass, fields
from typing import Optional
import yaml

METHODS = ("delong", "bootstrap")


@dataclass
class AucConfig:
    confidence: float = 0.95
    method: str = "delong"
    n_bootstrap: int = 1000
    seed: Optional[int] = None
    score_col: str = "propensity_score"
    treatment_col: str = "treatment"

    def __post_init__(self):
        try:
            self.confidence = float(self.confidence)
        except (TypeError, ValueError) as e:
            raise ValueError(f"confidence must be a number, got {self.confidence!r}") from e
        try:
            n_boot = float(self.n_bootstrap)
        except (TypeError, ValueError) as e:
            raise ValueError(f"n_bootstrap must be an integer, got {self.n_bootstrap!r}") from e
        if isinstance(self.n_bootstrap, bool) or not n_boot.is_integer():
            raise ValueError(f"n_bootstrap must be an integer, got {self.n_bootstrap!r}")
        self.n_bootstrap = int(n_boot)
        if not 0.0 < self.confidence < 1.0:
            raise ValueError(f"confidence must be in (0, 1), got {self.confidence}")
        if self.method not in METHODS:
            raise ValueError(f"method must be one of {METHODS}, got {self.method!r}")
        if self.n_bootstrap < 1:
            raise ValueError(f"n_bootstrap must be >= 1, got {self.n_bootstrap}")


def load_config(path: str) -> AucConfig:
    with open(path, "r") as f:
        raw = yaml.safe_load(f) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"{path}: expected a mapping at top level")
    if "auc" in raw:
        extra = sorted(k for k in raw if k != "auc")
        if extra:
            raise ValueError(f"{path}: unknown config keys {extra} next to the 'auc' section")
        raw = raw["auc"] or {}
        if not isinstance(raw, dict):
            raise ValueError(f"{path}: 'auc' must be a mapping")
    known = {f.name for f in fields(AucConfig)}
    unknown = sorted(set(raw) - known)
    if unknown:
        raise ValueError(f"{path}: unknown config keys {unknown}")
    return AucConfig(**raw)
