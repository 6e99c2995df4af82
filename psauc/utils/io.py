import os, json
from typing import Any, Dict, Tuple
import numpy as np
import pandas as pd

def ensure_dir(path: str):
    if path:
        os.makedirs(path, exist_ok=True)

def append_jsonl(path: str, record: Dict[str, Any]):
    ensure_dir(os.path.dirname(path))
    with open(path, "a") as f:
        f.write(json.dumps(record) + "\n")

def save_json(path: str, obj: Dict[str, Any]):
    ensure_dir(os.path.dirname(path))
    with open(path, "w") as f:
        json.dump(obj, f, indent=2)

def load_scores(path: str, score_col: str = "propensity_score",
                treatment_col: str = "treatment") -> Tuple[np.ndarray, np.ndarray]:
    """Read (scores, treatment) from a .csv (columns) or .npz (arrays)."""
    ext = os.path.splitext(path)[1].lower()
    if ext == ".npz":
        with np.load(path) as d:
            missing = [k for k in (score_col, treatment_col) if k not in d.files]
            if missing:
                raise ValueError(f"{path} is missing arrays: {missing}")
            return np.asarray(d[score_col], dtype=np.float64), np.asarray(d[treatment_col])
    df = pd.read_csv(path)
    missing = [c for c in (score_col, treatment_col) if c not in df.columns]
    if missing:
        raise ValueError(f"{path} is missing columns: {missing}")
    return df[score_col].astype(float).to_numpy(), df[treatment_col].to_numpy()
