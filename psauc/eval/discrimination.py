import logging
import torch
import numpy as np

from ..config import AucConfig
from ..core.auc import auc_with_ci, check_inputs
from ..core.bootstrap import bootstrap_auc_ci

logger = logging.getLogger(__name__)


def evaluate_discrimination(scores, treatment, cfg: AucConfig = None):
    cfg = cfg or AucConfig()
    s, t = check_inputs(scores, treatment)
    if cfg.method == "bootstrap":
        area, lo, hi = bootstrap_auc_ci(s, t, n_boot=cfg.n_bootstrap,
                                        confidence=cfg.confidence, seed=cfg.seed)
    else:
        area, lo, hi = auc_with_ci(s, t, confidence=cfg.confidence)
    n_treated = int(t.sum())
    logger.debug(f"{cfg.method} AUC={area:.4f} [{lo:.4f}, {hi:.4f}] "
                 f"treated={n_treated} comparator={len(t) - n_treated}")
    return {"AUC": area, "AUC_lower": lo, "AUC_upper": hi,
            "method": cfg.method, "confidence": cfg.confidence,
            "n_treated": n_treated, "n_comparator": int(len(t) - n_treated)}


def _positive_prob(logits):
    # [B] or [B,1] -> sigmoid; [B,2] -> softmax column 1
    # float64: float32 sigmoid saturates to 1.0 above ~17 and ties confident scores
    logits = logits.double()
    if logits.dim() == 1:
        return torch.sigmoid(logits)
    if logits.shape[-1] == 1:
        return torch.sigmoid(logits.squeeze(-1))
    if logits.shape[-1] == 2:
        return torch.softmax(logits, dim=-1)[:, 1]
    raise ValueError(f"expected a binary classifier output, got shape {tuple(logits.shape)}")


def auc_from_model(model, loader, device="cpu", cfg: AucConfig = None):
    model.eval(); model.to(device)
    y_true, y_score = [], []
    with torch.no_grad():
        for x, y in loader:
            x = x.to(device)
            p = _positive_prob(model(x))
            y_score.append(p.cpu().numpy())
            y_true.append(y.cpu().numpy().reshape(-1))
    if not y_score:
        raise ValueError("loader yielded no batches")
    return evaluate_discrimination(np.concatenate(y_score), np.concatenate(y_true), cfg)
