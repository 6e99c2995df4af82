from .core.auc import auc, auc_with_ci, delong_variance
from .core.bootstrap import bootstrap_auc_ci
from .core.roc import roc_curve_points
from .config import AucConfig, load_config
__all__ = ["auc","auc_with_ci","delong_variance","bootstrap_auc_ci","roc_curve_points","AucConfig","load_config"]
__version__ = "1.0.0"
