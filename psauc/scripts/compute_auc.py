#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
AUC with confidence interval for a file of scores and treatment labels.

Usage:
  python -m psauc.scripts.compute_auc --scores outputs/ps.csv \
    --method bootstrap --n_boot 2000 --seed 1337 \
    --out outputs/auc.jsonl --roc_out outputs/roc.json
"""
import argparse
import logging
from dataclasses import replace

from psauc.config import AucConfig, load_config
from psauc.core.roc import roc_curve_points
from psauc.eval.discrimination import evaluate_discrimination
from psauc.utils.io import append_jsonl, load_scores, save_json
from psauc.utils.logging import get_logger


def build_parser():
    ap = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    ap.add_argument("--scores", required=True, help=".csv with score/treatment columns or .npz with arrays")
    ap.add_argument("--cfg", default=None, help="YAML config; flags below override it")
    ap.add_argument("--score_col", default=None)
    ap.add_argument("--treatment_col", default=None)
    ap.add_argument("--method", choices=["delong", "bootstrap"], default=None)
    ap.add_argument("--confidence", type=float, default=None)
    ap.add_argument("--n_boot", type=int, default=None)
    ap.add_argument("--seed", type=int, default=None)
    ap.add_argument("--out", default=None, help="append metrics as a JSON line")
    ap.add_argument("--roc_out", default=None, help="write ROC points as JSON")
    ap.add_argument("--verbose", action="store_true", help="debug logging, library modules included")
    return ap


def main(argv=None):
    args = build_parser().parse_args(argv)
    logger = get_logger("compute_auc", logging.DEBUG if args.verbose else logging.INFO)

    cfg = load_config(args.cfg) if args.cfg else AucConfig()
    overrides = {k: v for k, v in dict(method=args.method, confidence=args.confidence,
                                       n_bootstrap=args.n_boot, seed=args.seed,
                                       score_col=args.score_col,
                                       treatment_col=args.treatment_col).items()
                 if v is not None}
    cfg = replace(cfg, **overrides)

    scores, treatment = load_scores(args.scores, cfg.score_col, cfg.treatment_col)
    logger.info(f"Loaded {len(scores)} subjects from {args.scores}")
    res = evaluate_discrimination(scores, treatment, cfg)
    res["source"] = args.scores

    pct = f"{cfg.confidence * 100:g}"
    print(f"AUC={res['AUC']:.4f}  {pct}% CI [{res['AUC_lower']:.4f}, {res['AUC_upper']:.4f}]  "
          f"({cfg.method}, treated={res['n_treated']}, comparator={res['n_comparator']})")

    if args.out:
        append_jsonl(args.out, res)
        logger.info(f"Appended metrics to {args.out}")
    if args.roc_out:
        fpr, tpr, thr = roc_curve_points(scores, treatment)
        # +inf is not valid JSON
        thr = [None if th == float("inf") else float(th) for th in thr]
        save_json(args.roc_out, {"fpr": fpr.tolist(), "tpr": tpr.tolist(),
                                 "thresholds": thr, "AUC": res["AUC"], "label": args.scores})
        logger.info(f"Saved ROC points to {args.roc_out}")
    return res


if __name__ == "__main__":
    main()
