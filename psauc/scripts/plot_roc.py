#!/usr/bin/env python3
"""
Plot ROC curves from JSON files written by compute_auc --roc_out (Matplotlib).

Usage:
  python -m psauc.scripts.plot_roc --inputs outputs/roc*.json --out figures/roc.png
"""
import argparse, json, glob
from pathlib import Path

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

def main(argv=None):
    ap = argparse.ArgumentParser()
    ap.add_argument("--inputs", nargs="+", required=True)
    ap.add_argument("--out", required=True)
    args = ap.parse_args(argv)

    curves = []
    for pat in args.inputs:
        for f in sorted(glob.glob(pat)):
            with open(f, "r") as fh:
                d = json.load(fh)
            if "fpr" in d and "tpr" in d:
                label = d.get("label", Path(f).stem)
                if "AUC" in d:
                    label = f"{label} (AUC={d['AUC']:.3f})"
                curves.append((np.array(d["fpr"]), np.array(d["tpr"]), label))

    if not curves:
        print("No ROC curves found in inputs; expecting JSON with keys 'fpr' and 'tpr'.")
        return 0

    plt.figure(figsize=(4,4))
    for fpr, tpr, label in curves:
        plt.plot(fpr, tpr, lw=1.5, label=label)
    plt.plot([0, 1], [0, 1], ls=":", color="gray", lw=1)
    plt.xlabel("False positive rate")
    plt.ylabel("True positive rate")
    plt.legend(loc="lower right", fontsize=7)
    plt.grid(True, ls="--", alpha=0.4)
    Path(args.out).parent.mkdir(parents=True, exist_ok=True)
    plt.tight_layout()
    plt.savefig(args.out, dpi=200)
    plt.close()
    print(f"Saved {args.out}")
    return len(curves)

if __name__ == "__main__":
    main()
