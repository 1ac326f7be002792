import argparse
import json
import random
from pathlib import Path

import numpy as np

from utils.attributes import BOROUGHS, HEALTH_METRICS, LANGUAGE_ATTRIBUTES


def _tract(i, props):
    # geometry is carried along but never read
    x, y = -74.0 + 0.01 * (i % 40), 40.6 + 0.01 * (i // 40)
    ring = [[x, y], [x + 0.01, y], [x + 0.01, y + 0.01], [x, y + 0.01], [x, y]]
    return {"type": "Feature", "properties": props, "geometry": {"type": "Polygon", "coordinates": [ring]}}


def make_toy(root="data", n_tracts=400, seed=123, missing_rate=0.03):
    random.seed(seed); np.random.seed(seed)
    d = Path(root); d.mkdir(parents=True, exist_ok=True)

    lang, health = [], []
    for i in range(n_tracts):
        boro = BOROUGHS[i % len(BOROUGHS)]
        geoid = f"36{i:09d}"
        total = int(np.random.gamma(4.0, 900.0))
        props = {"GEOID": geoid, "BoroName": boro, "Total_pop": str(total)}
        for a in LANGUAGE_ATTRIBUTES:
            if a == "Total_pop": continue
            share = np.random.beta(0.6, 12.0)
            props[a] = str(int(total * share))
        for a in list(props):
            if a in LANGUAGE_ATTRIBUTES and random.random() < missing_rate:
                props[a] = ""
        lang.append(_tract(i, props))

        hp = {"GEOID": geoid, "BoroName": boro}
        base = np.random.rand()
        for m in HEALTH_METRICS:
            v = np.clip(5.0 + 40.0 * base + 6.0 * np.random.randn(), 0.0, 100.0)
            hp[m] = "N/A" if random.random() < missing_rate else f"{v:.1f}"
        health.append(_tract(i, hp))

    for name, feats in [("language", lang), ("health", health)]:
        p = d / f"{name}.geojson"
        p.write_text(json.dumps({"type": "FeatureCollection", "features": feats}), encoding="utf-8")
        print(f"[OK] {p} features={len(feats)}")


if __name__ == "__main__":
    ap = argparse.ArgumentParser()
    ap.add_argument("--root", default="data")
    ap.add_argument("--n_tracts", type=int, default=400)
    ap.add_argument("--seed", type=int, default=123)
    args = ap.parse_args()
    make_toy(args.root, n_tracts=args.n_tracts, seed=args.seed)
