# scripts/run_breaks.py
import argparse
import os
import sys

import yaml
from tqdm import tqdm

from evaluation.grouping import BreaksCache, classify_attributes, classify_groups, group_by_membership, group_by_property
from evaluation.report import render_html, render_text, save_results
from preprocess.geojson_loader import extract_attribute_values, load_feature_collection
from utils.attributes import BREAKS_AMOUNT, HEALTH_METRICS, LANGUAGE_ATTRIBUTES

CFG_PATH = "experiments/config.yaml"

DEFAULT_ATTRIBUTES = {
    "language": LANGUAGE_ATTRIBUTES,
    "health": HEALTH_METRICS,
}


def load_config(p=CFG_PATH):
    with open(p, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def _fill_defaults(cfg: dict):
    cfg.setdefault("seed", 2025)
    cfg.setdefault("breaks_amount", BREAKS_AMOUNT)
    cfg.setdefault("workers", 1)
    cfg.setdefault("use_processes", True)
    cfg.setdefault("output_dir", "./experiments/outputs")
    cfg.setdefault("formats", ["text", "html", "json"])

    ds = cfg.get("datasets") or {}
    cfg["datasets"] = ds
    if not ds:
        ds["language"] = {"path": "data/language.geojson"}
        ds["health"] = {"path": "data/health.geojson"}
    for name in list(ds):
        d = ds[name] = ds[name] or {}
        if not d.get("path"):
            raise ValueError(f"dataset {name!r} needs a path")
        if not d.get("attributes"):
            if name not in DEFAULT_ATTRIBUTES:
                raise ValueError(f"dataset {name!r} needs an attributes list")
            d["attributes"] = list(DEFAULT_ATTRIBUTES[name])

    g = cfg.setdefault("grouping", {}) or {}
    cfg["grouping"] = g
    g.setdefault("property", None)
    g.setdefault("id_property", None)
    g["members"] = g.get("members") or {}

    if int(cfg["breaks_amount"]) < 1:
        raise ValueError(f"breaks_amount must be >= 1, got {cfg['breaks_amount']}")
    return cfg


def _report_missing(section, breaks_by_attr, k):
    for attr, breaks in breaks_by_attr.items():
        if breaks is None:
            print(f"[WARN] {section}: '{attr}' has fewer than {k} values, no breaks", flush=True)


def run(cfg, cache=None):
    """Classify every configured dataset; returns {section: {attr: breaks}} or None.

    Pass the same `cache` to repeated runs (e.g. a sweep over breaks_amount
    or a re-render) to skip datasets/groups already classified.
    """
    _fill_defaults(cfg)
    k = int(cfg["breaks_amount"])
    workers = int(cfg["workers"])
    use_processes = bool(cfg["use_processes"])
    grouping = cfg["grouping"]
    cache = cache if cache is not None else BreaksCache()
    hits, misses = cache.hits, cache.misses

    sections = {}
    for name, d in tqdm(cfg["datasets"].items(), desc="datasets"):
        try:
            fc = load_feature_collection(d["path"])
        except (FileNotFoundError, ValueError) as e:
            print(f"[WARN] skip dataset {name}: {e}", flush=True)
            continue
        attrs = d["attributes"]
        values = extract_attribute_values(fc, attrs)
        print(f"[INFO] {name}: {len(fc['features'])} features, {len(attrs)} attributes", flush=True)

        breaks = classify_attributes(values, k, group=name, cache=cache,
                                     workers=workers, use_processes=use_processes)
        _report_missing(name, breaks, k)
        sections[name] = breaks

        grouped = {}
        if grouping["property"]:
            for g, v in sorted(group_by_property(fc, attrs, grouping["property"]).items()):
                grouped[f"{name} / {g}"] = v
        if grouping["members"] and grouping["id_property"]:
            # membership sets are named after the id property so they never
            # replace a property group of the same name
            by_ids = group_by_membership(fc, attrs, grouping["id_property"], grouping["members"])
            for g, v in sorted(by_ids.items()):
                grouped[f"{name} / {grouping['id_property']}:{g}"] = v
        if grouped:
            by_group = classify_groups(grouped, k, cache=cache, workers=workers, use_processes=use_processes)
            for section, b in by_group.items():
                _report_missing(section, b, k)
                sections[section] = b

    if not sections:
        print("[ERR] no dataset could be loaded", flush=True)
        return None

    out_dir = cfg["output_dir"]
    os.makedirs(out_dir, exist_ok=True)
    formats = set(cfg["formats"])
    if "text" in formats:
        p = os.path.join(out_dir, "breaks.txt")
        with open(p, "w", encoding="utf-8") as f:
            f.write(render_text(sections))
        print(f"[SAVED] {p}", flush=True)
    if "html" in formats:
        p = os.path.join(out_dir, "breaks.html")
        with open(p, "w", encoding="utf-8") as f:
            f.write(render_html(sections))
        print(f"[SAVED] {p}", flush=True)
    if "json" in formats:
        p = save_results(os.path.join(out_dir, "breaks.json"), sections,
                         meta={"breaks_amount": k, "cache": {"hits": cache.hits - hits, "misses": cache.misses - misses}})
        print(f"[SAVED] {p}", flush=True)
    return sections


def main(argv=None):
    ap = argparse.ArgumentParser(description="Jenks natural breaks for GeoJSON attributes")
    ap.add_argument("--config", default=os.getenv("CONFIG", CFG_PATH))
    ap.add_argument("--breaks", type=int, default=os.getenv("BREAKS_AMOUNT"))
    ap.add_argument("--workers", type=int, default=os.getenv("WORKERS"))
    ap.add_argument("--output_dir", default=os.getenv("OUTPUT_DIR"))
    args = ap.parse_args(argv)

    cfg = load_config(args.config) if os.path.exists(args.config) else {}
    if args.breaks is not None:
        cfg["breaks_amount"] = int(args.breaks)
    if args.workers is not None:
        cfg["workers"] = int(args.workers)
    if args.output_dir:
        cfg["output_dir"] = args.output_dir
    return 0 if run(cfg) is not None else 1


if __name__ == "__main__":
    sys.exit(main())
