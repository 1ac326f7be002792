import json
import math
import re
from pathlib import Path
from typing import Dict, Iterator, List

_NUM = re.compile(r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_float(value) -> float:
    """JavaScript parseFloat: longest numeric prefix, NaN when there is none."""
    if isinstance(value, bool) or value is None:
        return math.nan
    if isinstance(value, (int, float)):
        return float(value)
    m = _NUM.match(str(value).lstrip())
    if m is None:
        return math.nan
    return float(m.group(0).replace("Infinity", "inf"))


def load_feature_collection(path) -> Dict:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(str(p))
    with open(p, "r", encoding="utf-8") as f:
        gj = json.load(f)
    if not isinstance(gj, dict) or not isinstance(gj.get("features"), list):
        raise ValueError(f"{p} is not a FeatureCollection (no features list)")
    return gj


def feature_properties(collection) -> Iterator[Dict]:
    for ft in collection.get("features", []):
        yield ft.get("properties") or {}


def extract_attribute_values(collection, attributes) -> Dict[str, List[float]]:
    values = {attr: [] for attr in attributes}
    for props in feature_properties(collection):
        for attr in attributes:
            v = parse_float(props.get(attr))
            # NaN and +/-inf never reach the classifier
            if math.isfinite(v):
                values[attr].append(v)
    return values
