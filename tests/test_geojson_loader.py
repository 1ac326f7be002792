from __future__ import annotations

import json
import math
from pathlib import Path

import pytest

from preprocess.geojson_loader import (
    extract_attribute_values,
    feature_properties,
    load_feature_collection,
    parse_float,
)


def _fc(rows):
    return {
        "type": "FeatureCollection",
        "features": [{"type": "Feature", "properties": r, "geometry": None} for r in rows],
    }


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("12.5", 12.5),
        ("  7", 7.0),
        ("12.5%", 12.5),
        ("-3e2x", -300.0),
        (".5", 0.5),
        ("1,234", 1.0),
        (8, 8.0),
        (2.25, 2.25),
        ("Infinity", math.inf),
        ("-Infinity", -math.inf),
    ],
)
def test_parse_float_numeric_prefix(raw, expected) -> None:
    assert parse_float(raw) == expected


@pytest.mark.parametrize("raw", [None, "", "N/A", "abc", True, False, "   ", "-"])
def test_parse_float_nan(raw) -> None:
    assert math.isnan(parse_float(raw))


def test_extract_drops_unparseable_and_keeps_order() -> None:
    fc = _fc([
        {"Arabic": "10", "Chinese": "N/A"},
        {"Arabic": "", "Chinese": 4},
        {"Arabic": "3.5", "Chinese": "Infinity"},
        {"Chinese": "2"},
    ])
    values = extract_attribute_values(fc, ["Arabic", "Chinese", "French"])
    assert list(values) == ["Arabic", "Chinese", "French"]
    assert values["Arabic"] == [10.0, 3.5]
    assert values["Chinese"] == [4.0, 2.0]
    assert values["French"] == []


def test_feature_without_properties_is_skipped() -> None:
    fc = {"type": "FeatureCollection", "features": [{"type": "Feature", "geometry": None}, {"properties": None}]}
    assert list(feature_properties(fc)) == [{}, {}]
    assert extract_attribute_values(fc, ["Arabic"]) == {"Arabic": []}


def test_load_feature_collection(tmp_path: Path) -> None:
    path = tmp_path / "health.geojson"
    path.write_text(json.dumps(_fc([{"Obesity crude prevalence (%)": "31.2"}])), encoding="utf-8")
    fc = load_feature_collection(path)
    assert extract_attribute_values(fc, ["Obesity crude prevalence (%)"]) == {"Obesity crude prevalence (%)": [31.2]}


def test_load_feature_collection_errors(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_feature_collection(tmp_path / "missing.geojson")
    bad = tmp_path / "bad.geojson"
    bad.write_text(json.dumps({"type": "Feature"}), encoding="utf-8")
    with pytest.raises(ValueError):
        load_feature_collection(bad)
