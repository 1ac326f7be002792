from __future__ import annotations

import numpy as np
import pytest

from evaluation.fit_metrics import assign_classes, class_counts, goodness_of_variance_fit
from selection.jenks import classify


def test_gvf_is_near_one_for_separated_clusters() -> None:
    data = [1.0, 1.1, 0.9, 50.0, 50.2, 49.8, 100.0, 100.1, 99.9]
    assert goodness_of_variance_fit(data, 3) == pytest.approx(1.0, abs=1e-4)


def test_gvf_single_class_is_zero() -> None:
    assert goodness_of_variance_fit([1.0, 4.0, 9.0], 1) == pytest.approx(0.0)


def test_gvf_grows_with_class_count() -> None:
    rng = np.random.default_rng(4)
    data = np.concatenate([rng.normal(c, 1.0, 30) for c in (0, 10, 25, 45)])
    gvfs = [goodness_of_variance_fit(data, k) for k in range(1, 7)]
    assert all(0.0 <= g <= 1.0 for g in gvfs)
    assert all(a <= b + 1e-12 for a, b in zip(gvfs[:-1], gvfs[1:]))


def test_gvf_edge_cases() -> None:
    assert goodness_of_variance_fit([2.0, 2.0, 2.0], 2) == 1.0
    assert goodness_of_variance_fit([1.0], 2) is None
    assert goodness_of_variance_fit([], 1) is None


@pytest.mark.parametrize("data", [[0.1] * 5, [0.3] * 11, [0.1] * 11, [1.1] * 11])
def test_gvf_constant_data_with_rounding(data) -> None:
    for k in (1, 2, 3):
        assert goodness_of_variance_fit(data, k) == 1.0


def test_gvf_stays_in_unit_interval_on_near_constant_data() -> None:
    data = [0.1] * 10 + [0.1 + 1e-9, 0.3, 0.3 + 1e-12]
    for k in range(1, 6):
        g = goodness_of_variance_fit(data, k)
        assert 0.0 <= g <= 1.0


def test_shared_boundary_goes_to_lower_class() -> None:
    breaks = [4, 5, 10]
    assert assign_classes([4, 5, 5.5, 9, 10], breaks).tolist() == [0, 0, 1, 1, 1]


def test_out_of_range_values_clamp() -> None:
    breaks = [0.0, 1.0, 2.0, 3.0]
    assert assign_classes([-5.0, 99.0], breaks).tolist() == [0, 2]
    assert assign_classes([0.5, 7.0], [0.0, 10.0]).tolist() == [0, 0]


def test_class_counts_cover_all_values() -> None:
    data = [1, 2, 3, 10, 11, 12, 30, 31]
    breaks = classify(data, 3)
    assert class_counts(data, breaks) == [3, 3, 2]
