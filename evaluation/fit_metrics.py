import numpy as np
from selection.jenks import jenks_matrices


def goodness_of_variance_fit(data, n_classes):
    """GVF = (SDAM - SDCM) / SDAM for the optimal n_classes split.

    SDCM comes out of the cost matrix (last row, column n_classes). SDAM is
    taken around the mean directly, the running-sum form in column 1 does not
    cancel to 0 on constant data. Result is clipped to [0, 1].
    """
    if n_classes > len(data) or len(data) == 0:
        return None
    x = np.sort(np.asarray(data, dtype=np.float64))
    _, variance_combinations = jenks_matrices(x, n_classes)
    sdam = float(((x - x.mean()) ** 2).sum())
    sdcm = max(float(variance_combinations[-1, n_classes]), 0.0)
    # all values equal up to rounding
    if sdam <= 1e-12 * max(1.0, float(np.dot(x, x))):
        return 1.0
    return float(np.clip((sdam - sdcm) / sdam, 0.0, 1.0))


def assign_classes(values, breaks):
    # a value sitting on a shared boundary goes to the lower class
    values = np.asarray(values, dtype=np.float64).reshape(-1)
    inner = np.asarray(breaks[1:-1], dtype=np.float64)
    return np.searchsorted(inner, values, side="left").astype(np.int64)


def class_counts(values, breaks):
    n_classes = len(breaks) - 1
    idx = assign_classes(values, breaks)
    return np.bincount(idx, minlength=n_classes).astype(int).tolist()
