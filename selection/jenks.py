"""
Jenks natural breaks: optimal 1-D classification by dynamic programming.

Both matrices are indexed [prefix length][class count] with row/column 0 as
padding. Matrices built for K classes answer any k <= K.
"""
import numpy as np


def jenks_matrices(data, n_classes):
    """Return (lower_class_limits, variance_combinations) for sorted `data`.

    lower_class_limits[l, j] is the 1-based start of the last class when the
    first l values are split into j classes; variance_combinations[l, j] is
    the summed squared deviation of that split.
    """
    x = np.asarray(data, dtype=np.float64)
    N = x.shape[0]
    lower_class_limits = np.zeros((N + 1, n_classes + 1), dtype=np.int64)
    variance_combinations = np.zeros((N + 1, n_classes + 1), dtype=np.float64)
    if N == 0 or n_classes < 1:
        return lower_class_limits, variance_combinations
    lower_class_limits[1, 1:] = 1
    variance_combinations[2:, 1:] = np.inf

    for l in range(2, N + 1):
        # scan the start of the last class from l down to 1; cumsum adds in
        # scan order so the running sums match a sequential accumulator
        rev = x[l - 1::-1]
        s1 = np.cumsum(rev)
        s2 = np.cumsum(rev * rev)
        w = np.arange(1, l + 1, dtype=np.float64)
        variance = s2 - (s1 * s1) / w
        lower = np.arange(l, 0, -1)

        if n_classes > 1:
            # start == 1 (prefix before the class is empty) only feeds j == 1
            i4 = lower[:-1] - 1
            cand = variance[:-1, None] + variance_combinations[i4, 1:n_classes]
            # stored >= candidate replaces, so exact ties keep the last one
            # scanned: the smallest start, i.e. the largest final class
            last = cand.shape[0] - 1 - np.argmin(cand[::-1], axis=0)
            cols = np.arange(cand.shape[1])
            lower_class_limits[l, 2:] = lower[last]
            variance_combinations[l, 2:] = cand[last, cols]

        lower_class_limits[l, 1] = 1
        variance_combinations[l, 1] = variance[-1]

    return lower_class_limits, variance_combinations


def extract_breaks(data, lower_class_limits, n_classes):
    """Backtrack `n_classes + 1` boundaries out of the limits matrix."""
    k = len(data)
    kclass = [0.0] * (n_classes + 1)
    kclass[n_classes] = float(data[-1])
    kclass[0] = float(data[0])
    count = n_classes
    while count > 1:
        start = int(lower_class_limits[k, count])
        kclass[count - 1] = float(data[start - 2])
        k = start - 1
        count -= 1
    return kclass


def classify(data, n_classes):
    """Jenks breaks for `data`, min and max included, or None if
    there are fewer values than classes."""
    if n_classes > len(data) or len(data) == 0:
        return None
    x = np.sort(np.asarray(data, dtype=np.float64))
    lower_class_limits, _ = jenks_matrices(x, n_classes)
    return extract_breaks(x, lower_class_limits, n_classes)


def classify_upto(data, max_classes):
    """Breaks for every k in 1..max_classes from a single matrix pass."""
    if max_classes > len(data) or len(data) == 0:
        return {}
    x = np.sort(np.asarray(data, dtype=np.float64))
    lower_class_limits, _ = jenks_matrices(x, max_classes)
    return {k: extract_breaks(x, lower_class_limits, k) for k in range(1, max_classes + 1)}
