import math
from concurrent.futures import ProcessPoolExecutor, ThreadPoolExecutor
from typing import Dict, List, Optional

from preprocess.geojson_loader import feature_properties, parse_float
from selection.jenks import classify


def _empty(attributes):
    return {attr: [] for attr in attributes}


def group_by_property(collection, attributes, key) -> Dict[str, Dict[str, List[float]]]:
    groups = {}
    for props in feature_properties(collection):
        name = props.get(key)
        if name is None or name == "":
            continue
        bucket = groups.setdefault(str(name), _empty(attributes))
        for attr in attributes:
            v = parse_float(props.get(attr))
            if math.isfinite(v):
                bucket[attr].append(v)
    return groups


def group_by_membership(collection, attributes, id_property, members) -> Dict[str, Dict[str, List[float]]]:
    """Partition by membership of `id_property` in fixed id sets.

    `members` maps group name -> iterable of area ids. Ids compare as strings
    and a feature listed under several groups is counted in each of them.
    """
    id_sets = {name: {str(i) for i in ids} for name, ids in members.items()}
    groups = {name: _empty(attributes) for name in id_sets}
    for props in feature_properties(collection):
        fid = props.get(id_property)
        if fid is None:
            continue
        fid = str(fid)
        hit = [name for name, ids in id_sets.items() if fid in ids]
        if not hit:
            continue
        parsed = {attr: parse_float(props.get(attr)) for attr in attributes}
        for name in hit:
            for attr, v in parsed.items():
                if math.isfinite(v):
                    groups[name][attr].append(v)
    return groups


class BreaksCache:
    """Memo of breaks keyed by (attribute, group, n_classes)."""

    def __init__(self):
        self._store = {}
        self.hits = 0
        self.misses = 0

    @staticmethod
    def _key(attribute, group, n_classes):
        return attribute, group, int(n_classes)

    def get(self, attribute, group, n_classes):
        """Return (breaks, found). A cached None is a hit too."""
        key = self._key(attribute, group, n_classes)
        if key not in self._store:
            self.misses += 1
            return None, False
        self.hits += 1
        breaks = self._store[key]
        return (list(breaks) if breaks is not None else None), True

    def put(self, attribute, group, n_classes, breaks):
        self._store[self._key(attribute, group, n_classes)] = list(breaks) if breaks is not None else None

    def __contains__(self, key):
        return self._key(*key) in self._store

    def __len__(self):
        return len(self._store)


def _classify_many(tasks, n_classes, workers, use_processes):
    # tasks: list of (key, values); one independent classify call per task
    if workers > 1 and len(tasks) > 1:
        pool = ProcessPoolExecutor if use_processes else ThreadPoolExecutor
        with pool(max_workers=workers) as executor:
            futures = [(key, executor.submit(classify, list(values), n_classes)) for key, values in tasks]
            return {key: fut.result() for key, fut in futures}
    return {key: classify(values, n_classes) for key, values in tasks}


def classify_groups(grouped, n_classes, cache: Optional[BreaksCache] = None,
                    workers=1, use_processes=True) -> Dict[str, Dict[str, Optional[List[float]]]]:
    """Breaks per group and attribute; `grouped` is {group: {attribute: values}}."""
    out = {name: {attr: None for attr in values_by_attr} for name, values_by_attr in grouped.items()}
    tasks = []
    for name, values_by_attr in grouped.items():
        for attr, values in values_by_attr.items():
            if cache is not None:
                breaks, found = cache.get(attr, name, n_classes)
                if found:
                    out[name][attr] = breaks
                    continue
            tasks.append(((name, attr), values))

    results = _classify_many(tasks, n_classes, workers, use_processes)
    for (name, attr), breaks in results.items():
        out[name][attr] = breaks
        if cache is not None:
            cache.put(attr, name, n_classes, breaks)
    return out


def classify_attributes(values_by_attr, n_classes, group=None, cache: Optional[BreaksCache] = None,
                        workers=1, use_processes=True) -> Dict[str, Optional[List[float]]]:
    return classify_groups({group: values_by_attr}, n_classes, cache=cache,
                           workers=workers, use_processes=use_processes)[group]
