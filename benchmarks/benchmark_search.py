"""Subsequence search micro benchmarks."""

from time import perf_counter

import numpy as np

from seqfind.search import find_all_instances_of, find_all_instances_of_non_overlapping

TOKEN = [1, 0, 1, 1]
HAYSTACK = np.random.default_rng(0).integers(0, 2, size=20_000)
HAYSTACK_LIST = HAYSTACK.tolist()


def time_search(fn, xs, **kwargs) -> float:
    start = perf_counter()
    for _ in range(10):
        fn(TOKEN, xs, **kwargs)
    return perf_counter() - start


if __name__ == "__main__":
    runs = {
        "overlapping/list": (find_all_instances_of, HAYSTACK_LIST, {}),
        "overlapping/ndarray": (find_all_instances_of, HAYSTACK, {}),
        "overlapping/ndarray-generic": (find_all_instances_of, HAYSTACK, {"use_numpy": False}),
        "non-overlapping/list": (find_all_instances_of_non_overlapping, HAYSTACK_LIST, {}),
    }
    for name, (fn, xs, kwargs) in runs.items():
        print(f"{name}: {time_search(fn, xs, **kwargs):.6f}s")
