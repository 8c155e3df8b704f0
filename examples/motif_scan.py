#!/usr/bin/env python3
"""
Example: locating motifs in a DNA sequence with seqfind.

This example shows:
1. Finding the first/last position of a nucleotide
2. Listing every occurrence of a motif, overlapping or not
3. Binding search options once with a Searcher
"""

from seqfind import SearchConfig, Searcher, find_all_idxs_by, find_first_idx, find_last_idx
from seqfind.search import find_all_instances_of, find_all_instances_of_non_overlapping

SEQUENCE = "TATAAATATATAGCGCTATAAAGC"
MOTIF = "TATA"


def main() -> None:
    print(f"Sequence: {SEQUENCE}")  # noqa: T201

    first_g = find_first_idx("G", SEQUENCE)
    last_g = find_last_idx("G", SEQUENCE)
    print(f"First G: {first_g}, last G: {last_g}")  # noqa: T201

    gc_positions = find_all_idxs_by(lambda base: base in "GC", SEQUENCE)
    print(f"GC positions: {gc_positions}")  # noqa: T201

    print(f"{MOTIF} (overlapping):     {find_all_instances_of(MOTIF, SEQUENCE)}")  # noqa: T201
    print(f"{MOTIF} (non-overlapping): {find_all_instances_of_non_overlapping(MOTIF, SEQUENCE)}")  # noqa: T201

    searcher = Searcher(SearchConfig(empty_token="empty", output=tuple))
    print(f"Empty motif with 'empty' policy: {searcher.find_all_instances_of('', SEQUENCE)}")  # noqa: T201


if __name__ == "__main__":
    main()
