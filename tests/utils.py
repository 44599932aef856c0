# -*- coding:utf-8 -*-

from rangesearch.comparators import compare


class TracingSequence:
    """Read-only sequence that records every index it is asked for."""

    def __init__(self, items):
        self.items = list(items)
        self.accessed = []

    def __len__(self):
        return len(self.items)

    def __getitem__(self, index):
        self.accessed.append(index)
        return self.items[index]


class CountingComparator:

    def __init__(self, comparator=compare):
        self.comparator = comparator
        self.calls = 0

    def __call__(self, value, element):
        self.calls += 1
        return self.comparator(value, element)


def cmp_desc(x, y):
    """cmp-style comparator for sequences sorted in descending order."""
    return y - x
