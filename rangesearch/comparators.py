# -*- coding:utf-8 -*-
"""
    rangesearch.comparators
    ~~~~~~~~~~~~~~~~~~~~~~~

    Three-way comparators for the search functions.

    A comparator is called as ``comparator(value, element)`` and returns a
    negative number when ``value`` sorts before ``element``, zero when they
    are equal and a positive number when it sorts after.

    :copyright: (c) 2015 by Jason Lai.
    :license: BSD, see LICENSE for more details.
"""

from collections import namedtuple
from enum import IntEnum


class Ordering(IntEnum):
    LESS = -1
    EQUAL = 0
    GREATER = 1

    @classmethod
    def of(cls, rv):
        """Normalize any cmp-style result to an ``Ordering`` by its sign."""
        if rv < 0:
            return cls.LESS
        if rv > 0:
            return cls.GREATER
        return cls.EQUAL


KeyValuePair = namedtuple('KeyValuePair', ['key', 'value'])


def compare(x, y):
    if x < y:
        return Ordering.LESS
    if x > y:
        return Ordering.GREATER
    return Ordering.EQUAL


def compare_keys(key, pair):
    '''Compare ``key`` against the key of a ``KeyValuePair`` slot.'''
    if pair is None:
        raise ValueError('Empty slot found while comparing key {!r}'.format(key))
    return compare(key, pair.key)
