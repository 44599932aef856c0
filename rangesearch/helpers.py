# -*- coding:utf-8 -*-
"""
    rangesearch.helpers
    ~~~~~~~~~~~~~~~~~~~

    Lookup helpers on top of the ranged insertion point.

    :copyright: (c) 2015 by Jason Lai.
    :license: BSD, see LICENSE for more details.
"""

from .comparators import Ordering, compare
from .search import check_bounds, insertion_point


def find_eq(a, x, bounds=None, comparator=compare, ret_index=False):
    '''Find the leftmost item exactly equal to x'''
    lower, upper = check_bounds(a, bounds)
    i = insertion_point(a, x, (lower, upper), comparator)
    if i <= upper and Ordering.of(comparator(x, a[i])) is Ordering.EQUAL:
        return i if ret_index else a[i]
    raise ValueError('Not found the value that == {}\n'.format(x))


def find_ge(a, x, bounds=None, comparator=compare, ret_index=False):
    '''Find leftmost item greater than or equal to x'''
    lower, upper = check_bounds(a, bounds)
    i = insertion_point(a, x, (lower, upper), comparator)
    if i <= upper:
        return i if ret_index else a[i]
    raise ValueError('Not found the value that >= {}\n'
                     '(The maximun item is {})'.format(x, a[upper]))


def find_lt(a, x, bounds=None, comparator=compare, ret_index=False):
    '''Find rightmost value less than x'''
    lower, upper = check_bounds(a, bounds)
    i = insertion_point(a, x, (lower, upper), comparator)
    if i > lower:
        return i-1 if ret_index else a[i-1]
    raise ValueError('Not found the value that < {} \n'
                     '(The minimun item is {})'.format(x, a[lower]))
