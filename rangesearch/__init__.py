# -*- coding:utf-8 -*-
"""
    rangesearch
    ~~~~~~~~~~~

    Comparator driven binary search over an index range.

    :copyright: (c) 2015 by Jason Lai.
    :license: BSD, see LICENSE for more details.
"""

from .comparators import Ordering, KeyValuePair, compare, compare_keys
from .exceptions import InvalidRange, RangesearchError
from .search import (SearchResult, Match, NoMatch, binary_search,
                     insertion_point)
from .helpers import find_eq, find_ge, find_lt


__version__ = '0.1.0'
