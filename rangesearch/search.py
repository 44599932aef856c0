# -*- coding:utf-8 -*-
"""
    rangesearch.search
    ~~~~~~~~~~~~~~~~~~

    Binary search over an inclusive index range of a sorted sequence.

    :copyright: (c) 2015 by Jason Lai.
    :license: BSD, see LICENSE for more details.
"""

import logging
import operator

from .comparators import Ordering, compare
from .exceptions import InvalidRange


actlog = logging.getLogger('activity')
errlog = logging.getLogger('errors')


class SearchResult(object):
    """Outcome of :func:`binary_search`, either a :class:`Match` or a
    :class:`NoMatch` carrying an index into the searched sequence.
    """

    __slots__ = ('index',)
    matched = None

    def __init__(self, index):
        self.index = index

    def __eq__(self, other):
        if not isinstance(other, SearchResult):
            return NotImplemented
        return self.matched == other.matched and self.index == other.index

    def __hash__(self):
        return hash((self.matched, self.index))

    def __bool__(self):
        return self.matched

    def __repr__(self):
        return '{}({})'.format(self.__class__.__name__, self.index)


class Match(SearchResult):
    __slots__ = ()
    matched = True


class NoMatch(SearchResult):
    """No element in range compares equal. ``index`` is the last probed
    position, next to where the value would be inserted but not
    necessarily that insertion point; use :func:`insertion_point` for it.
    """
    __slots__ = ()
    matched = False


def check_bounds(sequence, bounds):
    """Validate ``bounds`` against ``sequence`` and return ``(lower, upper)``.

    ``None`` stands for the whole sequence.
    """
    length = len(sequence)
    if bounds is None:
        bounds = (0, length - 1)

    try:
        lower, upper = bounds
        lower, upper = operator.index(lower), operator.index(upper)
    except (TypeError, ValueError):
        errlog.error('Malformed search range %r', bounds)
        raise InvalidRange(bounds, length) from None

    if not 0 <= lower <= upper < length:
        errlog.error('Search range %r out of the sequence (length %d)',
                     bounds, length)
        raise InvalidRange(bounds, length)

    return lower, upper


def binary_search(sequence, value, bounds, comparator=compare):
    """Search ``value`` in ``sequence[lower:upper + 1]``.

    :param sequence: indexable sequence sorted consistently with comparator.
    :param value: the key to locate.
    :param bounds: ``(lower, upper)`` inclusive indexes, or ``None`` for the
                   whole sequence.
    :param comparator: ``comparator(value, element)`` three-way function.
    :return: ``Match(i)`` or ``NoMatch(i)``.
    :raises InvalidRange: when not ``0 <= lower <= upper < len(sequence)``.
    """
    lower, upper = check_bounds(sequence, bounds)

    # u drops to lower - 1 (possibly -1) once everything in range is greater
    l, u = lower, upper
    i = lower
    probes = 0
    while l <= u:
        i = (l + u) // 2
        probes += 1
        order = Ordering.of(comparator(value, sequence[i]))
        if order is Ordering.EQUAL:
            actlog.debug('Search %r in [%d, %d]: Match(%d) after %d probes',
                         value, lower, upper, i, probes)
            return Match(i)
        elif order is Ordering.LESS:
            u = i - 1
        else:
            l = i + 1

    actlog.debug('Search %r in [%d, %d]: NoMatch(%d) after %d probes',
                 value, lower, upper, i, probes)
    return NoMatch(i)


def insertion_point(sequence, value, bounds, comparator=compare):
    """Leftmost index in ``[lower, upper + 1]`` where ``value`` can be
    inserted keeping the range sorted, like ``bisect_left`` on the range.
    """
    lower, upper = check_bounds(sequence, bounds)

    lo, hi = lower, upper + 1
    while lo < hi:
        mid = (lo + hi) // 2
        if Ordering.of(comparator(value, sequence[mid])) is Ordering.GREATER:
            lo = mid + 1
        else:
            hi = mid
    return lo
