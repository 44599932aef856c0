# -*- coding:utf-8 -*-
"""
    rangesearch.exceptions
    ~~~~~~~~~~~~~~~~~~~~~~

    Exceptions raised by rangesearch.

    :copyright: (c) 2015 by Jason Lai.
    :license: BSD, see LICENSE for more details.
"""


class RangesearchError(Exception):
    pass


class InvalidRange(RangesearchError, ValueError):
    """The search range does not satisfy ``0 <= lower <= upper < length``.
    """

    def __init__(self, bounds, length):
        self.bounds = bounds
        self.length = length
        super().__init__('Invalid search range {} for a sequence of length {}'
                         .format(bounds, length))


class RangesearchConfigNotFound(RangesearchError):
    pass
