# -*- coding:utf-8 -*-
"""
    rangesearch.log
    ~~~~~~~~~~~~~~~

    Wires the ``activity`` and ``errors`` loggers from the configuration.

    :copyright: (c) 2015 by Jason Lai.
    :license: BSD, see LICENSE for more details.
"""

import logging

from .config import DefaultConf


_installed = {}


def _make_handler(path, fmt):
    handler = logging.FileHandler(path) if path else logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt))
    return handler


def init_log(conf=DefaultConf):
    """Attach a handler to the ``activity`` and ``errors`` loggers.

    An empty ``activity_log`` / ``errors_log`` path logs to stderr. Calling
    it again replaces the handlers installed by the previous call.
    """
    setup = [
        ('activity', conf['activity_log'],
         logging.DEBUG if conf['debug'] else logging.INFO),
        ('errors', conf['errors_log'], logging.WARNING),
    ]
    for name, path, level in setup:
        logger = logging.getLogger(name)
        old = _installed.pop(name, None)
        if old is not None:
            logger.removeHandler(old)
            old.close()

        handler = _make_handler(path, conf['log_format'])
        logger.addHandler(handler)
        logger.setLevel(level)
        _installed[name] = handler

    return logging.getLogger('activity'), logging.getLogger('errors')


def close_log():
    """Detach and close the handlers installed by :func:`init_log`."""
    for name, handler in list(_installed.items()):
        logging.getLogger(name).removeHandler(handler)
        handler.close()
        del _installed[name]
