# -*- coding:utf-8 -*-
"""
    rangesearch.config
    ~~~~~~~~~~~~~~~~~~

    Implements the configuration related objects.

    :copyright: (c) 2015 by Jason Lai.
    :license: BSD, see LICENSE for more details.
"""

from configparser import ConfigParser

from .exceptions import RangesearchConfigNotFound


defaults = {
    'global': {
        'debug': '',
        'activity_log': '',
        'errors_log': '',
        'log_format': '%(asctime)s %(name)s[%(levelname)s] %(message)s',
    },
}


class Config(dict):

    def __init__(self, section):
        super().__init__()
        self._section = section
        self.update(defaults[section])

    def readFrom(self, f):
        config = ConfigParser(interpolation=None)

        rv = config.read(f)
        if not rv:
            raise RangesearchConfigNotFound('Failed to read the config file {}'.format(f))

        if config.has_section(self._section):
            self.update({k: v for k, v in config.items(self._section)})


DefaultConf = Config('global')
