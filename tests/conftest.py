# -*- coding:utf-8 -*-
"""
    tests.conftest
    ~~~~~~~~~~~~~~

    :copyright: (c) 2015 by Jason Lai.
    :license: BSD, see LICENSE for more details.
"""

import random
import logging

import pytest
from faker import Faker

import rangesearch.log
from rangesearch.comparators import KeyValuePair
from rangesearch.config import DefaultConf


logging.basicConfig(level=logging.DEBUG)


@pytest.fixture(autouse=True)
def patch_config():
    origin = dict(DefaultConf)
    yield
    DefaultConf.clear()
    DefaultConf.update(origin)

@pytest.fixture
def logs(request):
    request.addfinalizer(rangesearch.log.close_log)
    return rangesearch.log

@pytest.fixture
def fake():
    f = Faker()
    f.seed_instance(4273)
    return f

@pytest.fixture
def vector():
    return [1, 4, 10, 50, 70]

@pytest.fixture
def long_vector():
    return [1, 4, 6, 7, 8, 10, 11, 14, 34, 45, 50, 70]

@pytest.fixture
def pairs():
    return [
        KeyValuePair(3, 'bin'),
        KeyValuePair(8, 'usr'),
        KeyValuePair(15, 'var'),
        KeyValuePair(21, 'etc'),
        KeyValuePair(42, 'sys'),
    ]

@pytest.fixture
def metadata_t():
    return [
        [143372, 'hello', 123],
        [143372, 'hello', 1234],
        [168011, 'hello', 123],
        [168072, 'hello', 123],
        [188072, 'hello', 123],
        [228072, 'hello', 123]
    ]

@pytest.fixture
def random_vectors(fake):
    rv = []
    for _ in range(50):
        size = fake.pyint(min_value=1, max_value=64)
        rv.append(sorted(fake.pyint(min_value=0, max_value=500)
                         for _ in range(size)))
    return rv

@pytest.fixture
def rnd():
    return random.Random(4273)
