from collections import UserList, deque

import pytest


@pytest.fixture(params=[list, deque, UserList])
def seq_type(request):
    return request.param


@pytest.fixture
def pairs(seq_type):
    return seq_type([("a", 1), ("b", 2)])
