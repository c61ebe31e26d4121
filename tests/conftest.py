# -*- coding: utf-8 -*-
import pytest

from gridsearch.envs import Grid

from tests.boards import CORRIDOR, PAIR, WALLED_FINISH


@pytest.fixture
def corridor():
    return Grid.from_text(CORRIDOR)


@pytest.fixture
def walled_finish():
    return Grid.from_text(WALLED_FINISH)


@pytest.fixture
def pair():
    return Grid.from_text(PAIR)
