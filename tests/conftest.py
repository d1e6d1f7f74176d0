import random

import pytest

from quizgame.core.database import Database
from quizgame.core.game_manager import GameManager
from quizgame.core.services.account_store import AccountStore
from quizgame.core.services.score_store import ScoreStore


@pytest.fixture
def database():
    db = Database.in_memory()
    yield db
    db.close()


@pytest.fixture
def accounts(database):
    return AccountStore(database)


@pytest.fixture
def scores(database):
    return ScoreStore(database)


@pytest.fixture
def rng():
    return random.Random(20240611)


@pytest.fixture
def game_manager(database, rng):
    return GameManager(database, rng=rng)
