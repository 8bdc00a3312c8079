import itertools

import pytest
from fastapi.testclient import TestClient

from biasmeter.main import create_app
from biasmeter.services.report_service import ReportGenerator
from biasmeter.services.user_store import UserStore


class ScriptedRandom:
    """Deterministic stand-in for numpy's Generator: replays fixed draws."""

    def __init__(self, floats, ints=(0,)):
        self._floats = itertools.cycle(floats)
        self._ints = itertools.cycle(ints)

    def random(self):
        return next(self._floats)

    def integers(self, low, high):
        value = next(self._ints)
        assert low <= value < high
        return value


# hiring: score 30.0, male 50.0, female 40.0, other 12.5, sample 500
HIRING_DRAWS = dict(floats=[0.2, 0.5, 0.25, 0.5], ints=[400])


@pytest.fixture()
def store():
    return UserStore.with_demo_accounts()


@pytest.fixture()
def scripted_generator():
    return ReportGenerator(ScriptedRandom(**HIRING_DRAWS))


@pytest.fixture()
def client(store, scripted_generator):
    app = create_app(user_store=store, report_generator=scripted_generator)
    with TestClient(app) as c:
        yield c
