import pytest


@pytest.fixture
def scheduler():
    from ..scheduling import ManualScheduler

    return ManualScheduler()


@pytest.fixture(autouse=True)
def default_scheduler(scheduler):
    from ..config import configured

    with configured(scheduler=scheduler):
        yield scheduler


class Recorder:
    def __init__(self):
        self.calls = []

    def __call__(self, tag):
        def record(arg):
            self.calls.append((tag, arg))
            return arg

        return record


@pytest.fixture
def recorder():
    return Recorder()
