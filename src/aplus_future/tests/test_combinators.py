import pytest


class TestAll:
    @pytest.fixture
    def target(self):
        from ..future import Future

        return Future

    def test_empty(self, target, scheduler):
        f = target.all([])
        assert not f.done()
        scheduler.run()
        assert f.value == []

    def test_values_in_input_order(self, target, scheduler):
        d1, d2, d3 = target.deferred(), target.deferred(), target.deferred()
        f = target.all([d1.promise, d2.promise, d3.promise])
        d3.resolve(3)
        scheduler.run()
        d1.resolve(1)
        scheduler.run()
        assert not f.done()
        d2.resolve(2)
        scheduler.run()
        assert f.value == [1, 2, 3]

    def test_first_rejection_wins(self, target, scheduler):
        f = target.all([target.resolve(1), target.reject("e"), target.resolve(3)])
        scheduler.run()
        assert f.reason == "e"

    def test_rejection_order_follows_settlement(self, target, scheduler):
        d1, d2 = target.deferred(), target.deferred()
        f = target.all([d1.promise, d2.promise])
        d2.reject("second")
        scheduler.run()
        d1.reject("first")
        scheduler.run()
        assert f.reason == "second"

    def test_same_future_twice(self, target, scheduler):
        shared = target.resolve("x")
        f = target.all([shared, target.resolve("y"), shared])
        scheduler.run()
        assert f.value == ["x", "y", "x"]

    def test_lifts_plain_values(self, target, scheduler):
        f = target.all(iter([1, target.resolve(2), None]))
        scheduler.run()
        assert f.value == [1, 2, None]

    def test_values_that_are_futures_stay_flat(self, target, scheduler):
        f = target.all([target.resolve(target.resolve(1))])
        scheduler.run()
        assert f.value == [1]


class TestRace:
    @pytest.fixture
    def target(self):
        from ..future import Future

        return Future

    def test_first_fulfillment(self, target, scheduler):
        never = target(lambda resolve, reject: None)
        f = target.race([never, target.resolve(5)])
        scheduler.run()
        assert f.value == 5

    def test_first_rejection(self, target, scheduler):
        d = target.deferred()
        f = target.race([d.promise, target.reject("fast")])
        scheduler.run()
        d.resolve("slow")
        scheduler.run()
        assert f.reason == "fast"

    def test_later_outcomes_ignored(self, target, scheduler):
        d1, d2 = target.deferred(), target.deferred()
        f = target.race([d1.promise, d2.promise])
        d2.resolve("winner")
        scheduler.run()
        d1.reject("loser")
        scheduler.run()
        assert f.value == "winner"
        assert d1.promise.reason == "loser"

    def test_empty_never_settles(self, target, scheduler):
        from ..future import Status

        f = target.race([])
        scheduler.run()
        assert f.status is Status.PENDING


class TestResolveReject:
    @pytest.fixture
    def target(self):
        from ..future import Future

        return Future

    @pytest.mark.parametrize("value", [None, 0, "x", [1], {"a": 1}])
    def test_resolve_plain(self, target, scheduler, value):
        f = target.resolve(value).then(lambda x: x)
        scheduler.run()
        assert f.value == value

    def test_resolve_flattens_chain(self, target, scheduler):
        f = target.resolve(target.resolve(target.resolve(7))).then(lambda x: x)
        scheduler.run()
        assert f.value == 7

    def test_resolve_returns_new_future(self, target, scheduler):
        inner = target.resolve(1)
        assert target.resolve(inner) is not inner

    def test_reject_does_not_unwrap(self, target, scheduler):
        inner = target.resolve(1)
        f = target.reject(inner)
        scheduler.run()
        assert f.reason is inner


class TestDeferred:
    @pytest.fixture
    def target(self):
        from ..deferred import Deferred

        return Deferred

    def test_settle_from_outside(self, target, scheduler):
        promise, resolve, reject = target()
        resolve("outside")
        reject("ignored")
        scheduler.run()
        assert promise.value == "outside"

    def test_reject_from_outside(self, target, scheduler):
        d = target()
        d.reject("nope")
        scheduler.run()
        assert d.promise.reason == "nope"

    def test_factory(self, scheduler):
        from ..deferred import Deferred
        from ..future import Future
        from ..scheduling import ManualScheduler

        other = ManualScheduler()
        d = Future.deferred(scheduler=other)
        assert isinstance(d, Deferred)
        assert d.promise.scheduler is other
