import enum
import functools
import logging
import typing

from .config import get_settings
from .exceptions import (
    InvalidSetupError,
    InvalidStateError,
    SelfResolutionError,
    UnusableFutureError,
    invalid_setup_message,
)
from .resolution import Settle, resolve_future
from .scheduling import Scheduler
from .utils import Never, NeverType, identity, is_callable, warn

if typing.TYPE_CHECKING:
    from .deferred import Deferred  # noqa

logger = logging.getLogger(__name__)

T = typing.TypeVar("T")

Setup = typing.Callable[[Settle, Settle], typing.Any]
Handler = typing.Callable[[typing.Any], typing.Any]


class Status(enum.Enum):
    PENDING = "pending"
    FULFILLED = "fulfilled"
    REJECTED = "rejected"


def _no_setup(resolve: Settle, reject: Settle) -> None:
    pass


class Future(typing.Generic[T]):
    """
    A :py:class:`Future` is a container for a value that becomes available
    later.  It starts pending and is settled exactly once, either fulfilled
    with a value or rejected with a reason.  Continuations attached with
    :py:meth:`then` run through the future's :py:class:`Scheduler`, never
    inline, in the order they were attached.

    :param Callable setup: called synchronously with two handles,
        ``resolve(value)`` and ``reject(reason)``.  Only the first call of
        either handle has an effect.  An exception raised by ``setup`` rejects
        the future.  If the scheduler fails to accept the settlement, that
        error propagates out of the constructor.
    :param Scheduler scheduler: delivers settlement callbacks.  Defaults to
        the configured scheduler.
    """

    _status: typing.Optional[Status] = None
    _value: typing.Union[T, NeverType] = Never
    _reason: typing.Any = Never
    _on_fulfilled: typing.List[Handler]
    _on_rejected: typing.List[Handler]
    _scheduler: Scheduler

    @property
    def status(self) -> Status:
        return self._ensure_usable()

    @property
    def scheduler(self) -> Scheduler:
        return self._scheduler

    @property
    def value(self) -> T:
        if self.status is not Status.FULFILLED:
            raise InvalidStateError(f"{self!r} is not fulfilled")
        return typing.cast(T, self._value)

    @property
    def reason(self) -> typing.Any:
        if self.status is not Status.REJECTED:
            raise InvalidStateError(f"{self!r} is not rejected")
        return self._reason

    def done(self) -> bool:
        return self.status is not Status.PENDING

    def _ensure_usable(self) -> Status:
        if self._status is None:
            raise UnusableFutureError(self)
        return self._status

    def _settle_handles(self) -> typing.Tuple[Settle, Settle]:
        settled = False

        def resolve(value: typing.Any = None) -> None:
            nonlocal settled
            if settled:
                return
            settled = True
            try:
                try:
                    resolve_future(self, value, self._fulfill, self._reject)
                except SelfResolutionError as e:
                    self._reject(e)
            except Exception:
                # nothing was scheduled, so the handles stay open
                settled = False
                raise

        def reject(reason: typing.Any = None) -> None:
            nonlocal settled
            if settled:
                return
            settled = True
            try:
                self._reject(reason)
            except Exception:
                settled = False
                raise

        return resolve, reject

    def _fulfill(self, value: typing.Any) -> None:
        self._scheduler.schedule(functools.partial(self._settle, Status.FULFILLED, value))

    def _reject(self, reason: typing.Any) -> None:
        self._scheduler.schedule(functools.partial(self._settle, Status.REJECTED, reason))

    def _settle(self, status: Status, payload: typing.Any) -> None:
        if self._status is not Status.PENDING:
            return
        if status is Status.FULFILLED:
            self._value = payload
            callbacks = self._on_fulfilled
        else:
            self._reason = payload
            callbacks = self._on_rejected
        self._status = status
        self._on_fulfilled = []
        self._on_rejected = []
        logger.debug("%r settled, delivering to %d continuation(s)", self, len(callbacks))
        for callback in callbacks:
            callback(payload)

    def _run_handler(self, handler: Handler, argument: typing.Any) -> None:
        try:
            result = handler(argument)
            resolve_future(self, result, self._fulfill, self._reject)
        except Exception as e:
            self._reject(e)

    def then(
        self,
        on_fulfilled: typing.Optional[Handler] = None,
        on_rejected: typing.Optional[Handler] = None,
    ) -> "Future[typing.Any]":
        """
        Attaches continuations and returns a new future that settles with
        what they produce.

        A non-callable ``on_fulfilled`` passes the value through unchanged; a
        non-callable ``on_rejected`` passes the reason through unchanged.

        :param on_fulfilled: called with the value once this future fulfills.
        :param on_rejected: called with the reason once this future rejects.
        :return: a new :py:class:`Future`.
        """
        status = self._ensure_usable()
        next_: Future[typing.Any] = Future(_no_setup, scheduler=self._scheduler)

        fulfilled: Handler = functools.partial(
            next_._run_handler, on_fulfilled if is_callable(on_fulfilled) else identity
        )
        rejected: Handler
        if is_callable(on_rejected):
            rejected = functools.partial(next_._run_handler, on_rejected)
        else:
            rejected = next_._reject

        if status is Status.PENDING:
            self._on_fulfilled.append(fulfilled)
            self._on_rejected.append(rejected)
        elif status is Status.FULFILLED:
            self._scheduler.schedule(functools.partial(fulfilled, self._value))
        else:
            self._scheduler.schedule(functools.partial(rejected, self._reason))
        return next_

    def catch(self, on_rejected: typing.Optional[Handler]) -> "Future[typing.Any]":
        return self.then(None, on_rejected)

    def finally_(self, callback: typing.Callable[[], typing.Any]) -> "Future[T]":
        """
        Runs ``callback`` once this future settles either way, then settles the
        returned future with the original outcome.  If ``callback`` returns a
        thenable, that is waited for first; if it raises or its thenable
        rejects, the returned future rejects with that instead.
        """
        scheduler = self._scheduler

        def on_fulfilled(value: T) -> "Future[T]":
            return Future.resolve(callback(), scheduler=scheduler).then(lambda _: value)

        def on_rejected(reason: typing.Any) -> "Future[T]":
            return Future.resolve(callback(), scheduler=scheduler).then(
                lambda _: Future.reject(reason, scheduler=scheduler)
            )

        return self.then(on_fulfilled, on_rejected)

    @classmethod
    def resolve(
        cls, value: typing.Any = None, *, scheduler: typing.Optional[Scheduler] = None
    ) -> "Future[typing.Any]":
        return cls(lambda resolve, reject: resolve(value), scheduler=scheduler)

    @classmethod
    def reject(
        cls, reason: typing.Any = None, *, scheduler: typing.Optional[Scheduler] = None
    ) -> "Future[typing.Any]":
        return cls(lambda resolve, reject: reject(reason), scheduler=scheduler)

    @classmethod
    def all(
        cls,
        futures: typing.Iterable[typing.Any],
        *,
        scheduler: typing.Optional[Scheduler] = None,
    ) -> "Future[typing.List[typing.Any]]":
        """
        Returns a future that fulfills with the values of ``futures``, in the
        order given, once every one of them has fulfilled, or rejects with the
        first rejection observed.  Members that are not :py:class:`Future`
        instances are lifted with :py:meth:`resolve`.
        """
        inputs = [cls._lift(f, scheduler) for f in futures]

        def setup(resolve: Settle, reject: Settle) -> None:
            if not inputs:
                resolve([])
                return
            results: typing.List[typing.Any] = [Never] * len(inputs)
            remaining = len(inputs)

            def collect(index: int) -> Handler:
                def on_fulfilled(value: typing.Any) -> None:
                    nonlocal remaining
                    results[index] = value
                    remaining -= 1
                    if remaining == 0:
                        resolve(list(results))

                return on_fulfilled

            for index, future in enumerate(inputs):
                future.then(collect(index), reject)

        return cls(setup, scheduler=scheduler)

    @classmethod
    def race(
        cls,
        futures: typing.Iterable[typing.Any],
        *,
        scheduler: typing.Optional[Scheduler] = None,
    ) -> "Future[typing.Any]":
        """
        Returns a future that settles like whichever of ``futures`` settles
        first.  Racing nothing yields a future that never settles.
        """
        inputs = [cls._lift(f, scheduler) for f in futures]

        def setup(resolve: Settle, reject: Settle) -> None:
            for future in inputs:
                future.then(resolve, reject)

        return cls(setup, scheduler=scheduler)

    @classmethod
    def deferred(cls, *, scheduler: typing.Optional[Scheduler] = None) -> "Deferred[typing.Any]":
        from .deferred import Deferred

        return Deferred(scheduler=scheduler)

    @classmethod
    def _lift(
        cls, value: typing.Any, scheduler: typing.Optional[Scheduler]
    ) -> "Future[typing.Any]":
        if isinstance(value, Future):
            return value
        return cls.resolve(value, scheduler=scheduler)

    def __init__(self, setup: Setup, *, scheduler: typing.Optional[Scheduler] = None):
        settings = get_settings()
        self._scheduler = scheduler if scheduler is not None else settings.scheduler
        if not is_callable(setup):
            if settings.strict_construction:
                raise InvalidSetupError(setup)
            warn(invalid_setup_message(setup))
            return
        self._status = Status.PENDING
        self._on_fulfilled = []
        self._on_rejected = []
        resolve, reject = self._settle_handles()
        try:
            setup(resolve, reject)
        except Exception as e:
            reject(e)

    def __repr__(self) -> str:
        if self._status is None:
            return f"<{type(self).__name__} unusable>"
        if self._status is Status.FULFILLED:
            return f"<{type(self).__name__} fulfilled value={self._value!r}>"
        if self._status is Status.REJECTED:
            return f"<{type(self).__name__} rejected reason={self._reason!r}>"
        return f"<{type(self).__name__} pending>"
