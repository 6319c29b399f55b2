import typing

from .resolution import Settle
from .scheduling import Scheduler

if typing.TYPE_CHECKING:
    from .future import Future  # noqa

T = typing.TypeVar("T")


class Deferred(typing.Generic[T]):
    """
    A :py:class:`Deferred` exposes a pending :py:class:`Future` together with
    its raw settle handles, so that a future can be settled from outside its
    setup procedure.  It is meant for test harnesses and integration glue.

    It unpacks as ``promise, resolve, reject``.

    :param Scheduler scheduler: passed on to the future.
    """

    promise: "Future[T]"
    resolve: Settle
    reject: Settle

    def _capture(self, resolve: Settle, reject: Settle) -> None:
        self.resolve = resolve
        self.reject = reject

    def __iter__(self) -> typing.Iterator[typing.Any]:
        return iter((self.promise, self.resolve, self.reject))

    def __init__(self, scheduler: typing.Optional[Scheduler] = None) -> None:
        from .future import Future

        self.promise = Future(self._capture, scheduler=scheduler)
