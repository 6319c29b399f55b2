"""
This module contains the deferred-delivery capability that futures use to run
settlement callbacks after the current synchronous phase.

A :py:class:`Scheduler` is supplied by the host.  Two implementations are
provided:

* :py:class:`ManualScheduler` queues callbacks until the caller drains it,
  which makes delivery fully deterministic.
* :py:class:`AsyncioScheduler` hands callbacks to an asyncio event loop.
"""
import abc
import asyncio
import collections
import logging
import typing

logger = logging.getLogger(__name__)

Callback = typing.Callable[[], None]


class Scheduler(metaclass=abc.ABCMeta):
    @abc.abstractmethod
    def schedule(self, callback: Callback) -> None:
        """
        Arranges for ``callback`` to be invoked once the synchronous phase that
        is currently executing has completed.  Callbacks submitted to the same
        scheduler must run in submission order.

        :param Callable[[], None] callback: the callback to defer.
        """
        ...  # pragma: nocover


class ManualScheduler(Scheduler):
    """
    A :py:class:`ManualScheduler` keeps scheduled callbacks in a FIFO queue
    and runs nothing until :py:meth:`run` or :py:meth:`run_once` is called.
    """

    _queue: typing.Deque[Callback]

    @property
    def pending(self) -> int:
        return len(self._queue)

    def schedule(self, callback: Callback) -> None:
        self._queue.append(callback)

    def run_once(self) -> bool:
        """
        Runs the oldest queued callback.

        :return: False if there was nothing to run.
        """
        try:
            callback = self._queue.popleft()
        except IndexError:
            return False
        try:
            callback()
        except Exception:
            logger.exception("scheduled callback %r raised", callback)
            raise
        return True

    def run(self) -> int:
        """
        Runs queued callbacks until the queue is empty, including the ones that
        get scheduled while running.

        :return: the number of callbacks that ran.
        """
        n = 0
        while self.run_once():
            n += 1
        return n

    def __init__(self) -> None:
        self._queue = collections.deque()


class AsyncioScheduler(Scheduler):
    """
    Delivers callbacks through :py:meth:`asyncio.AbstractEventLoop.call_soon`,
    which preserves submission order.  Without an explicit loop the loop
    running at scheduling time is used.
    """

    _loop: typing.Optional[asyncio.AbstractEventLoop]

    def schedule(self, callback: Callback) -> None:
        loop = self._loop if self._loop is not None else asyncio.get_running_loop()
        loop.call_soon(callback)

    def __init__(self, loop: typing.Optional[asyncio.AbstractEventLoop] = None) -> None:
        self._loop = loop
