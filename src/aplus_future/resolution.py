"""
The resolution procedure decides how a value produced for a future turns into
that future's outcome: plain values fulfill it, thenables are adopted, to any
depth and regardless of where they come from.
"""
import dataclasses
import logging
import typing

from .exceptions import SelfResolutionError
from .utils import is_callable, is_object_like

logger = logging.getLogger(__name__)

Settle = typing.Callable[[typing.Any], None]


@dataclasses.dataclass(frozen=True)
class NotThenable:
    pass


@dataclasses.dataclass(frozen=True)
class Thenable:
    then: typing.Callable[[Settle, Settle], typing.Any]


ThenableCheck = typing.Union[NotThenable, Thenable]


def inspect_thenable(value: typing.Any) -> ThenableCheck:
    """
    Obtains a callable ``then`` member from ``value``, if there is one.

    A missing member counts as not thenable, and so does a class: its ``then``
    belongs to its instances.  Any other error raised while reading the member
    propagates.
    """
    if not is_object_like(value) or isinstance(value, type):
        return NotThenable()
    try:
        then = getattr(value, "then")
    except AttributeError:
        return NotThenable()
    if not is_callable(then):
        return NotThenable()
    return Thenable(then)


def resolve_future(
    next_: typing.Any,
    result: typing.Any,
    fulfill: Settle,
    reject: Settle,
) -> None:
    """
    Settles ``next_`` according to ``result``.

    :param next_: the future whose outcome is being determined.
    :param result: the value produced for it.
    :param fulfill: settles ``next_`` as fulfilled, without further unwrapping.
    :param reject: settles ``next_`` as rejected.
    :raises SelfResolutionError: if ``result`` is ``next_`` itself.
    """
    if result is next_:
        raise SelfResolutionError(next_)

    try:
        check = inspect_thenable(result)
    except Exception as e:
        reject(e)
        return

    if isinstance(check, NotThenable):
        fulfill(result)
        return

    called = False

    def resolve_with(value: typing.Any) -> None:
        nonlocal called
        if called:
            logger.debug("ignoring late fulfillment from %r", result)
            return
        called = True
        try:
            resolve_future(next_, value, fulfill, reject)
        except Exception as e:
            reject(e)

    def reject_with(reason: typing.Any) -> None:
        nonlocal called
        if called:
            logger.debug("ignoring late rejection from %r", result)
            return
        called = True
        reject(reason)

    try:
        check.then(resolve_with, reject_with)
    except Exception as e:
        if called:
            logger.debug("ignoring %r raised by then() of %r after it settled", e, result)
            return
        called = True
        reject(e)
