import contextlib
import typing

import pydantic

from .scheduling import ManualScheduler, Scheduler


def _default_scheduler() -> Scheduler:
    return _process_scheduler


_process_scheduler = ManualScheduler()


class Settings(pydantic.BaseModel):
    model_config = pydantic.ConfigDict(arbitrary_types_allowed=True, frozen=True, extra="forbid")

    scheduler: Scheduler = pydantic.Field(default_factory=_default_scheduler)
    strict_construction: bool = False


_settings = Settings()


def get_settings() -> Settings:
    return _settings


def configure(**changes: typing.Any) -> Settings:
    """
    Replaces the process-wide settings with a copy carrying ``changes``.

    :return: the settings that were in effect before the call.
    """
    global _settings
    previous = _settings
    _settings = Settings(**{**dict(previous), **changes})
    return previous


@contextlib.contextmanager
def configured(**changes: typing.Any) -> typing.Iterator[Settings]:
    previous = configure(**changes)
    try:
        yield _settings
    finally:
        _restore(previous)


def _restore(settings: Settings) -> None:
    global _settings
    _settings = settings
