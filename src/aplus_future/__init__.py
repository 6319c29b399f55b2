from .config import Settings, configure, configured, get_settings  # noqa
from .deferred import Deferred  # noqa
from .exceptions import (  # noqa
    FutureError,
    FutureUsageWarning,
    InvalidSetupError,
    InvalidStateError,
    SelfResolutionError,
    UnusableFutureError,
)
from .future import Future, Status  # noqa
from .resolution import NotThenable, Thenable, inspect_thenable, resolve_future  # noqa
from .scheduling import AsyncioScheduler, ManualScheduler, Scheduler  # noqa
