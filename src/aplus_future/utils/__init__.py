from .diagnostics import warn  # noqa
from .functional import identity  # noqa
from .types import Never, NeverType  # noqa
from .typing import is_callable, is_object_like  # noqa
