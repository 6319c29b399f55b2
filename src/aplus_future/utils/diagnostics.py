import logging
import warnings

from ..exceptions import FutureUsageWarning

logger = logging.getLogger("aplus_future")


def warn(message: str) -> None:
    logger.warning(message)
    warnings.warn(message, FutureUsageWarning, stacklevel=3)
