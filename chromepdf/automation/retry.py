import time
import logging
from functools import wraps

logger = logging.getLogger(__name__)


def retry(times: int = 3, delay: float = 3, exceptions=(Exception,)):
    """
    Retry decorator for callers that want to re-run a whole conversion.

    A conversion never retries internally; each attempt launches a
    fresh browser and writes a fresh temp file.

    Args:
        times (int): Number of attempts (at least one is always made)
        delay (float): Delay in seconds between attempts
        exceptions (tuple): Exception types that trigger another attempt
    """
    times = max(1, int(times))

    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            last_exception = None
            for attempt in range(1, times + 1):
                try:
                    logger.info(
                        "Attempt %s/%s for %s",
                        attempt,
                        times,
                        func.__name__,
                    )
                    return func(*args, **kwargs)
                except exceptions as exc:
                    last_exception = exc
                    logger.error(
                        "Error on attempt %s for %s: %s",
                        attempt,
                        func.__name__,
                        exc,
                    )
                    if attempt < times:
                        time.sleep(delay)

            logger.critical(
                "All %s attempts failed for %s",
                times,
                func.__name__,
            )
            raise last_exception

        return wrapper

    return decorator
