import functools
import time

from placeholder_tiles.logger import logger


def time_debug(func):
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        start_time = time.perf_counter()
        result = func(*args, **kwargs)
        end_time = time.perf_counter()
        perf_time = (end_time - start_time) * 1000
        logger.debug(f"{func.__name__}: {perf_time} ms")
        return result

    return wrapper
