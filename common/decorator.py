import functools
import time
from typing import Callable

from common.helper import print_duration

# run can be a bool or a no-arg callable. a bool is fixed the moment the module with
# @benchmark is imported; a callable is asked on every call, so config loaded later still applies
def benchmark(name: str, run: bool | Callable[[], bool]):
    def decorate(fn):
        if run is False:
            return fn

        @functools.wraps(fn)
        def wrapper(*arg, **kwargs):
            if callable(run) and not run():
                return fn(*arg, **kwargs)

            t = time.time()
            ret = fn(*arg, **kwargs)
            print_duration(name, t)
            return ret

        return wrapper
    return decorate
