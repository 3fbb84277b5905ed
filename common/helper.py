import sys
import time

class PrintColor:
    @staticmethod
    def OK(input: str, stream=False):
        PrintColor._print("\033[92m", input, stream)

    @staticmethod
    def ERROR(input: str, stream=False):
        PrintColor._print("\033[91m", input, stream, sys.stderr)

    @staticmethod
    def CYAN(input: str, stream=False):
        PrintColor._print("\033[96m", input, stream)

    @staticmethod
    def _print(color: str, input: str, stream: bool, file=None):
        if stream:
            print(f"{color}{input}\033[0m", end="", flush=True, file=file)
        else:
            print(f"{color}{input}\033[0m", file=file)

def print_duration(name: str, t: float):
    t = time.time() - t
    if t >= 1:
        # 1.1 sec
        PrintColor.OK(f"{name}: {t:.1f} sec")
    elif t >= 0.1:
        # 0.11 sec
        PrintColor.OK(f"{name}: {t:.2f} sec")
    elif t >= 0.001:
        # 99 ms
        PrintColor.OK(f"{name}: {t * 1000:.0f} ms")
    else:
        # 999 μs
        PrintColor.OK(f"{name}: {t * 1000000:.0f} μs")

def preview(data: bytes, limit=16) -> str:
    """Hex of the first limit bytes, e.g. 'aa ab 00 ..'"""
    ret = data[:limit].hex(" ")
    if len(data) > limit:
        ret += " .."
    return ret
