import sys
from argparse import ArgumentParser

from bytesplit.config import Config
from bytesplit.stream import FileSplitter
from common.decorator import benchmark
from common.helper import PrintColor, preview
from common.toml import ConfigError

@benchmark("split", lambda: Config.BENCHMARK is True)
def print_runs(file: str):
    with FileSplitter(
        file,
        Config.SPLIT.SEPARATOR,
        read_size=Config.SPLIT.READ_SIZE,
        prepend_separator=Config.SPLIT.PREPEND_SEPARATOR,
        strip=Config.SPLIT.STRIP,
        debug=Config.DEBUG
    ) as runs:
        count = 0
        for run, kind in runs.labeled():
            count += 1
            print("{:<10}  {:>8}  {}".format(kind.name, len(run), preview(run)))

    PrintColor.OK(f"total {count}")

def main(argv: list[str] | None = None) -> int:
    parser = ArgumentParser(prog="bytesplit", description="Split a file on a byte separator.")
    parser.add_argument("file")
    parser.add_argument("--config", type=str, required=False)
    parser.add_argument("--separator", type=str, required=False, help="overrides [split] separator (utf-8)")
    arg = parser.parse_args(argv)

    separator = None
    if arg.separator is not None:
        separator = arg.separator.encode("utf-8")

    try:
        Config.load_from_toml(arg.config, separator)
    except (ConfigError, ValueError) as e:
        PrintColor.ERROR(str(e))
        return 1

    try:
        print_runs(arg.file)
    except OSError as e:
        PrintColor.ERROR(str(e))
        return 1

    return 0

if __name__ == "__main__":
    sys.exit(main())
