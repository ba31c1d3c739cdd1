# RBDB.py
import readline  # noqa: F401  (line editing for input())
import sys

from rbdb.core import init_core
from rbdb.logs import setup_logging


def main(argv=None):
    argv = sys.argv if argv is None else argv
    setup_logging()
    core = init_core()
    log = setup_logging(core.config["log_level"])

    try:
        if core.config["echo_args"]:
            for arg in argv:
                print(arg)

        print(core.config["banner"])
        log.debug("Session started")

        while True:
            try:
                line = input(core.config["prompt"])
            except KeyboardInterrupt:
                print()
                break
            if core.is_exit(line):
                break
            res = core.execute(line)
            if res is not None:
                print(res)
    except (EOFError, OSError) as e:
        # stdin closed or a stream broke under us; nothing left to talk to
        print(f"Application Error: {str(e) or 'input stream closed'}", file=sys.stderr)
        return 1

    log.debug("Session ended")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
