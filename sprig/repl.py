"""Interactive read-eval-print loop and script runner."""

from __future__ import annotations

from argparse import ArgumentParser, FileType
import logging
import sys

from sprig import __version__, config
from sprig.interpreter import Interpreter
from sprig.printer import to_string
from sprig.types.errors import SprigError

_log = logging.getLogger(__name__)


def _report(exc: BaseException) -> None:
    print(f"{type(exc).__name__}: {exc}", file=sys.stderr)


def run_line(interp: Interpreter, source: str) -> bool:
    """Evaluate every form in `source`, printing each value. Returns False on error."""
    try:
        for value in interp.eval_each(source):
            print(to_string(value))
    except (SprigError, RecursionError) as exc:
        _report(exc)
        return False
    except Exception:
        _log.exception('Evaluation error')
        return False
    return True


def _setup_history() -> None:
    try:
        import readline
    except ImportError:
        _log.info('readline not available')
        return

    import atexit
    histfile = config.get_history_file()
    try:
        readline.read_history_file(histfile)
    except OSError:
        pass
    atexit.register(readline.write_history_file, histfile)


def repl(argv: list[str] | None = None) -> None:
    argparser = ArgumentParser("sprig", description="Sprig Lisp interpreter")
    argparser.add_argument(
        '-d', '--debug', action='store_true',
        help="debug output")
    argparser.add_argument(
        'file', type=FileType('r'), nargs='?',
        help="program read from file")

    args = argparser.parse_args(argv)

    level = logging.DEBUG if args.debug else config.get_log_level()
    logging.basicConfig(level=level)

    limit = config.get_recursion_limit()
    if limit is not None:
        sys.setrecursionlimit(limit)

    interp = Interpreter()

    if args.file:
        with args.file:
            source = args.file.read()
        sys.exit(0 if run_line(interp, source) else 1)

    _setup_history()
    print(f'Sprig {__version__}')
    prompt = config.get_prompt()

    while True:
        try:
            source = input(prompt)
        except EOFError:
            print()
            break
        except KeyboardInterrupt as ki:
            print(ki)
            continue

        if not source.strip():
            continue

        run_line(interp, source)


def main() -> None:
    repl()


if __name__ == '__main__':
    main()
