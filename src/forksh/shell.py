""" Implement the core of the shell. """
import logging
import signal
import sys
from typing import NoReturn

from forksh.constants import MAXIMUM_LINE_LENGTH, PROMPT, WHITESPACE
from forksh.exceptions import ParseError
from forksh.parser import parse
from forksh.runner import exit_process, fatal, run_child, safe_fork, wait
from forksh.shell_builtins import BUILTINS, split_builtin

log = logging.getLogger(__name__)


def read_command(prompt=PROMPT):
    """ Read one command line. """
    return input(prompt)


def run_line(line: str) -> NoReturn:
    """ Parse and run a line in this process, then exit. """
    try:
        command = parse(line)
        log.debug("parsed %r as %r", line, command)
        run_child(command)
    except ParseError as e:
        fatal(str(e))
    except Exception:
        log.exception("unhandled error parsing %r", line)
    finally:
        exit_process(1)


class Shell:
    def __init__(self, prompt=PROMPT):
        self.prompt = prompt
        self.last_status = 0

    def execute_line(self, line: str) -> int:
        """ Run one line and return its exit status. """
        line = line.strip(WHITESPACE)
        if not line:
            return 0

        invocation = split_builtin(line)
        if invocation is not None:
            name, args = invocation
            return BUILTINS[name](args)

        if len(line) > MAXIMUM_LINE_LENGTH:
            print(f"Line too long (maximum {MAXIMUM_LINE_LENGTH} characters)",
                  file=sys.stderr)
            return 1

        # Ctrl-C belongs to the line being run; the shell must still reap it.
        previous = signal.signal(signal.SIGINT, signal.SIG_IGN)
        try:
            pid = safe_fork()
            if pid == 0:
                run_line(line)
            return wait(pid)
        finally:
            signal.signal(signal.SIGINT, previous)

    def run(self):
        while True:
            try:
                line = read_command(self.prompt)
                self.last_status = self.execute_line(line)
            except EOFError:
                print()
                return 0

            except KeyboardInterrupt:
                print()
