""" Execute a command tree as a tree of processes. """
import logging
import os
import signal
import sys
from typing import NoReturn

from forksh.command import Command, Execute, Pipe, Redirect, Sequence
from forksh.constants import FILE_PERMISSIONS

log = logging.getLogger(__name__)


def exit_process(status: int) -> NoReturn:
    """ Terminate this process without unwinding into the caller's code. """
    for stream in (sys.stdout, sys.stderr):
        try:
            stream.flush()
        except (OSError, ValueError):
            # fd 1 may already have been closed by a redirection
            pass
    os._exit(status)


def fatal(message: str) -> NoReturn:
    print(message, file=sys.stderr)
    exit_process(1)


def safe_fork() -> int:
    """ Fork, treating failure as fatal for the calling process. """
    sys.stdout.flush()
    sys.stderr.flush()
    try:
        pid = os.fork()
    except OSError:
        fatal("Failed fork")
    if pid == 0:
        # Children die on Ctrl-C; only the interactive shell ignores it.
        signal.signal(signal.SIGINT, signal.SIG_DFL)
    return pid


def spawn(command: Command) -> int:
    """ Fork a child that runs command; return its pid to the parent. """
    pid = safe_fork()
    if pid == 0:
        run_child(command)
    log.debug("spawned %d for %r", pid, str(command))
    return pid


def run_child(command: Command) -> NoReturn:
    """ Run command in a forked child; nothing may unwind past this. """
    try:
        run(command)
    except Exception:
        log.exception("unhandled error running %r", str(command))
    finally:
        exit_process(1)


def wait(pid: int) -> int:
    _, status = os.waitpid(pid, 0)
    code = os.waitstatus_to_exitcode(status)
    log.debug("reaped %d with status %d", pid, code)
    return code


def run(command: Command) -> NoReturn:
    """
    Run a command tree in this process and exit.

    This never returns: every branch ends by replacing the process image or
    by exiting. Callers that want to keep running must fork first.
    """
    if command is None:
        fatal("Failed run command")

    if isinstance(command, Execute):
        run_execute(command)
    elif isinstance(command, Sequence):
        run_sequence(command)
    elif isinstance(command, Pipe):
        run_pipe(command)
    elif isinstance(command, Redirect):
        run_redirect(command)

    fatal("Failed run command")


def run_execute(command: Execute) -> NoReturn:
    if not command.argv:
        exit_process(0)

    program = command.argv[0]
    log.debug("exec %r", list(command.argv))
    sys.stdout.flush()
    sys.stderr.flush()
    try:
        os.execvp(program, command.argv)
    except FileNotFoundError:
        print(f"Failed to execute {program}", file=sys.stderr)
        exit_process(127)
    except OSError:
        print(f"Failed to execute {program}", file=sys.stderr)
        exit_process(126)


def run_sequence(command: Sequence) -> NoReturn:
    # Left runs in a child; right takes over this process once it is done.
    wait(spawn(command.left))
    run(command.right)


def attach(fd: int, target: int, pipe_fds: tuple[int, int]):
    """ Install fd as descriptor target and close the other pipe ends. """
    if fd != target:
        os.dup2(fd, target)
    else:
        os.set_inheritable(target, True)
    for end in pipe_fds:
        if end != target:
            os.close(end)


def run_pipe(command: Pipe) -> NoReturn:
    try:
        read_fd, write_fd = os.pipe()
    except OSError:
        fatal("Failed to open pipe")

    left = safe_fork()
    if left == 0:
        attach(write_fd, 1, (read_fd, write_fd))
        run_child(command.left)

    right = safe_fork()
    if right == 0:
        attach(read_fd, 0, (read_fd, write_fd))
        run_child(command.right)

    # Both ends must be closed here or the reader never sees end of file.
    os.close(read_fd)
    os.close(write_fd)
    log.debug("pipe %d | %d", left, right)
    wait(left)
    wait(right)
    exit_process(0)


def run_redirect(command: Redirect) -> NoReturn:
    # Closing first means open() hands back the lowest free slot: fd itself.
    try:
        os.close(command.fd)
    except OSError:
        # already closed: the slot is free either way
        pass
    try:
        fd = os.open(command.path, command.mode, FILE_PERMISSIONS)
    except OSError:
        fatal(f"Failed to open file {command.path}")

    if fd != command.fd:
        os.dup2(fd, command.fd)
        os.close(fd)
    else:
        os.set_inheritable(fd, True)
    log.debug("fd %d -> %s", command.fd, command.path)
    run(command.command)
