""" Command tree produced by the parser and consumed by the runner. """
from dataclasses import dataclass

from forksh.constants import (INPUT_MODE, INPUT_OPERATOR, OUTPUT_MODE,
                              OUTPUT_OPERATOR, PIPE_OPERATOR,
                              SEQUENCE_OPERATOR)


class Command:
    """ Base class for the four kinds of command node.

    The set of node kinds is closed: Execute, Sequence, Pipe and Redirect.
    Every consumer dispatches over exactly these classes.
    """


@dataclass(frozen=True)
class Execute(Command):
    """ Run one program; argv[0] is the program name. """
    argv: tuple[str, ...] = ()

    def __str__(self):
        return " ".join(self.argv)


@dataclass(frozen=True)
class Sequence(Command):
    """ Run left to completion, then right. """
    left: Command
    right: Command

    def __str__(self):
        return f"{self.left} {SEQUENCE_OPERATOR} {self.right}"


@dataclass(frozen=True)
class Pipe(Command):
    """ Run left and right together, left's stdout feeding right's stdin. """
    left: Command
    right: Command

    def __str__(self):
        return f"{self.left} {PIPE_OPERATOR} {self.right}"


@dataclass(frozen=True)
class Redirect(Command):
    """ Reopen descriptor fd on path, then run command. """
    command: Command
    path: str
    mode: int
    fd: int

    @classmethod
    def input(cls, command: Command, path: str) -> "Redirect":
        return cls(command, path, INPUT_MODE, 0)

    @classmethod
    def output(cls, command: Command, path: str) -> "Redirect":
        return cls(command, path, OUTPUT_MODE, 1)

    def __str__(self):
        op = INPUT_OPERATOR if self.fd == 0 else OUTPUT_OPERATOR
        return f"{self.command} {op} {self.path}"
