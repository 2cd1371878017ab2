""" Parse shell commands into a command tree. """
from forksh.command import Command, Execute, Pipe, Redirect, Sequence
from forksh.constants import (INPUT_OPERATOR, MAXIMUM_ARGUMENTS,
                              OUTPUT_OPERATOR, PIPE_OPERATOR,
                              SEQUENCE_OPERATOR)
from forksh.exceptions import ParseError
from forksh.lexer import first_word, tokenize


def parse(line: str, max_args: int = MAXIMUM_ARGUMENTS) -> Command:
    """
    Parse a stripped command line.

    Operators bind loosest first: ';' then '|' then redirection. Sequences and
    pipes split at the first operator, redirections at the last one.
    """
    split = line.find(SEQUENCE_OPERATOR)
    if split >= 0:
        return parse_sequence(line, split, max_args)

    split = line.find(PIPE_OPERATOR)
    if split >= 0:
        return parse_pipe(line, split, max_args)

    # With both redirections present the rightmost one is outermost; the
    # other one stays in the inner text and is parsed again from there.
    split = max(line.rfind(INPUT_OPERATOR), line.rfind(OUTPUT_OPERATOR))
    if split >= 0:
        return parse_redirect(line, split, max_args)

    return parse_execute(line, max_args)


def parse_execute(text: str, max_args: int = MAXIMUM_ARGUMENTS) -> Execute:
    """ Parse a simple command. """
    argv = tokenize(text)
    if len(argv) > max_args:
        raise ParseError(f"Too many arguments (maximum {max_args})")
    return Execute(tuple(argv))


def parse_sequence(line: str, split: int,
                   max_args: int = MAXIMUM_ARGUMENTS) -> Sequence:
    left = parse(line[:split], max_args)
    right = parse(line[split + 1:], max_args)
    return Sequence(left, right)


def parse_pipe(line: str, split: int,
               max_args: int = MAXIMUM_ARGUMENTS) -> Pipe:
    left = parse(line[:split], max_args)
    right = parse(line[split + 1:], max_args)
    return Pipe(left, right)


def parse_redirect(line: str, split: int,
                   max_args: int = MAXIMUM_ARGUMENTS) -> Redirect:
    """ Parse 'command < file' or 'command > file'. """
    direction = line[split]
    command = parse(line[:split], max_args)
    path = parse_redirect_filename(line[split + 1:])

    if direction == INPUT_OPERATOR:
        return Redirect.input(command, path)
    return Redirect.output(command, path)


def parse_redirect_filename(text: str) -> str:
    """ The file name is the first word after the operator. """
    path = first_word(text)
    if not path:
        raise ParseError("Failed to parse filename for redirection")
    return path
