""" Exceptions raised by the shell. """


class ShellError(Exception):
    """ Base class for shell errors. """


class ParseError(ShellError, SyntaxError):
    """ A command line could not be turned into a command tree. """
