""" Registry of builtin commands. """
import os
import sys

BUILTINS = {}


def builtin(name):
    """Decorator to register builtins"""
    def wrapper(func):
        BUILTINS[name] = func
        return func
    return wrapper


@builtin("cd")
def builtin_cd(args):
    if len(args) == 0:
        target = os.environ.get("HOME", "/")
    else:
        target = args[0]

    try:
        os.chdir(target)
        return 0
    except FileNotFoundError:
        print(f"cd: no such file or directory: {target}", file=sys.stderr)
    except NotADirectoryError:
        print(f"cd: not a directory: {target}", file=sys.stderr)
    except PermissionError:
        print(f"cd: permission denied: {target}", file=sys.stderr)
    # Indicate failure due to error
    return 1


def split_builtin(line: str):
    """
    Split a line into (name, args) if it invokes a builtin.

    The builtin gets the rest of the line as a single argument, verbatim.
    Returns None for lines that are not builtin invocations.
    """
    parts = line.split(None, 1)
    if not parts or parts[0] not in BUILTINS:
        return None
    return parts[0], parts[1:]
