""" Lexical analysis for shell commands. """
from forksh.constants import WHITESPACE, WHITESPACE_RX


def tokenize(text: str) -> list[str]:
    """ Split text into words at runs of whitespace. """
    return [tok for tok in WHITESPACE_RX.split(text) if tok]


def first_word(text: str) -> str:
    """ Return the first word of text, or "" if there is none. """
    text = text.lstrip(WHITESPACE)
    end = 0
    while end < len(text) and text[end] not in WHITESPACE:
        end += 1
    return text[:end]
