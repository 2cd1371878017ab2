import os
import re

PROMPT = ">>> "

# Longest accepted input line, in characters.
MAXIMUM_LINE_LENGTH = 127
# Most words a single simple command may carry, program name included.
MAXIMUM_ARGUMENTS = 15

WHITESPACE = " \t\r\n\v"
WHITESPACE_RX = re.compile(r"[ \t\r\n\v]+")

SEQUENCE_OPERATOR = ";"
PIPE_OPERATOR = "|"
INPUT_OPERATOR = "<"
OUTPUT_OPERATOR = ">"

INPUT_MODE = os.O_RDONLY
OUTPUT_MODE = os.O_WRONLY | os.O_CREAT
FILE_PERMISSIONS = 0o666
