"""Rewrite shader source as C string literals, one literal per line.

Quotes and backslashes inside a line are passed through untouched, so a line
containing either yields a literal the C compiler will reject. Existing
consumers depend on this exact output.

Text is decoded as latin-1 unless configured otherwise: every byte maps to one
character, so sources in any encoding come back out byte for byte.
"""

import os
from typing import List

from minijinja import Environment

DEFAULT_ENCODING = "latin-1"

LITERAL_TEMPLATE = """{% for line in lines %}"{{ line }}\\n"
{% endfor %}"""

env = Environment(templates={"literals": LITERAL_TEMPLATE})


def split_lines(text: str) -> List[str]:
    """Split on newlines, dropping each line's terminator (``\\n`` or ``\\r\\n``)."""
    lines = text.split("\n")
    # A final terminator does not start another line.
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def render_literals(text: str) -> str:
    lines = split_lines(text)
    if not lines:
        return ""
    return env.render_template("literals", lines=lines)


def read_source(path: str, encoding: str = DEFAULT_ENCODING) -> str:
    # newline="" keeps "\r" so split_lines sees the file as written.
    with open(path, "r", encoding=encoding, newline="") as f:
        return f.read()


def emit(text: str, output_path: str, encoding: str = DEFAULT_ENCODING):
    directory = os.path.dirname(output_path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    # Render before opening so a failure leaves any previous output intact.
    rendered = render_literals(text)
    with open(output_path, "w", encoding=encoding, newline="\n") as f:
        f.write(rendered)
