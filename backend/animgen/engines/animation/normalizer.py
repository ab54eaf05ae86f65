"""
Normalize generated animation source into the body of the component function.

Generated code often arrives as a full module: imports, a few helpers and a
zero-argument component function. The sandbox has no import resolution (every
external name is a pre-bound capability), so import statements are stripped
and the component body is lifted out of its ``def``.

Usage::

    body = extract_component_body(code)
    # "def helper(x):\n    return x\n\nreturn AbsoluteFill(...)"

Purely textual. A pattern that matches nothing is a no-op, never an error.
"""

import os
import re

# Statement start: beginning of a line (after indentation) or right after ";".
_STMT = r"(?:^|(?<=;))[ \t]*"
# Optional statement terminator, plus the gap before the next statement.
_END = r"[ \t]*(?:;[ \t]*)?"

_ALIAS = r"(?:[ \t]+as[ \t]+\w+)?"
_NAME_LIST = (
    rf"\w+{_ALIAS}(?:[ \t]*,[ \t]*(?:\\\n[ \t]*)?\w+{_ALIAS})*[ \t]*,?"
)

# Order matters: each pattern must run before any later pattern that would
# match a prefix of the same statement.
_IMPORT_PATTERNS: tuple[tuple[str, re.Pattern[str]], ...] = (
    (
        # from typing import Any / from __future__ import annotations
        "type_only",
        re.compile(
            _STMT
            + r"from[ \t]+(?:typing|typing_extensions|__future__)[ \t]+import[ \t]+"
            + r"(?:\([^)]*\)|(?:[^\n;\\]|\\\n)+)"
            + _END,
            re.MULTILINE,
        ),
    ),
    (
        # import a, b as c
        "combined",
        re.compile(
            _STMT
            + rf"import[ \t]+[\w.]+{_ALIAS}(?:[ \t]*,[ \t]*[\w.]+{_ALIAS})+"
            + _END,
            re.MULTILINE,
        ),
    ),
    (
        # from pkg import a, b as c / from pkg import (\n a,\n b\n)
        "named",
        re.compile(
            _STMT
            + rf"from[ \t]+[\w.]+[ \t]+import[ \t]+(?:\([^)]*\)|{_NAME_LIST})"
            + _END,
            re.MULTILINE,
        ),
    ),
    (
        # from pkg import *
        "namespace",
        re.compile(
            _STMT + r"from[ \t]+[\w.]+[ \t]+import[ \t]+\*" + _END,
            re.MULTILINE,
        ),
    ),
    (
        # import pkg / import pkg.sub as alias
        "default",
        re.compile(_STMT + rf"import[ \t]+[\w.]+{_ALIAS}" + _END, re.MULTILINE),
    ),
    (
        # __import__("pkg") / importlib.import_module("pkg")
        "side_effect",
        re.compile(
            _STMT
            + r"(?:__import__|importlib[ \t]*\.[ \t]*import_module)"
            + r"[ \t]*\([ \t]*[\"'][^\"'\n]+[\"'][ \t]*\)"
            + _END,
            re.MULTILINE,
        ),
    ),
)

# Optional decorators, then a top-level zero-argument def header.
_HEADER_RE = re.compile(
    r"(?:^@[^\n]*\n)*"
    r"^def[ \t]+\w+[ \t]*\([ \t]*\)[ \t]*(?:->[^:\n]*)?:[ \t]*(?:\#[^\n]*)?\n",
    re.MULTILINE,
)

_TRIPLE_QUOTES = ('"""', "'''")

# Line states returned by line_states().
STRING = "string"
BRACKET = "bracket"


def line_states(text: str) -> list[str | None]:
    """
    For each line of ``text``: STRING when it starts inside a string literal,
    BRACKET when it continues an open bracket or a backslash, else None.

    A lexical scan only; it never raises on malformed input.
    """
    states: list[str | None] = []
    quote: str | None = None
    depth = 0
    backslash = False
    for line in text.split("\n"):
        if quote is not None:
            states.append(STRING)
        elif depth or backslash:
            states.append(BRACKET)
        else:
            states.append(None)
        backslash = False
        i = 0
        n = len(line)
        while i < n:
            ch = line[i]
            if quote is not None:
                if ch == "\\":
                    i += 2
                elif line.startswith(quote, i):
                    i += len(quote)
                    quote = None
                else:
                    i += 1
                continue
            if ch == "#":
                break
            if line.startswith(_TRIPLE_QUOTES, i):
                quote = line[i : i + 3]
                i += 3
                continue
            if ch in "\"'":
                quote = ch
            elif ch in "([{":
                depth += 1
            elif ch in ")]}":
                depth = max(depth - 1, 0)
            elif ch == "\\" and i == n - 1:
                backslash = True
            i += 1
        if quote in ("'", '"'):
            # Single-quoted strings stop at the line break.
            quote = None
    return states


def indent_code(text: str, prefix: str) -> str:
    """Like textwrap.indent, but never touches lines inside a string literal."""
    return "\n".join(
        prefix + line if state != STRING and line.strip() else line
        for line, state in zip(text.split("\n"), line_states(text))
    )


def _is_body_line(line: str, state: str | None) -> bool:
    return (
        state is not None
        or not line.strip()
        or line.startswith("#")
        or line[0] in " \t"
    )


def _dedent_body(lines: list[str], states: list[str | None]) -> str:
    margins = [
        line[: len(line) - len(line.lstrip(" \t"))]
        for line, state in zip(lines, states)
        if state is None and line.strip() and not line.lstrip().startswith("#")
    ]
    margin = os.path.commonprefix(margins) if margins else ""
    out = []
    for line, state in zip(lines, states):
        if state is None:
            if line.startswith(margin):
                line = line[len(margin) :]
            elif line.lstrip().startswith("#"):
                line = line.lstrip(" \t")
        out.append(line)
    return "\n".join(out).strip()


def strip_imports(code: str) -> str:
    """Remove every import-like statement and trim the result."""
    cleaned = code
    for _name, pattern in _IMPORT_PATTERNS:
        # Repeat so "import a; import b" loses both statements.
        count = 1
        while count:
            cleaned, count = pattern.subn("", cleaned)
    return cleaned.strip()


def extract_component_body(code: str) -> str:
    """
    Strip imports, then unwrap ``def Name(): ...`` into ``helpers + body``.

    The body runs to the end of the text: indented lines, blank lines,
    column-0 comments, and lines continuing a string or bracket. The first
    header followed by such a body wins. When the text is not shaped like a
    trailing zero-argument component function it is returned cleaned but
    otherwise untouched.
    """
    cleaned = strip_imports(code)
    lines = cleaned.split("\n")
    states = line_states(cleaned)

    for match in _HEADER_RE.finditer(cleaned):
        if states[cleaned.count("\n", 0, match.start())] is not None:
            continue
        first = cleaned.count("\n", 0, match.end())
        body_lines, body_states = lines[first:], states[first:]
        if not all(_is_body_line(line, state) for line, state in zip(body_lines, body_states)):
            continue
        helpers = cleaned[: match.start()].strip()
        body = _dedent_body(body_lines, body_states)
        return f"{helpers}\n\n{body}" if helpers else body
    return cleaned
