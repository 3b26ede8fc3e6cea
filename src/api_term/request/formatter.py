"""Response body formatting for line-oriented display.

Valid JSON is re-indented token by token, so numbers and duplicate
keys come out exactly as the server sent them.
"""

import json

INDENT = "  "


def format_body(text: str) -> str:
    """Pretty-print ``text`` as indented JSON, or return it unchanged."""
    try:
        json.loads(text, parse_int=str, parse_float=str, parse_constant=_reject_constant)
    except ValueError:
        return text
    return _reindent(text)


def format_lines(text: str) -> list[str]:
    return format_body(text).split("\n")


def _reject_constant(name: str):
    # NaN and Infinity are not JSON.
    raise ValueError(f"invalid JSON constant {name}")


def _reindent(text: str) -> str:
    out: list[str] = []
    depth = 0
    in_string = escaped = just_opened = False

    for ch in text:
        if in_string:
            out.append(ch)
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
            continue
        if ch in " \t\r\n":
            continue

        if just_opened:
            just_opened = False
            if ch in "]}":
                # Empty containers stay on one line.
                depth -= 1
                out.append(ch)
                continue
            out.append(_newline(depth))

        if ch in "{[":
            out.append(ch)
            depth += 1
            just_opened = True
        elif ch in "]}":
            depth -= 1
            out.append(_newline(depth))
            out.append(ch)
        elif ch == ",":
            out.append(ch)
            out.append(_newline(depth))
        elif ch == ":":
            out.append(": ")
        else:
            if ch == '"':
                in_string = True
            out.append(ch)

    return "".join(out)


def _newline(depth: int) -> str:
    return "\n" + INDENT * depth
