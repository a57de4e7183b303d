"""Splitting of command lines and instruction text into tokens."""

from __future__ import annotations


def split(raw: str, delimiter: str = " ") -> list[str]:
    """Split on ``delimiter`` except inside square brackets.

    Brackets stay part of their token; empty tokens are dropped.
    """
    tokens: list[str] = []
    current: list[str] = []
    in_brackets = False
    for character in raw:
        if character == "[":
            in_brackets = True
            current.append(character)
        elif character == "]":
            in_brackets = False
            current.append(character)
        elif character == delimiter and not in_brackets:
            if current:
                tokens.append("".join(current))
                current = []
        else:
            current.append(character)
    if current:
        tokens.append("".join(current))
    return tokens


def split_command(text: str) -> list[str]:
    """Split a command line on whitespace, keeping double-quoted text whole.

    The quotes around a quoted token are removed; an unterminated quote runs
    to the end of the line.
    """
    tokens: list[str] = []
    position = 0
    length = len(text)
    while position < length:
        if text[position].isspace():
            position += 1
            continue
        if text[position] == '"':
            end = text.find('"', position + 1)
            if end == -1:
                tokens.append(text[position + 1 :])
                break
            tokens.append(text[position + 1 : end])
            position = end + 1
        else:
            end = position
            while end < length and not text[end].isspace():
                end += 1
            tokens.append(text[position:end])
            position = end
    return tokens


def get_tokens(command: str, delimiter: str = " ") -> list[str]:
    """Split on every ``delimiter``, keeping empty fields between repeats.

    A trailing delimiter does not produce a final empty token.
    """
    parts = command.split(delimiter)
    if parts and parts[-1] == "":
        parts.pop()
    return parts