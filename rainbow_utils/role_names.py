import re
from typing import List, Optional, Sequence

from rainbow_utils.colors import RGB, COLORS, SCHEMES, all_tokens

RAINBOW_PREFIX = "rainbow-"

# Longest tokens first so "bluegreen" wins over "blue" + "green".
_TOKENS: List[str] = sorted(all_tokens(), key=len, reverse=True)
_SEPARATORS = re.compile(r"[-\s]+")


def is_rainbow_name(name: str) -> bool:
    return name.lower().startswith(RAINBOW_PREFIX)


def tokenize(body: str) -> Optional[List[str]]:
    """Splits a role name body into color/scheme tokens.

    Dashes are optional separators; tokens may also be run together. Returns
    None when any part of the body is not a known token.
    """
    tokens: List[str] = []
    for chunk in _SEPARATORS.split(body.lower()):
        if not chunk:
            continue
        chunk_tokens = _split_chunk(chunk)
        if chunk_tokens is None:
            return None
        tokens.extend(chunk_tokens)
    return tokens or None


def _split_chunk(chunk: str) -> Optional[List[str]]:
    if not chunk:
        return []
    for token in _TOKENS:
        if chunk.startswith(token):
            rest = _split_chunk(chunk[len(token):])
            if rest is not None:
                return [token] + rest
    return None


def expand_tokens(tokens: Sequence[str]) -> List[RGB]:
    colors: List[RGB] = []
    for token in tokens:
        if token in COLORS:
            colors.append(COLORS[token])
        else:
            colors.extend(SCHEMES[token].colors)
    return colors


def parse_role_name(name: str) -> Optional[List[RGB]]:
    """Color sequence encoded in a rainbow role name, or None if it isn't one."""
    if not is_rainbow_name(name):
        return None
    tokens = tokenize(name[len(RAINBOW_PREFIX):])
    if not tokens:
        return None
    return expand_tokens(tokens)


def starting_index(sequence: Sequence[RGB], current: RGB) -> int:
    """Index of the color that follows ``current`` in ``sequence``.

    A role seen for the first time continues from whatever color it is showing;
    a color outside the sequence starts the rotation from the beginning.
    """
    for index, color in enumerate(sequence):
        if color == tuple(current):
            return (index + 1) % len(sequence)
    return 0


def advance(sequence: Sequence[RGB], index: int):
    """Returns ``(color, next_index)`` for one rotation step."""
    index = index % len(sequence)
    return sequence[index], (index + 1) % len(sequence)
