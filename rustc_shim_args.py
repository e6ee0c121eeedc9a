from __future__ import annotations

from typing import Callable, Iterable


def always(_value: str) -> bool:
    return True


def find_option_matching(
    tokens: Iterable[str],
    match: Callable[[str], bool],
    accept: Callable[[str], bool] = always,
) -> str | None:
    """Return the value of the first option whose name passes `match` and value passes `accept`.

    Both `--opt=value` and `--opt value` are understood. In the second form the
    following token is consumed as the value and is not looked at as an option.
    """
    it = iter(tokens)
    for tok in it:
        head, sep, tail = tok.partition("=")
        if not match(head):
            continue
        value = tail if sep else next(it, None)
        if value is not None and accept(value):
            return value
    return None


def find_option(tokens: Iterable[str], name: str, accept: Callable[[str], bool] = always) -> str | None:
    return find_option_matching(tokens, lambda head: head == name, accept)


def is_debuginfo_name(head: str) -> bool:
    # `-C debuginfo=2` arrives as two tokens, `-Cdebuginfo=2` as one.
    return head == "debuginfo" or (head.startswith("-") and "debuginfo" in head)


def has_debuginfo_option(tokens: Iterable[str]) -> bool:
    return find_option_matching(tokens, is_debuginfo_name) is not None


def count_containing(tokens: Iterable[str], marker: str) -> int:
    return sum(1 for tok in tokens if marker in tok)
