"""Text helpers: binary-string check and stack-based reversal."""

from __future__ import annotations


def is_binary(text: str) -> bool:
    """Tell whether every character of text is '0' or '1'."""
    return all(ch in "01" for ch in text)


def reverse_with_stack(text: str) -> str:
    """Return text reversed by pushing its characters on a stack and popping them."""
    stack = list(text)
    popped = []
    while stack:
        popped.append(stack.pop())
    return "".join(popped)