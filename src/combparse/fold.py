"""Text folding for character-composed parser outputs.

Sequencing and repetition produce nested tuples and lists of characters.
concat_text() flattens any such value into a single string, left to right.

Shapes:
    str            -> itself (a single character or an already-folded run)
    None           -> "" (absent optional, or a skipped output)
    list           -> concatenation of its items (many, sep_by)
    tuple          -> concatenation of its items (and_, then_maybe pairs)

Python 3.13+. Zero external dependencies.
"""

from combparse.diagnostics import ErrorTemplate

__all__ = ["concat_text"]


def concat_text(value: object) -> str:
    """Fold a character-composed value into text.

    Args:
        value: Output of a parser built from character-producing parsers

    Returns:
        The concatenated text

    Raises:
        TypeError: If value contains anything other than str, None, list, tuple

    Example:
        >>> concat_text(("h", [("e", None), "llo"]))
        'hello'
    """
    parts: list[str] = []
    # Explicit stack; nesting depth of value is unbounded
    stack: list[object] = [value]
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            parts.append(item)
        elif item is None:
            continue
        elif isinstance(item, (list, tuple)):
            stack.extend(reversed(item))
        else:
            raise TypeError(str(ErrorTemplate.unfoldable_value(item)))
    return "".join(parts)
