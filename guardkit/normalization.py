from __future__ import annotations


def normalize(raw: str | None) -> str | None:
    """
    Reduce a raw text value to either its present form or ``None``.

    Rules:
      - ``None`` stays ``None``
      - empty strings and strings made only of whitespace become ``None``
      - any other string is returned unchanged, surrounding whitespace included

    For example:
    >>> normalize("  ") is None
    True
    >>> normalize(" name ")
    ' name '
    """
    if raw is None or not raw.strip():
        return None
    return raw
