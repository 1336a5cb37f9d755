"""Doc comment normalization."""

from __future__ import annotations

import textwrap


def convert_docstring(raw: str | None) -> str | None:
    """Doc comment text -> stored docstring.

    Common leading indentation is removed so generators can re-indent the text
    for their own comment syntax. A missing comment stays None; it never
    becomes "".
    """
    if raw is None:
        return None
    return textwrap.dedent(raw)
