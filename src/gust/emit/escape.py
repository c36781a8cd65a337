"""CSS identifier escaping for class selectors."""

from __future__ import annotations


def escape_class(name: str) -> str:
    """Escape *name* so ``"." + escape_class(name)`` selects it exactly.

    Follows the CSSOM ``CSS.escape`` rules: leading digits become code point
    escapes, a lone ``-`` is escaped, other punctuation gets a backslash.
    """
    out: list[str] = []
    for index, ch in enumerate(name):
        code = ord(ch)
        if code == 0:
            out.append("�")
        elif 0x01 <= code <= 0x1F or code == 0x7F:
            out.append(f"\\{code:x} ")
        elif ch.isdigit() and ch.isascii() and (
            index == 0 or (index == 1 and name[0] == "-")
        ):
            out.append(f"\\{code:x} ")
        elif index == 0 and ch == "-" and len(name) == 1:
            out.append("\\-")
        elif code >= 0x80 or ch in "-_" or (ch.isascii() and ch.isalnum()):
            out.append(ch)
        else:
            out.append("\\" + ch)
    return "".join(out)
