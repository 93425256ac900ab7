from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Callable

from yaml.nodes import ScalarNode
from yaml.resolver import Resolver

"""Shared escaping for free-text journey values.

Both generators render user-supplied text (actions, responses, owners,
notes) into a structured syntax. One predicate decides whether a value
needs quoting and one function escapes it; the per-syntax differences live
in a TextSyntax record.
"""

__all__ = [
    "TextSyntax",
    "YAML",
    "TS_SINGLE_QUOTED",
    "needs_escaping",
    "escape",
    "scalar",
]


@dataclass(frozen=True)
class TextSyntax:
    """Escaping rules for one output syntax.

    Attributes:
        name: Label for debugging
        quote: Quote character used when a value is wrapped
        special_chars: Any of these anywhere in a value forces quoting
        leading_markers: Any of these as first character forces quoting
        escaped_chars: Characters backslash-escaped inside the quotes
        unsafe_chars: Characters that force quoting and are written as
            escape sequences (named_escapes, else a hex escape)
        named_escapes: Escape sequence for specific unsafe characters
        loads_as_non_string: True for values that would not load back as a
            plain string (booleans, nulls, numbers); those are quoted too
    """
    name: str
    quote: str
    special_chars: frozenset[str]
    leading_markers: frozenset[str] = frozenset()
    escaped_chars: frozenset[str] = frozenset()
    unsafe_chars: re.Pattern[str] | None = None
    named_escapes: dict[str, str] = field(default_factory=dict)
    loads_as_non_string: Callable[[str], bool] | None = None


_YAML_RESOLVER = Resolver()
_YAML_STR_TAG = "tag:yaml.org,2002:str"


def _yaml_resolves_to_non_string(value: str) -> bool:
    # Ask PyYAML which implicit tag a plain scalar would get (bool, int,
    # null, timestamp, merge, value, ...).
    return _YAML_RESOLVER.resolve(ScalarNode, value, (True, False)) != _YAML_STR_TAG


# Control characters, line breaks and the non-printable ranges of YAML 1.1.
_YAML_UNSAFE = re.compile(r"[\x00-\x1f\x7f-\x9f\u2028\u2029\ud800-\udfff\ufeff\ufffe\uffff]")

YAML = TextSyntax(
    name="yaml",
    quote='"',
    special_chars=frozenset(":#[]{}&*!|>'\"`,@"),
    leading_markers=frozenset("-?%"),
    escaped_chars=frozenset('\\"'),
    unsafe_chars=_YAML_UNSAFE,
    named_escapes={
        "\x00": "\\0",
        "\t": "\\t",
        "\n": "\\n",
        "\r": "\\r",
        "\x1b": "\\e",
        "\x85": "\\N",
        "\u2028": "\\L",
        "\u2029": "\\P",
    },
    loads_as_non_string=_yaml_resolves_to_non_string,
)

# Content of a '...' string literal in TypeScript; always wrapped by the caller.
TS_SINGLE_QUOTED = TextSyntax(
    name="ts-single-quoted",
    quote="'",
    special_chars=frozenset("'\\"),
    escaped_chars=frozenset("'\\"),
    # JavaScript line terminators cannot appear raw in a string literal.
    unsafe_chars=re.compile(r"[\r\n\u2028\u2029]"),
    named_escapes={"\r": "\\r", "\n": "\\n"},
)


def _hex_escape(ch: str) -> str:
    code = ord(ch)
    if code <= 0xFF:
        return f"\\x{code:02X}"
    if code <= 0xFFFF:
        return f"\\u{code:04X}"
    return f"\\U{code:08X}"


def needs_escaping(value: str, syntax: TextSyntax) -> bool:
    """Return True if value cannot be emitted verbatim in syntax."""
    if value == "" or value != value.strip():
        return True
    if any(ch in syntax.special_chars for ch in value):
        return True
    if value[0] in syntax.leading_markers:
        return True
    if syntax.unsafe_chars is not None and syntax.unsafe_chars.search(value):
        return True
    if syntax.loads_as_non_string is not None and syntax.loads_as_non_string(value):
        return True
    return False


def escape(value: str, syntax: TextSyntax) -> str:
    """Escape the characters syntax cannot hold verbatim inside its quotes."""
    out: list[str] = []
    for ch in value:
        if ch in syntax.escaped_chars:
            out.append(f"\\{ch}")
        elif syntax.unsafe_chars is not None and syntax.unsafe_chars.match(ch):
            out.append(syntax.named_escapes.get(ch) or _hex_escape(ch))
        else:
            out.append(ch)
    return "".join(out)


def scalar(value: str, syntax: TextSyntax) -> str:
    """Render value as-is when safe, otherwise quoted and escaped."""
    if not needs_escaping(value, syntax):
        return value
    return f"{syntax.quote}{escape(value, syntax)}{syntax.quote}"
