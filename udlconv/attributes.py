"""Extended attribute interpretation.

Two layers:

- `parse_attributes` checks the attribute grammar: known names, no
  duplicates, correct arity. Anything else is `MalformedAttributes`.
- `EnumAttributes` / `interpret` validate that the parsed attributes are
  allowed on an enum-like declaration and expose them as flags.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from .errors import MalformedAttributes
from .syntax import ExtendedAttribute

# Attribute name -> arity. "none" is the bare form, "one" is `Name=ident`,
# "list" is `Name=(a, b)` or `Name=ident`.
ARITY: dict[str, str] = {
    "ByRef": "none",
    "Enum": "none",
    "Error": "none",
    "NonExhaustive": "none",
    "Remote": "none",
    "Async": "none",
    "Trait": "none",
    "WithForeign": "none",
    "Custom": "none",
    "Name": "one",
    "Self": "one",
    "External": "one",
    "Throws": "one",
    "Traits": "list",
}

ENUM_ATTRIBUTES: set[str] = {"Enum", "Error", "NonExhaustive"}


def _check_arity(attr: ExtendedAttribute) -> None:
    arity = ARITY[attr.name]
    if arity == "none":
        if attr.args is not None:
            raise MalformedAttributes(attr.name + " does not take arguments", attr.pos)
        return
    if attr.args is None or len(attr.args) == 0:
        raise MalformedAttributes(attr.name + " requires an argument", attr.pos)
    if arity == "one" and len(attr.args) != 1:
        raise MalformedAttributes(attr.name + " takes exactly one argument", attr.pos)


def parse_attributes(
    attributes: list[ExtendedAttribute] | None,
    validator: Callable[[ExtendedAttribute], None],
) -> list[ExtendedAttribute]:
    """Check the attribute grammar, then run `validator` over each attribute.

    Returns the attributes in source order. A missing list is the same as an
    empty one.
    """
    if attributes is None:
        return []
    seen: set[str] = set()
    for attr in attributes:
        text = str(attr)
        if text in seen:
            raise MalformedAttributes("duplicated extended attribute: " + text, attr.pos)
        seen.add(text)
    for attr in attributes:
        if attr.name not in ARITY:
            raise MalformedAttributes("extended attribute not supported: " + attr.name, attr.pos)
        _check_arity(attr)
    for attr in attributes:
        validator(attr)
    return list(attributes)


def _validate_enum_attr(attr: ExtendedAttribute) -> None:
    # `Enum` is accepted since the same list may come from an `[Enum] interface`.
    if attr.name not in ENUM_ATTRIBUTES:
        raise MalformedAttributes(attr.name + " not supported for enums", attr.pos)


class EnumAttributes:
    """Attributes of an enum, `[Error] enum`, or `[Enum]`/`[Error]` interface."""

    def __init__(self, attrs: list[ExtendedAttribute]) -> None:
        self.attrs: list[ExtendedAttribute] = attrs

    @classmethod
    def from_list(cls, attributes: list[ExtendedAttribute] | None) -> EnumAttributes:
        return cls(parse_attributes(attributes, _validate_enum_attr))

    def _contains(self, name: str) -> bool:
        for attr in self.attrs:
            if attr.name == name:
                return True
        return False

    def contains_non_exhaustive_attr(self) -> bool:
        return self._contains("NonExhaustive")


@dataclass(frozen=True)
class EnumFlags:
    """Flags derived from an enum-like declaration's attributes.

    Whether the declaration is an error is decided by the caller, not read
    from here.
    """

    non_exhaustive: bool = False


def interpret(attributes: list[ExtendedAttribute] | None) -> EnumFlags:
    """Attribute list -> flags. Raises MalformedAttributes."""
    parsed = EnumAttributes.from_list(attributes)
    return EnumFlags(non_exhaustive=parsed.contains_non_exhaustive_attr())
