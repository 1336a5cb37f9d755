"""UDL syntax nodes consumed by the converters.

These mirror what the UDL parser hands over for `enum` and `interface`
definitions. The parser itself lives outside this package; tests and drivers
build these nodes directly.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar


# ============================================================
# POSITION
# ============================================================


@dataclass
class Pos:
    """Source position, 1-indexed. Line 0 means unknown."""

    line: int
    col: int


def pos_unknown() -> Pos:
    return Pos(0, 0)


# ============================================================
# ATTRIBUTES AND TYPES
# ============================================================


@dataclass
class ExtendedAttribute:
    """One entry of a `[...]` attribute list.

    args is None for the bare form (`[Error]`), and holds the identifiers of
    `[Name=foo]` or `[Traits=(Debug, Eq)]` otherwise.
    """

    name: str
    args: list[str] | None = None
    pos: Pos = field(default_factory=pos_unknown)

    def __str__(self) -> str:
        if self.args is None:
            return self.name
        if len(self.args) == 1:
            return self.name + "=" + self.args[0]
        return self.name + "=(" + ", ".join(self.args) + ")"


# WebIDL type keywords. UDL primitives such as `u32`, `string` or `timestamp`
# are plain identifiers to the grammar and can name a variant.
BUILTIN_TYPES: set[str] = {
    "any",
    "ArrayBuffer",
    "bigint",
    "boolean",
    "byte",
    "ByteString",
    "DOMString",
    "double",
    "float",
    "FrozenArray",
    "long",
    "object",
    "octet",
    "Promise",
    "record",
    "sequence",
    "short",
    "symbol",
    "undefined",
    "unrestricted",
    "USVString",
    "void",
}


@dataclass
class TypeRef:
    """A type expression: `Name`, `Name?`, `sequence<T>`, `record<K, V>`."""

    name: str
    nullable: bool = False
    args: list[TypeRef] = field(default_factory=list)
    pos: Pos = field(default_factory=pos_unknown)

    def is_plain_identifier(self) -> bool:
        """True for a bare identifier such as `Failure` or `u32`.

        Nullability is ignored: `Failure?` still names `Failure`.
        """
        return len(self.args) == 0 and self.name not in BUILTIN_TYPES

    def render(self) -> str:
        text = self.name
        if len(self.args) > 0:
            text += "<" + ", ".join(a.render() for a in self.args) + ">"
        if self.nullable:
            text += "?"
        return text


@dataclass
class Argument:
    """Operation argument: `type name`, `optional type name = default`, `type... name`."""

    name: str
    ty: TypeRef
    default: str | None = None
    optional: bool = False
    variadic: bool = False
    attributes: list[ExtendedAttribute] | None = None
    pos: Pos = field(default_factory=pos_unknown)


# ============================================================
# ENUM DEFINITIONS
# ============================================================


@dataclass
class EnumValue:
    """One string literal of an `enum` body."""

    value: str
    docstring: str | None = None
    pos: Pos = field(default_factory=pos_unknown)


@dataclass
class EnumDefinition:
    """enum Name { "a", "b" };"""

    identifier: str
    values: list[EnumValue] = field(default_factory=list)
    attributes: list[ExtendedAttribute] | None = None
    docstring: str | None = None
    pos: Pos = field(default_factory=pos_unknown)


# ============================================================
# INTERFACE MEMBERS
# ============================================================


class InterfaceMember:
    """Base for interface body members. `kind` names the member for diagnostics."""

    kind: ClassVar[str] = "member"


@dataclass
class OperationMember(InterfaceMember):
    """`ReturnType name(args);`. An enum interface variant is written `Name(args);`."""

    kind: ClassVar[str] = "operation"

    return_type: TypeRef | None
    identifier: str | None = None
    args: list[Argument] = field(default_factory=list)
    special: str | None = None  # getter, setter, deleter
    modifier: str | None = None  # static, stringifier
    attributes: list[ExtendedAttribute] | None = None
    docstring: str | None = None
    pos: Pos = field(default_factory=pos_unknown)


@dataclass
class AttributeMember(InterfaceMember):
    """`readonly attribute Type name;`"""

    kind: ClassVar[str] = "attribute"

    identifier: str
    ty: TypeRef
    readonly: bool = False
    pos: Pos = field(default_factory=pos_unknown)


@dataclass
class ConstMember(InterfaceMember):
    """`const Type NAME = value;`"""

    kind: ClassVar[str] = "const"

    identifier: str
    ty: TypeRef
    value: str
    pos: Pos = field(default_factory=pos_unknown)


@dataclass
class ConstructorMember(InterfaceMember):
    """`constructor(args);`"""

    kind: ClassVar[str] = "constructor"

    args: list[Argument] = field(default_factory=list)
    attributes: list[ExtendedAttribute] | None = None
    pos: Pos = field(default_factory=pos_unknown)


@dataclass
class StringifierMember(InterfaceMember):
    """Bare `stringifier;`"""

    kind: ClassVar[str] = "stringifier"

    pos: Pos = field(default_factory=pos_unknown)


@dataclass
class IterableMember(InterfaceMember):
    """`iterable<V>;` or `iterable<K, V>;`"""

    kind: ClassVar[str] = "iterable"

    value: TypeRef
    key: TypeRef | None = None
    pos: Pos = field(default_factory=pos_unknown)


@dataclass
class MaplikeMember(InterfaceMember):
    """`maplike<K, V>;`"""

    kind: ClassVar[str] = "maplike"

    key: TypeRef
    value: TypeRef
    readonly: bool = False
    pos: Pos = field(default_factory=pos_unknown)


@dataclass
class SetlikeMember(InterfaceMember):
    """`setlike<T>;`"""

    kind: ClassVar[str] = "setlike"

    element: TypeRef
    readonly: bool = False
    pos: Pos = field(default_factory=pos_unknown)


# ============================================================
# INTERFACE DEFINITIONS
# ============================================================


@dataclass
class InterfaceDefinition:
    """interface Name : Parent { members };"""

    identifier: str
    members: list[InterfaceMember] = field(default_factory=list)
    inheritance: str | None = None
    attributes: list[ExtendedAttribute] | None = None
    docstring: str | None = None
    pos: Pos = field(default_factory=pos_unknown)


Definition = EnumDefinition | InterfaceDefinition
