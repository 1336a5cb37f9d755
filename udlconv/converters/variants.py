"""Variant collection for enum-like declarations.

Literal-list form (`enum E { "a", "b" };`): each string literal becomes a
variant with no data.

Member-list form (`[Enum] interface E { A(); B(string reason); };`): each
member must be an operation. The UDL grammar reads `B(string reason)` as an
anonymous operation returning `B`, so the return type becomes the variant
name and the arguments become its fields.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..docstrings import convert_docstring
from ..errors import DuplicateVariantName, UnsupportedMemberKind, UnsupportedVariant
from ..metadata import FieldMetadata, VariantMetadata
from ..syntax import Argument, EnumValue, InterfaceMember, OperationMember, Pos

if TYPE_CHECKING:
    from ..collector import InterfaceCollector


def convert_argument(arg: Argument, ci: InterfaceCollector) -> FieldMetadata:
    """Operation argument -> variant field."""
    if arg.variadic:
        raise UnsupportedVariant("variadic arguments not supported", arg.pos)
    if arg.default is not None:
        raise UnsupportedVariant(
            "enum interface variant fields must not have default values", arg.pos
        )
    if arg.attributes is not None and len(arg.attributes) > 0:
        raise UnsupportedVariant(
            "enum interface variant fields must not have attributes", arg.pos
        )
    return FieldMetadata(name=arg.name, ty=arg.ty.render(), default=None, docstring=None)


def convert_operation(op: OperationMember, ci: InterfaceCollector) -> VariantMetadata:
    """`Name(args);` -> variant `Name` with one field per argument."""
    if op.special is not None:
        raise UnsupportedVariant("special operations not supported", op.pos)
    if op.modifier == "stringifier":
        raise UnsupportedVariant("stringifiers are not supported", op.pos)
    if op.identifier is not None:
        raise UnsupportedVariant("enum interface members must not have a method name", op.pos)
    if op.return_type is None or not op.return_type.is_plain_identifier():
        raise UnsupportedVariant(
            "enum interface members must have plain identifiers as names", op.pos
        )
    fields = tuple(convert_argument(arg, ci) for arg in op.args)
    return VariantMetadata(
        name=op.return_type.name,
        discr=None,
        fields=fields,
        docstring=convert_docstring(op.docstring),
    )


def collect_literal_variants(
    values: list[EnumValue], ci: InterfaceCollector
) -> tuple[VariantMetadata, ...]:
    """String literals -> variants, in order. Repeated literals are kept."""
    variants: list[VariantMetadata] = []
    for v in values:
        variants.append(
            VariantMetadata(
                name=v.value,
                discr=None,
                fields=(),
                docstring=convert_docstring(v.docstring),
            )
        )
    return tuple(variants)


def collect_member_variants(
    members: list[InterfaceMember], ci: InterfaceCollector
) -> tuple[VariantMetadata, ...]:
    """Interface members -> variants, in order. Stops at the first bad member."""
    variants: list[VariantMetadata] = []
    for member in members:
        if not isinstance(member, OperationMember):
            raise UnsupportedMemberKind(member.kind, getattr(member, "pos", None))
        variants.append(convert_operation(member, ci))
    return tuple(variants)


def check_variant_names(
    enum_name: str,
    variants: tuple[VariantMetadata, ...],
    ci: InterfaceCollector,
    pos: Pos | None = None,
) -> None:
    """Reject repeated names when the unit asked for strict variant names."""
    if not ci.options.strict_variant_names:
        return
    seen: set[str] = set()
    for v in variants:
        if v.name in seen:
            raise DuplicateVariantName(enum_name, v.name, pos)
        seen.add(v.name)
