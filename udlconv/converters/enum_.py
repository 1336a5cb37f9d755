"""Enum and error declaration converters.

Four entry points, one per surface form:

| Form                 | Function                  | Record                     |
|----------------------|---------------------------|----------------------------|
| enum                 | convert_enum              | EnumMetadata               |
| [Error] enum         | convert_enum_error        | EnumErrorMetadata, flat    |
| [Enum] interface     | convert_enum_interface    | EnumMetadata               |
| [Error] interface    | convert_error_interface   | EnumErrorMetadata, not flat|

Each either returns a complete record or raises; nothing is registered here.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..attributes import interpret
from ..docstrings import convert_docstring
from ..errors import InheritanceNotSupported
from ..metadata import EnumErrorMetadata, EnumMetadata
from ..syntax import EnumDefinition, InterfaceDefinition
from .variants import check_variant_names, collect_literal_variants, collect_member_variants

if TYPE_CHECKING:
    from ..collector import InterfaceCollector

logger = logging.getLogger(__name__)


def _enum_from_literals(node: EnumDefinition, ci: InterfaceCollector) -> EnumMetadata:
    flags = interpret(node.attributes)
    module_path = ci.module_path()
    variants = collect_literal_variants(node.values, ci)
    check_variant_names(node.identifier, variants, ci, node.pos)
    return EnumMetadata(
        module_path=module_path,
        name=node.identifier,
        variants=variants,
        non_exhaustive=flags.non_exhaustive,
        docstring=convert_docstring(node.docstring),
    )


def _enum_from_members(node: InterfaceDefinition, ci: InterfaceCollector) -> EnumMetadata:
    if node.inheritance is not None:
        raise InheritanceNotSupported(
            "interface inheritance is not supported for enum interfaces", node.pos
        )
    flags = interpret(node.attributes)
    module_path = ci.module_path()
    variants = collect_member_variants(node.members, ci)
    check_variant_names(node.identifier, variants, ci, node.pos)
    return EnumMetadata(
        module_path=module_path,
        name=node.identifier,
        variants=variants,
        non_exhaustive=flags.non_exhaustive,
        docstring=convert_docstring(node.docstring),
    )


def convert_enum(node: EnumDefinition, ci: InterfaceCollector) -> EnumMetadata:
    """`enum Name { "a", "b" };`"""
    e = _enum_from_literals(node, ci)
    logger.debug("converted enum %s (%d variants)", e.name, len(e.variants))
    return e


def convert_enum_error(node: EnumDefinition, ci: InterfaceCollector) -> EnumErrorMetadata:
    """`[Error] enum Name { ... };`. Literal variants never carry data, so always flat."""
    e = _enum_from_literals(node, ci)
    logger.debug("converted flat error %s (%d variants)", e.name, len(e.variants))
    return EnumErrorMetadata(enum_=e, is_flat=True)


def convert_enum_interface(node: InterfaceDefinition, ci: InterfaceCollector) -> EnumMetadata:
    """`[Enum] interface Name { A(); B(string s); };`"""
    e = _enum_from_members(node, ci)
    logger.debug("converted enum interface %s (%d variants)", e.name, len(e.variants))
    return e


def convert_error_interface(
    node: InterfaceDefinition, ci: InterfaceCollector
) -> EnumErrorMetadata:
    """`[Error] interface Name { ... };`

    Never flat, even when no variant declares fields: the interface syntax is
    how a UDL author asks for data-carrying error variants.
    """
    e = _enum_from_members(node, ci)
    logger.debug("converted error interface %s (%d variants)", e.name, len(e.variants))
    return EnumErrorMetadata(enum_=e, is_flat=False)
