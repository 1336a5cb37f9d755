"""Converters package - UDL definitions to metadata records."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from ..errors import UnsupportedDefinition
from ..syntax import EnumDefinition, InterfaceDefinition
from .enum_ import (
    convert_enum,
    convert_enum_error,
    convert_enum_interface,
    convert_error_interface,
)
from .variants import (
    collect_literal_variants,
    collect_member_variants,
    convert_argument,
    convert_operation,
)

if TYPE_CHECKING:
    from ..collector import InterfaceCollector
    from ..metadata import Metadata
    from ..syntax import Definition

logger = logging.getLogger(__name__)

# (declaration shape, is_error) -> converter
CONVERTERS: dict[tuple[str, bool], Callable[..., "Metadata"]] = {
    ("enum", False): convert_enum,
    ("enum", True): convert_enum_error,
    ("interface", False): convert_enum_interface,
    ("interface", True): convert_error_interface,
}


def shape_of(node: Definition) -> str:
    """Declaration shape used as the first half of the dispatch key."""
    if isinstance(node, EnumDefinition):
        return "enum"
    if isinstance(node, InterfaceDefinition):
        return "interface"
    raise UnsupportedDefinition("cannot convert " + type(node).__name__ + " to an enum")


def convert(node: Definition, ci: InterfaceCollector, is_error: bool) -> Metadata:
    """Convert one enum-like definition. The caller decides whether it is an error."""
    return CONVERTERS[(shape_of(node), is_error)](node, ci)


def _attribute_names(node: Definition) -> set[str]:
    # Only selects the converter; the converter itself validates the list.
    if node.attributes is None:
        return set()
    return {attr.name for attr in node.attributes}


def convert_definitions(definitions: list[Definition], ci: InterfaceCollector) -> list[Metadata]:
    """Convert definitions in source order, registering each record in `ci`.

    The error flag comes from the attributes: `[Error]` on an enum or an
    interface; `[Enum]` marks an interface as a data enum. Interfaces with
    neither are objects and are rejected. The first failure propagates;
    records converted before it stay registered.
    """
    converted: list[Metadata] = []
    for node in definitions:
        shape = shape_of(node)
        names = _attribute_names(node)
        if shape == "interface" and "Error" not in names and "Enum" not in names:
            raise UnsupportedDefinition(
                "interface " + node.identifier + " is not an [Enum] or [Error] interface",
                node.pos,
            )
        item = convert(node, ci, "Error" in names)
        ci.register(item)
        converted.append(item)
    logger.debug("converted %d definitions for %s", len(converted), ci.module_path())
    return converted


__all__ = [
    "CONVERTERS",
    "collect_literal_variants",
    "collect_member_variants",
    "convert",
    "convert_argument",
    "convert_definitions",
    "convert_enum",
    "convert_enum_error",
    "convert_enum_interface",
    "convert_error_interface",
    "convert_operation",
    "shape_of",
]
