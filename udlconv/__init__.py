"""udlconv - converts UDL enum and error declarations to binding metadata."""

from .attributes import EnumAttributes, EnumFlags, interpret, parse_attributes
from .collector import InterfaceCollector
from .converters import (
    CONVERTERS,
    convert,
    convert_definitions,
    convert_enum,
    convert_enum_error,
    convert_enum_interface,
    convert_error_interface,
)
from .docstrings import convert_docstring
from .errors import (
    ConversionError,
    DuplicateVariantName,
    InheritanceNotSupported,
    MalformedAttributes,
    UnsupportedDefinition,
    UnsupportedMemberKind,
    UnsupportedVariant,
)
from .metadata import (
    EnumErrorMetadata,
    EnumMetadata,
    ErrorMetadata,
    FieldMetadata,
    Metadata,
    VariantMetadata,
)
from .options import ConverterOptions


def collect(
    definitions: list,
    crate_name: str,
    namespace: str = "",
    options: ConverterOptions | None = None,
) -> InterfaceCollector:
    """Convert a compilation unit's enum-like definitions into a fresh collector."""
    ci = InterfaceCollector(crate_name, namespace=namespace, options=options)
    convert_definitions(definitions, ci)
    return ci


__all__ = [
    "CONVERTERS",
    "ConversionError",
    "ConverterOptions",
    "DuplicateVariantName",
    "EnumAttributes",
    "EnumErrorMetadata",
    "EnumFlags",
    "EnumMetadata",
    "ErrorMetadata",
    "FieldMetadata",
    "InheritanceNotSupported",
    "InterfaceCollector",
    "MalformedAttributes",
    "Metadata",
    "UnsupportedDefinition",
    "UnsupportedMemberKind",
    "UnsupportedVariant",
    "VariantMetadata",
    "collect",
    "convert",
    "convert_definitions",
    "convert_docstring",
    "convert_enum",
    "convert_enum_error",
    "convert_enum_interface",
    "convert_error_interface",
    "interpret",
    "parse_attributes",
]
