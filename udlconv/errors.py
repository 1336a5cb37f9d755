"""Conversion errors.

Every failure in this package is fatal for the declaration being converted and
is raised to the caller. Nothing here is recovered locally.
"""

from __future__ import annotations

from .syntax import Pos, pos_unknown


class ConversionError(Exception):
    """Error while converting a declaration to metadata."""

    def __init__(self, msg: str, pos: Pos | None = None):
        if pos is None:
            pos = pos_unknown()
        self.msg: str = msg
        self.line: int = pos.line
        self.col: int = pos.col
        super().__init__(msg)

    def diagnostic(self) -> str:
        """Render as `error:line:col: [convert] msg`, the driver's report format."""
        return "error:" + str(self.line) + ":" + str(self.col) + ": [convert] " + self.msg


class InheritanceNotSupported(ConversionError):
    """An enum-like interface declared a parent interface."""


class UnsupportedMemberKind(ConversionError):
    """An enum interface body held something other than an operation."""

    def __init__(self, kind: str, pos: Pos | None = None):
        self.kind: str = kind
        super().__init__(
            "interface member type " + kind + " not supported in enum interface", pos
        )


class MalformedAttributes(ConversionError):
    """Extended attribute list is invalid or not allowed here."""


class UnsupportedVariant(ConversionError):
    """An operation member cannot be read as an enum variant."""


class DuplicateVariantName(ConversionError):
    """Two variants share a name (only with strict_variant_names)."""

    def __init__(self, enum_name: str, variant_name: str, pos: Pos | None = None):
        self.enum_name: str = enum_name
        self.variant_name: str = variant_name
        super().__init__(
            "duplicate variant '" + variant_name + "' in enum '" + enum_name + "'", pos
        )


class UnsupportedDefinition(ConversionError):
    """Definition is not one of the enum-like surface forms."""
