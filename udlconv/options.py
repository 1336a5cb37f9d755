"""Conversion options for one compilation unit."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ConverterOptions:
    """Switches read by the converters through `InterfaceCollector.options`.

    strict_variant_names: reject an enum that repeats a variant name. Off by
    default; UDL has always accepted `enum E { "a", "a" };`.
    """

    strict_variant_names: bool = False
