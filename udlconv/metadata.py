"""Language-neutral metadata records.

These are the records handed to the binding generators. Their field shapes are
the contract every generator depends on, so each docstring states the
invariants a generator may rely on.

Architecture:
    UDL syntax -> converters -> [metadata] -> InterfaceCollector.items -> generators

All records are frozen: once a converter returns one it is never mutated.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Literal


# ============================================================
# VARIANTS
# ============================================================


@dataclass(frozen=True)
class FieldMetadata:
    """Data carried by an enum variant.

    Only produced by the `[Enum] interface` form, where `Name(type arg)`
    declares a variant with a field per argument.

    Invariants:
    - ty is the type expression as written (e.g. `sequence<string>?`); it is
      not resolved or validated here
    - default is always None for variant fields
    """

    name: str
    ty: str
    default: object | None = None
    docstring: str | None = None


@dataclass(frozen=True)
class VariantMetadata:
    """Single variant of an enumeration.

    | Target  | Representation                     |
    |---------|------------------------------------|
    | Kotlin  | enum entry / sealed subclass       |
    | Python  | Enum member / nested class         |
    | Swift   | enum case                          |

    Invariants:
    - discr is None unless an explicit discriminant was declared
    - fields is empty for variants declared as string literals
    - docstring is None when no doc comment was attached, never ""
    """

    name: str
    discr: int | None = None
    fields: tuple[FieldMetadata, ...] = ()
    docstring: str | None = None


# ============================================================
# TOP-LEVEL RECORDS
# ============================================================


@dataclass(frozen=True)
class EnumMetadata:
    """Enumeration type.

    Invariants:
    - variants are in declaration order; generators derive discriminants
      from position
    - variant names may repeat; each occurrence is its own variant
    - module_path is the crate the declaration belongs to, not the UDL
      namespace
    """

    module_path: str
    name: str
    variants: tuple[VariantMetadata, ...] = ()
    non_exhaustive: bool = False
    docstring: str | None = None

    def is_flat(self) -> bool:
        """True when no variant carries data."""
        return all(len(v.fields) == 0 for v in self.variants)


@dataclass(frozen=True)
class ErrorMetadata:
    """Error type. Abstract: tagged by `kind`."""

    kind: ClassVar[Literal["enum"]]

    @property
    def name(self) -> str:
        raise NotImplementedError

    @property
    def module_path(self) -> str:
        raise NotImplementedError


@dataclass(frozen=True)
class EnumErrorMetadata(ErrorMetadata):
    """Error type backed by an enumeration.

    is_flat:
    - True: variants carry no data; generators may expose the error as a
      plain message-bearing exception per variant
    - False: variants may carry fields and are lowered like a data enum

    Invariants:
    - is_flat is True for `[Error] enum` and False for `[Error] interface`,
      whatever the variants actually hold
    """

    kind: ClassVar[Literal["enum"]] = "enum"

    enum_: EnumMetadata
    is_flat: bool

    @property
    def name(self) -> str:
        return self.enum_.name

    @property
    def module_path(self) -> str:
        return self.enum_.module_path


Metadata = EnumMetadata | ErrorMetadata
"""Anything a converter produces and the collector stores."""
