"""Per-compilation-unit conversion state."""

from __future__ import annotations

import logging

from .metadata import Metadata
from .options import ConverterOptions

logger = logging.getLogger(__name__)


class InterfaceCollector:
    """Module path and accumulated items of one compilation unit.

    One instance per compilation pass. Converters read `module_path()` and
    `options`; the definition driver appends finished records with
    `register()`. Items are never removed. Not safe for concurrent use.
    """

    def __init__(
        self,
        crate_name: str,
        namespace: str = "",
        options: ConverterOptions | None = None,
    ) -> None:
        self.crate_name: str = crate_name
        self.namespace: str = namespace
        self.options: ConverterOptions = options if options is not None else ConverterOptions()
        self.items: list[Metadata] = []

    def module_path(self) -> str:
        """Path generators use to locate items: the crate name, not the UDL namespace."""
        return self.crate_name

    def register(self, item: Metadata) -> None:
        """Append a converted record. Duplicates are kept."""
        logger.debug("registering %s %s in %s", type(item).__name__, item.name, self.crate_name)
        self.items.append(item)

    def __len__(self) -> int:
        return len(self.items)
