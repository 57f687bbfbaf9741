"""
neurostate.catalog
==================

Read-only registry of the substances that can be logged and the
neurotransmitter systems they act on.  The catalog is process-wide
configuration: it is built once at import time and never mutated.
Historical logs may reference substances that have since been removed, so
lookups through :meth:`SubstanceCatalog.get` return ``None`` rather than
raising; :meth:`SubstanceCatalog.require` is available where a hard failure
is wanted.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Optional, Tuple

from ..models import NeurotransmitterSystem, Substance
from .neurotransmitters import NEUROTRANSMITTER_SYSTEMS
from .substances import SUBSTANCES

LOGGER = logging.getLogger(__name__)


class CatalogError(Exception):
    """Raised when catalog definitions are inconsistent."""


class UnknownSubstanceError(CatalogError, KeyError):
    """Raised by :meth:`SubstanceCatalog.require` for unknown identifiers."""


class SubstanceCatalog:
    """Lookup table of substances and neurotransmitter systems."""

    def __init__(
        self,
        substances: Iterable[Substance],
        systems: Iterable[NeurotransmitterSystem],
    ) -> None:
        by_id: dict[str, Substance] = {}
        for substance in substances:
            if substance.id in by_id:
                raise CatalogError(f"Duplicate substance id '{substance.id}'")
            by_id[substance.id] = substance
        self._substances: Mapping[str, Substance] = MappingProxyType(by_id)

        self._systems: Tuple[NeurotransmitterSystem, ...] = tuple(systems)
        system_ids: set[str] = set()
        receptor_ids: set[str] = set()
        for system in self._systems:
            if system.id in system_ids:
                raise CatalogError(f"Duplicate neurotransmitter id '{system.id}'")
            system_ids.add(system.id)
            for site in system.receptors:
                if site.id in receptor_ids:
                    raise CatalogError(f"Receptor id '{site.id}' is owned by more than one system")
                receptor_ids.add(site.id)

        for substance in by_id.values():
            for interaction in substance.receptor_interactions:
                if interaction.receptor_id not in receptor_ids:
                    LOGGER.warning(
                        "Substance %s targets receptor %s which no neurotransmitter system owns",
                        substance.id,
                        interaction.receptor_id,
                    )

    @property
    def systems(self) -> Tuple[NeurotransmitterSystem, ...]:
        return self._systems

    def get(self, substance_id: str) -> Optional[Substance]:
        return self._substances.get(substance_id)

    def require(self, substance_id: str) -> Substance:
        try:
            return self._substances[substance_id]
        except KeyError as exc:
            raise UnknownSubstanceError(substance_id) from exc

    def ids(self) -> Tuple[str, ...]:
        return tuple(self._substances)

    def __contains__(self, substance_id: object) -> bool:
        return substance_id in self._substances

    def __iter__(self) -> Iterator[Substance]:
        return iter(self._substances.values())

    def __len__(self) -> int:
        return len(self._substances)


DEFAULT_CATALOG = SubstanceCatalog(SUBSTANCES, NEUROTRANSMITTER_SYSTEMS)


__all__ = [
    "CatalogError",
    "DEFAULT_CATALOG",
    "NEUROTRANSMITTER_SYSTEMS",
    "SUBSTANCES",
    "SubstanceCatalog",
    "UnknownSubstanceError",
]
