"""Pick a sprite library for every part of a character."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

from .library import IdPart, LibraryDefinition

logger = logging.getLogger(__name__)


@dataclass
class LibrarySlot:
    """The library currently driving one part of a character."""

    part: IdPart
    library: Any = None


class CharacterResolver:
    """Maps each part slot to the library definition matching the character.

    Slots whose definition does not apply (wrong gender, race, part) keep the
    default library.
    """

    def __init__(
        self,
        gender: IdPart,
        race: IdPart,
        default_library: Any,
        slots: Iterable[LibrarySlot],
        definitions: Iterable[LibraryDefinition],
    ) -> None:
        self.gender = gender
        self.race = race
        self.default_library = default_library
        self.slots: List[LibrarySlot] = list(slots)
        self.definitions: List[LibraryDefinition] = list(definitions)
        self._slots_by_part: Dict[IdPart, LibrarySlot] = {}
        self._definitions_by_part: Dict[IdPart, LibraryDefinition] = {}
        self._resolved = False

    def validate(self) -> List[str]:
        problems: List[str] = []
        if self.default_library is None:
            problems.append("default library is not assigned")
        if self.gender.is_none():
            problems.append("gender is 'none'; libraries may resolve wrongly")
        if self.race.is_none():
            problems.append("race is 'none'; libraries may resolve wrongly")
        for problem in problems:
            logger.warning("Character resolver: %s", problem)
        return problems

    def refresh(self) -> None:
        self._build_index()
        self.clear_overrides()
        self.resolve_all()

    def _build_index(self) -> None:
        # Later entries for the same part win.
        self._definitions_by_part = {d.part: d for d in self.definitions if d is not None}
        self._slots_by_part = {s.part: s for s in self.slots if s is not None}

    def resolve_all(self) -> None:
        if self._resolved:
            return
        for part, slot in self._slots_by_part.items():
            definition = self._definitions_by_part.get(part)
            if definition is None:
                continue
            resolved = definition.resolve(self.gender, part, self.race)
            if resolved is not None:
                slot.library = resolved
                logger.debug("Slot %s -> %s", part.id_part(), definition.library_id)
        self._resolved = True

    def clear_overrides(self) -> None:
        for slot in self._slots_by_part.values():
            slot.library = self.default_library
        self._resolved = False

    def library_for(self, part: IdPart) -> Optional[Any]:
        slot = self._slots_by_part.get(part)
        return slot.library if slot is not None else None


__all__ = ["CharacterResolver", "LibrarySlot"]
