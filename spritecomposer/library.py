"""Sprite library definitions keyed by gender, part, race and colour.

A definition says which sprite library a character should use for one body
part or equipment slot, and for which genders and races that holds.  The
dimensions are plain enums; anything implementing :class:`IdPart` works.
By convention the member with value ``0`` means "none" and never matches.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from functools import lru_cache
from typing import Any, Dict, FrozenSet, List, Mapping, Optional, Protocol, Tuple

logger = logging.getLogger(__name__)


class IdPart(Protocol):
    def id_part(self) -> str:
        """Lower-case fragment used to build library ids."""

    def is_none(self) -> bool:
        """``True`` for the "none"/unset value."""


class IdEnum(Enum):
    """Enum base implementing :class:`IdPart`."""

    def id_part(self) -> str:
        return self.name.lower().replace(" ", "_")

    def is_none(self) -> bool:
        return self.value == 0


@lru_cache(maxsize=1024)
def make_library_id(gender: IdPart, part: IdPart, variant_name: str, color: IdPart) -> str:
    return f"{gender.id_part()}_{part.id_part()}_{variant_name}_{color.id_part()}"


@dataclass(frozen=True)
class LibraryDefinition:
    library: Any
    variant_name: str
    gender: IdPart
    part: IdPart
    color: IdPart
    races: FrozenSet[IdPart] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        object.__setattr__(self, "races", frozenset(self.races))

    @property
    def library_id(self) -> str:
        return make_library_id(self.gender, self.part, self.variant_name, self.color)

    def validate(self) -> List[str]:
        """Return (and log) configuration warnings for this definition."""

        problems: List[str] = []
        if self.gender.is_none():
            problems.append("gender is set to 'none'")
        if self.color.is_none():
            problems.append("colour permutation is set to 'none'")
        if not self.races or any(race.is_none() for race in self.races):
            problems.append("no races defined or 'none' among them")
        if self.part.is_none():
            problems.append("part is set to 'none'")
        for problem in problems:
            logger.warning("Library definition %s: %s", self.library_id, problem)
        return problems

    def gender_ok(self, gender: IdPart) -> bool:
        return not gender.is_none() and gender == self.gender

    def race_ok(self, race: IdPart) -> bool:
        return not race.is_none() and race in self.races

    def part_ok(self, part: IdPart) -> bool:
        return not part.is_none() and part == self.part

    def is_applicable(self, gender: IdPart, part: IdPart, race: IdPart) -> bool:
        gender_ok = self.gender_ok(gender)
        part_ok = self.part_ok(part)
        race_ok = self.race_ok(race)
        if not gender_ok:
            logger.error("Gender mismatch: %s != %s on library %s", gender, self.gender, self.library_id)
        if not part_ok:
            logger.error("Part mismatch: %s != %s on library %s", part, self.part, self.library_id)
        if not race_ok:
            logger.error(
                "Race mismatch: %s not in %s on library %s",
                race,
                sorted(r.id_part() for r in self.races),
                self.library_id,
            )
        return gender_ok and part_ok and race_ok

    def resolve(self, gender: IdPart, part: IdPart, race: IdPart) -> Optional[Any]:
        """Return the library when it applies to the given character, else ``None``."""

        if self.library is None:
            return None
        if not self.is_applicable(gender, part, race):
            return None
        return self.library


SpriteLibrary = Dict[str, Dict[str, Any]]


def populate_library(
    template: Mapping[str, Mapping[str, Any]],
    sprites: Mapping[str, Any],
) -> Tuple[SpriteLibrary, int]:
    """Build a new library shaped like ``template`` from freshly sliced sprites.

    Every ``category -> label`` slot takes the sprite whose name equals the
    label; labels with no matching sprite keep the template's entry.
    Returns the library and the number of labels filled from ``sprites``.
    """

    library: SpriteLibrary = {}
    replaced = 0
    for category, labels in template.items():
        slot: Dict[str, Any] = {}
        for label, fallback in labels.items():
            if label in sprites:
                slot[label] = sprites[label]
                replaced += 1
            else:
                slot[label] = fallback
        library[category] = slot
    logger.info("Populated library: %d of %d labels from the new sheet", replaced, sum(len(v) for v in library.values()))
    return library, replaced


__all__ = [
    "IdEnum",
    "IdPart",
    "LibraryDefinition",
    "SpriteLibrary",
    "make_library_id",
    "populate_library",
]
