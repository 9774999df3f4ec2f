"""Character sprite assembly tools: grid sheet slicing and library resolution."""

from .library import IdEnum, IdPart, LibraryDefinition, make_library_id, populate_library
from .resolver import CharacterResolver, LibrarySlot
from .slicing import (
    Frame,
    RowEntry,
    RowSpec,
    Sheet,
    SliceConfigurationError,
    SliceResult,
    SpecialWindow,
    Specification,
    slice_sheet,
)

__version__ = "0.1.0"

__all__ = [
    "CharacterResolver",
    "Frame",
    "IdEnum",
    "IdPart",
    "LibraryDefinition",
    "LibrarySlot",
    "RowEntry",
    "RowSpec",
    "Sheet",
    "SliceConfigurationError",
    "SliceResult",
    "SpecialWindow",
    "Specification",
    "make_library_id",
    "populate_library",
    "slice_sheet",
]
