"""Shelter: the in-memory roster and all query/mutation operations on it."""

from __future__ import annotations

import logging
from typing import Iterable

from petfinder.models import Pet

logger = logging.getLogger(__name__)


class Shelter:
    def __init__(
        self,
        pets: Iterable[Pet] | None = None,
        adopt_all_matches: bool = True,
    ):
        self._pets: list[Pet] = list(pets) if pets is not None else []
        self.adopt_all_matches = adopt_all_matches

    def __len__(self) -> int:
        return len(self._pets)

    # ------------------------------------------------------------------ #
    # Mutations
    # ------------------------------------------------------------------ #

    def add(self, pet: Pet) -> None:
        """Append *pet* to the roster. Names are not checked for uniqueness."""
        self._pets.append(pet)
        logger.debug("Added %s", pet.display())

    def adopt(self, name: str | None) -> bool:
        """Mark available pets named *name* (case-insensitive) as adopted.

        Every available pet sharing the name is adopted in one call unless
        ``adopt_all_matches`` is off, in which case only the first is.
        Returns False, with nothing changed, when no available pet matches.
        """
        if not name:
            return False
        wanted = name.lower()
        adopted = False
        for pet in self._pets:
            if pet.available and pet.name.lower() == wanted:
                pet.available = False
                adopted = True
                logger.debug("Adopted %s", pet.display())
                if not self.adopt_all_matches:
                    break
        if not adopted:
            logger.debug("No available pet named %r", name)
        return adopted

    # ------------------------------------------------------------------ #
    # Queries
    # ------------------------------------------------------------------ #

    def search(self, type: str | None = None, breed: str | None = None) -> list[Pet]:
        """Available pets matching *type* and *breed*, in roster order.

        Matching is exact and case-sensitive. A filter that is None or empty
        matches anything, so ``search()`` is the same as ``list_available()``.
        """
        return [
            pet
            for pet in self._pets
            if pet.available
            and (not type or pet.type == type)
            and (not breed or pet.breed == breed)
        ]

    def list_available(self) -> list[Pet]:
        return [pet for pet in self._pets if pet.available]
