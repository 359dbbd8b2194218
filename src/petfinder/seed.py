"""The fixed roster every new shelter starts with."""

from __future__ import annotations

from petfinder.models import Pet
from petfinder.shelter import Shelter

_SEED = [
    ("Luna", "dog", "Golden Retriever"),
    ("Teddy", "dog", "Labrador"),
    ("Charlie", "dog", "Golden Retriever"),
    ("Aster", "dog", "Husky"),
    ("Goldie", "cat", "Shorthair"),
    ("Lisa", "cat", "Longhair"),
    ("Timmy", "cat", "Siamese"),
    ("Oliver", "cat", "Shorthair"),
]


def seed_pets() -> list[Pet]:
    return [Pet(name=name, type=type_, breed=breed) for name, type_, breed in _SEED]


def seeded_shelter(adopt_all_matches: bool = True) -> Shelter:
    return Shelter(seed_pets(), adopt_all_matches=adopt_all_matches)
