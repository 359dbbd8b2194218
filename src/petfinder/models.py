"""Shared data models used across the petfinder package."""

from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass
class Pet:
    """A single animal in the shelter.

    ``type`` is free-form; "dog" and "cat" are the conventional values.
    ``available`` only ever goes from True to False (on adoption).
    """

    name: str
    type: str
    breed: str
    available: bool = True

    def display(self) -> str:
        return f"{self.name}, {self.type}, {self.breed}"

    def to_dict(self) -> dict:
        return asdict(self)
