"""
The concrete animals. ``BaseAnimal`` is the animal that does not know what it is; ``Dog``
overrides the sound and carries a collar.
"""

from __future__ import annotations

from .base import Animal, check_text

FALLBACK_SOUND = "I do not know what type of animal I am. :("
DOG_SOUND = "Woof!"


class BaseAnimal(Animal):
    """Animal of unknown type."""

    sound = property(lambda self: FALLBACK_SOUND)


class Dog(Animal):
    """A dog.

    Parameters
    ----------
    name : str
        Name of the dog.
    collar_brand : str
        Brand of the collar the dog is wearing.
    """

    def __init__(self, name: str, collar_brand: str):
        super().__init__(name)
        self.collar_brand = collar_brand

    sound = property(lambda self: DOG_SOUND)

    @property
    def collar_brand(self) -> str:
        return self._collar_brand

    @collar_brand.setter
    def collar_brand(self, val: str) -> None:
        self._collar_brand = check_text(val, "collar_brand")

    def mark_territory(self) -> None:
        print(f"{self.name} marked his territory!")
