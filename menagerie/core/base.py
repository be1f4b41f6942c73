"""Abstract base class for all animals."""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Dict, Type
import warnings

from .mixins import AnimalText

def check_text(value, what: str) -> str:
    """Return ``value`` if it is a string; raise TypeError otherwise."""
    if not isinstance(value, str):
        raise TypeError(
            f"Parameter ``{what}`` must be a string; got {type(value).__name__}."
        )
    return value

class Animal(ABC, AnimalText):
    """Common capabilities of every animal: it has a name and it makes a sound.

    Code that only uses these capabilities should accept an ``Animal`` and never needs to
    know which variant it is handed.

    Parameters
    ----------
    name : str
        Name of the animal. Can be changed later by setting ``.name``.
    """

    _registry: Dict[str, Type[Animal]] = {}

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        name = cls.__name__
        if name in cls._registry:
            # Keep the first one so lookup by name stays stable.
            warnings.warn(
                f"Animal variant '{name}' is already registered by "
                f"{cls._registry[name].__module__}; ignoring the one in {cls.__module__}."
            )
            return
        cls._registry[name] = cls  # Add class to registry.

    def __init__(self, name: str):
        self.name = name

    # Methods to be implemented by subclasses.

    @property
    @abstractmethod
    def sound(self) -> str:
        """Sentence the animal says when it makes its sound."""
        ...

    # Methods directly implemented by base class.

    @property
    def name(self) -> str:
        """Name of the animal."""
        return self._name

    @name.setter
    def name(self, val: str) -> None:
        val = check_text(val, "name")
        if not val:
            warnings.warn("Animal is given an empty name.")
        self._name = val

    def print_name(self) -> None:
        """Write the name to standard output."""
        print(self.name)

    def make_sound(self) -> None:
        """Write the sound of this animal's variant to standard output."""
        print(self.sound)

    @classmethod
    def variants(cls) -> Dict[str, Type[Animal]]:
        """All registered animal variants, by class name."""
        return dict(cls._registry)
