"""Narrow an Animal to one of its concrete variants."""

from __future__ import annotations
from typing import Type, TypeVar, Union

from ..core import Animal, Dog

T = TypeVar("T", bound=Animal)


class VariantMismatch(TypeError):
    """Raised when an animal is not of the variant it is asked to be."""


def get_variant(variant: Union[str, Type[Animal]]) -> Type[Animal]:
    """Look up a variant by its class name, or check that ``variant`` is one.

    Parameters
    ----------
    variant : str or Animal subclass
        Class name (e.g. 'Dog') of the variant, or the class itself.

    Returns
    -------
    Animal subclass
    """
    if isinstance(variant, str):
        try:
            return Animal.variants()[variant]
        except KeyError:
            known = ", ".join(Animal.variants())
            raise KeyError(
                f"No animal variant '{variant}'; known are: {known}."
            ) from None
    if isinstance(variant, type) and issubclass(variant, Animal):
        return variant
    raise TypeError("Parameter ``variant`` must be a string or Animal subclass.")


def as_variant(animal: Animal, variant: Union[str, Type[T]]) -> T:
    """Return ``animal`` typed as ``variant``, after checking that it actually is one.

    Parameters
    ----------
    animal : Animal
        The animal to narrow.
    variant : str or Animal subclass
        The wanted variant, or its class name.

    Returns
    -------
    Animal
        The same object that was passed in.

    Raises
    ------
    VariantMismatch
        If ``animal`` is not an instance of ``variant``.
    """
    cls = get_variant(variant)
    if not isinstance(animal, cls):
        raise VariantMismatch(
            f"Expected a {cls.__name__} but got a {type(animal).__name__}."
        )
    return animal


def as_dog(animal: Animal) -> Dog:
    """Return ``animal`` typed as a Dog; raise VariantMismatch if it is not a dog."""
    return as_variant(animal, Dog)
