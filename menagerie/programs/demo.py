"""
Small programs that show off the animals. Each one prints to standard output, ignores any
command line arguments, and returns the exit code.
"""

from typing import Callable, Dict

from ..core import Animal, BaseAnimal, Dog
from ..tools.cast import as_dog


def run_polymorphic_animal_funcs(animal: Animal) -> None:
    """Print name and sound of any animal, whatever its variant."""
    animal.print_name()
    animal.make_sound()


def basic() -> int:
    """Call the methods directly, then downcast to get at the collar."""
    unknown_animal = BaseAnimal("Bob the unknown")
    unknown_animal.print_name()
    unknown_animal.make_sound()

    polymorphic_dog: Animal = Dog("Cozmo the dog", "Barky")
    polymorphic_dog.print_name()
    polymorphic_dog.make_sound()  # Woof!, not the fallback
    print(as_dog(polymorphic_dog).collar_brand)
    return 0


def with_helper() -> int:
    """Let a helper that only knows about Animal do the common work."""
    unknown_animal: Animal = BaseAnimal("Bob the unknown")
    cozmo: Animal = Dog("Cozmo the dog", "Barky")

    run_polymorphic_animal_funcs(unknown_animal)
    run_polymorphic_animal_funcs(cozmo)

    print()
    print(unknown_animal.name)
    print(as_dog(cozmo).collar_brand)
    as_dog(cozmo).mark_territory()
    return 0


def interface() -> int:
    """Same animals, first through direct calls and a reused handle, then the way that
    keeps the concrete types: create them as themselves and hand them to the helper."""
    unknown_animal = BaseAnimal("Bob the unknown")
    unknown_animal.print_name()
    unknown_animal.make_sound()

    polymorphic_animal: Animal = unknown_animal
    polymorphic_animal.print_name()
    polymorphic_animal.make_sound()

    polymorphic_animal = Dog("Cozmo the dog", "Barky")
    polymorphic_animal.print_name()
    polymorphic_animal.make_sound()

    print("\n***Proper way***")
    unknown_animal = BaseAnimal("Bob the unknown")
    run_polymorphic_animal_funcs(unknown_animal)
    cozmo = Dog("Cozmo the dog", "Barky")
    run_polymorphic_animal_funcs(cozmo)
    print(cozmo.collar_brand)  # no downcast needed
    return 0


PROGRAMS: Dict[str, Callable[[], int]] = {
    "basic": basic,
    "with_helper": with_helper,
    "interface": interface,
}
