"""Animals with a name and a sound, and small programs that show them off."""

from .core import Animal, BaseAnimal, Dog, FALLBACK_SOUND, DOG_SOUND
from .tools.cast import VariantMismatch, as_variant, as_dog
from . import programs

__version__ = "0.1.0"
