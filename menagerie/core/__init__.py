from .base import Animal
from .variants import BaseAnimal, Dog, FALLBACK_SOUND, DOG_SOUND
