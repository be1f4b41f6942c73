from .text import AnimalText
