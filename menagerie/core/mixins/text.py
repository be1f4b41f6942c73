"""String representation of Animal objects."""
from __future__ import annotations
from typing import TYPE_CHECKING, Dict, Iterable
import colorama


if TYPE_CHECKING:
    from ..base import Animal

HEADERCOLOR = colorama.Style.BRIGHT + colorama.Fore.CYAN


def _remove_color(text: str) -> str:
    """Remove all color from text."""
    for color in [colorama.Style.RESET_ALL, HEADERCOLOR]:
        text = text.replace(color, "")
    return text


def _attributes(animal: Animal) -> Dict[str, str]:
    """Stored attributes of the animal, with the leading underscore removed."""
    return {key.lstrip("_"): val for key, val in vars(animal).items()}


def _body(animal: Animal) -> Iterable[str]:
    """Info about the name, sound and any other attribute of the animal."""
    attrs = _attributes(animal)
    lines = [f". name: {attrs.pop('name')}", f". sound: {animal.sound}"]
    lines.extend(f". {key.replace('_', ' ')}: {val}" for key, val in attrs.items())
    return lines


def animal_as_string(animal: Animal, color: bool) -> str:
    header = f"{type(animal).__name__} object."
    lines = [HEADERCOLOR + header + colorama.Style.RESET_ALL]
    lines.extend(_body(animal))
    txt = "\n".join(lines)
    return txt if color else _remove_color(txt)


def animal_as_repr(animal: Animal) -> str:
    args = ", ".join(f"{key}={val!r}" for key, val in _attributes(animal).items())
    return f"{type(animal).__name__}({args})"


class AnimalText:
    __repr__ = lambda self: animal_as_repr(self)

    def print(self: Animal, color: bool = True) -> None:
        """Short description of the animal.

        Parameters
        ----------
        color : bool, optional (default: True)
            Make the header stand out by including colors. May not work on all output
            devices.

        Returns
        -------
        None
        """
        print(animal_as_string(self, color))
