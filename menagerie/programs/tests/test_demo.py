from menagerie.programs import demo, cli
import runpy
from menagerie.core import BaseAnimal, Dog
import pytest

FALLBACK = "I do not know what type of animal I am. :("

EXPECTED = {
    "basic": [
        "Bob the unknown",
        FALLBACK,
        "Cozmo the dog",
        "Woof!",
        "Barky",
    ],
    "with_helper": [
        "Bob the unknown",
        FALLBACK,
        "Cozmo the dog",
        "Woof!",
        "",
        "Bob the unknown",
        "Barky",
        "Cozmo the dog marked his territory!",
    ],
    "interface": [
        "Bob the unknown",
        FALLBACK,
        "Bob the unknown",
        FALLBACK,
        "Cozmo the dog",
        "Woof!",
        "",
        "***Proper way***",
        "Bob the unknown",
        FALLBACK,
        "Cozmo the dog",
        "Woof!",
        "Barky",
    ],
}


@pytest.fixture(params=list(EXPECTED))
def program(request):
    return request.param


def test_program_output(program, capsys):
    """Test if the program prints exactly the expected lines, and returns exit code 0."""
    assert demo.PROGRAMS[program]() == 0
    assert capsys.readouterr().out == "\n".join(EXPECTED[program]) + "\n"


@pytest.mark.parametrize(
    ("entry", "program"),
    [(cli.basic, "basic"), (cli.with_helper, "with_helper"), (cli.interface, "interface")],
)
def test_entry_points(entry, program, monkeypatch, capsys):
    """Test if console entry points ignore arguments and exit with code 0."""
    monkeypatch.setattr("sys.argv", ["menagerie", "--unexpected", "arg"])
    with pytest.raises(SystemExit) as excinfo:
        entry()
    assert excinfo.value.code == 0
    assert capsys.readouterr().out == "\n".join(EXPECTED[program]) + "\n"


@pytest.mark.parametrize(
    ("animal", "expected"),
    [
        (BaseAnimal("Bob the unknown"), ["Bob the unknown", FALLBACK]),
        (Dog("Cozmo the dog", "Barky"), ["Cozmo the dog", "Woof!"]),
    ],
)
def test_run_polymorphic_animal_funcs(animal, expected, capsys):
    demo.run_polymorphic_animal_funcs(animal)
    assert capsys.readouterr().out == "\n".join(expected) + "\n"


def test_run_as_module(monkeypatch, capsys):
    """Test if ``python -m menagerie`` runs the program with the helper."""
    monkeypatch.setattr("sys.argv", ["menagerie", "extra", "args"])
    with pytest.raises(SystemExit) as excinfo:
        runpy.run_module("menagerie", run_name="__main__")
    assert excinfo.value.code == 0
    assert capsys.readouterr().out == "\n".join(EXPECTED["with_helper"]) + "\n"
