"""Interactive session: the menu-driven read/dispatch/print loop."""

from __future__ import annotations

import enum
import logging
import sys
from typing import Callable, Iterable, Sequence

import click

from petfinder.models import Pet
from petfinder.shelter import Shelter

logger = logging.getLogger(__name__)

LineReader = Callable[[str], str | None]
Echo = Callable[[str], None]

WELCOME = "*** Welcome to Pet Finder! ***"
MENU = (
    "* Enter 1 to see available pets\n"
    "* Enter 2 to search for a pet by type and breed\n"
    "* Enter 3 to adopt the pet by name\n"
    "* Enter 4 to exit"
)
EXIT_MESSAGE = "Exiting the program."

LISTING_HEADER = "Pets available for adoption:"
NONE_AVAILABLE = "No pets are currently available."
TYPE_PROMPT = "Enter the type of pet (dog or cat):"
BREED_PROMPT = "Enter the breed (leave empty for any):"
NAME_PROMPT = "Enter the name of the pet you want to adopt:"
NAME_REQUIRED = "You must specify a valid name in order to adopt a pet. Please try again."


class State(enum.Enum):
    MAIN_MENU = "main_menu"
    AWAIT_TYPE = "await_type"
    AWAIT_BREED = "await_breed"
    AWAIT_ADOPT_NAME = "await_adopt_name"
    EXIT = "exit"


class EndOfInput(Exception):
    """The input source has no more lines to give."""


# --------------------------------------------------------------------------- #
# Rendering helpers (shared with the one-shot CLI commands)
# --------------------------------------------------------------------------- #

def render_pets(pets: Iterable[Pet]) -> list[str]:
    return [pet.display() for pet in pets]


def no_results_message(type: str | None, breed: str | None) -> str:
    if type and breed:
        return f"No pets are available for selected type ({type}) and breed ({breed})."
    if type:
        return f"No pets are available for selected type ({type})."
    if breed:
        return f"No pets are available for selected breed ({breed})."
    return "No pets are available."


def adopted_message(name: str) -> str:
    return f"Congratulations! You adopted {name}."


def adopt_failed_lines(name: str) -> list[str]:
    return [
        "Something went wrong. Please check that the name is spelled correctly.",
        f"Pet trying to adopt is {name}.",
    ]


def stdin_reader(label: str) -> str | None:
    """Prompt with ``<label>: `` and read one line from stdin.

    Returns None at end of input. A failing input stream counts as end of
    input so the session can wind down normally.
    """
    click.echo(f"{label}: ", nl=False)
    try:
        line = sys.stdin.readline()
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Input stream failed, ending session: %s", exc)
        return None
    if not line:
        return None
    return line


# --------------------------------------------------------------------------- #
# Session
# --------------------------------------------------------------------------- #

class Session:
    """Drive the four-option menu over *shelter* until exit or end of input.

    ``read_line`` is called with a short field label and returns the raw
    line, or None once input is exhausted. ``echo`` writes one line of
    output. Both default to the terminal.
    """

    def __init__(
        self,
        shelter: Shelter,
        read_line: LineReader | None = None,
        echo: Echo | None = None,
        search_types: Sequence[str] = ("dog", "cat"),
        show_welcome: bool = True,
    ):
        self.shelter = shelter
        self.read_line = read_line or stdin_reader
        self.echo = echo or click.echo
        self.search_types = tuple(search_types)
        self.show_welcome = show_welcome
        self.state = State.MAIN_MENU
        self._type_filter: str | None = None
        self._handlers: dict[State, Callable[[], State]] = {
            State.MAIN_MENU: self._main_menu,
            State.AWAIT_TYPE: self._await_type,
            State.AWAIT_BREED: self._await_breed,
            State.AWAIT_ADOPT_NAME: self._await_adopt_name,
        }

    def run(self) -> None:
        if self.show_welcome:
            self.echo("")
            self.echo(WELCOME)
        self.state = State.MAIN_MENU
        try:
            while self.state is not State.EXIT:
                self.state = self._handlers[self.state]()
        except EndOfInput:
            self.echo("")
            logger.debug("End of input in state %s", self.state.value)
        except KeyboardInterrupt:
            self.echo("")
            logger.debug("Interrupted in state %s", self.state.value)
        self.state = State.EXIT
        self.echo(EXIT_MESSAGE)

    def _read(self, label: str) -> str:
        line = self.read_line(label)
        if line is None:
            raise EndOfInput
        return line.strip()

    # ------------------------------------------------------------------ #
    # State handlers: each reads at most one line and returns the next state
    # ------------------------------------------------------------------ #

    def _main_menu(self) -> State:
        self.echo("")
        self.echo(MENU)
        self.echo("")
        selection = self._read("input")
        if selection == "1":
            self._show_available()
            return State.MAIN_MENU
        if selection == "2":
            self.echo(TYPE_PROMPT)
            return State.AWAIT_TYPE
        if selection == "3":
            return State.AWAIT_ADOPT_NAME
        if selection == "4":
            return State.EXIT
        return State.MAIN_MENU

    def _await_type(self) -> State:
        value = self._read("type")
        self._type_filter = value if value in self.search_types else None
        self.echo(BREED_PROMPT)
        return State.AWAIT_BREED

    def _await_breed(self) -> State:
        breed = self._read("breed") or None
        type_ = self._type_filter
        self._type_filter = None
        pets = self.shelter.search(type_, breed)
        if pets:
            for line in render_pets(pets):
                self.echo(line)
        else:
            self.echo(no_results_message(type_, breed))
        return State.MAIN_MENU

    def _await_adopt_name(self) -> State:
        self.echo(NAME_PROMPT)
        name = self._read("name")
        if not name:
            self.echo(NAME_REQUIRED)
        elif self.shelter.adopt(name):
            self.echo(adopted_message(name))
        else:
            for line in adopt_failed_lines(name):
                self.echo(line)
        return State.MAIN_MENU

    def _show_available(self) -> None:
        pets = self.shelter.list_available()
        if not pets:
            self.echo(NONE_AVAILABLE)
            return
        self.echo(LISTING_HEADER)
        for line in render_pets(pets):
            self.echo(line)
