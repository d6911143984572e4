"""Shared types for svg-theme: Theme, RawEntry, validation errors, results, Command."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, fields
from typing import Any, NamedTuple

# The nine identifiers every theme document must carry, in canonical order.
REQUIRED_IDENTIFIERS: tuple[str, ...] = (
    'background',
    'f_high',
    'f_med',
    'f_low',
    'f_inv',
    'b_high',
    'b_med',
    'b_low',
    'b_inv',
)


class RGB(NamedTuple):
    """An 8-bit-per-channel colour."""

    r: int
    g: int
    b: int


class RawEntry(NamedTuple):
    """An (identifier, fill text) pair read from a document element."""

    identifier: str
    fill: str


@dataclass(frozen=True)
class Theme:
    """A complete nine-slot colour theme. All nine slots are always set."""

    background: RGB
    f_high: RGB
    f_med: RGB
    f_low: RGB
    f_inv: RGB
    b_high: RGB
    b_med: RGB
    b_low: RGB
    b_inv: RGB

    def as_dict(self) -> dict[str, RGB]:
        """Identifier -> colour, in REQUIRED_IDENTIFIERS order."""
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True)
class ValidationError:
    """Base for the two classified decode failures. A value, never raised."""

    identifier: str

    def message(self) -> str:
        raise NotImplementedError


@dataclass(frozen=True)
class MissingIdentifier(ValidationError):
    def message(self) -> str:
        return f"required color identifier '{self.identifier}' was not found"


@dataclass(frozen=True)
class InvalidColor(ValidationError):
    def message(self) -> str:
        return f"the color for identifier '{self.identifier}' is not a valid hex color"


@dataclass(frozen=True)
class ValidationResult:
    """Either the nine parsed colours or the first classified error."""

    colours: dict[str, RGB] | None = None
    error: ValidationError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class DecodeResult:
    """Either a Theme or the error that prevented building one."""

    theme: Theme | None = None
    error: ValidationError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class Command:
    """A self-registering CLI subcommand.

    Usage in a command module:

        command = Command(name='check', help='Validate a theme file')

        @command.arguments
        def arguments(parser):
            parser.add_argument('file')

        @command.run
        def run(args):
            ...
            return 0
    """

    def __init__(self, name: str, help: str = ''):
        self.name = name
        self.help = help
        self._run_fn: Callable | None = None
        self._args_fn: Callable | None = None

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        return fn

    def arguments(self, fn: Callable) -> Callable:
        """Decorator to register the argparse setup function."""
        self._args_fn = fn
        return fn

    def configure(self, parser: Any) -> None:
        if self._args_fn is not None:
            self._args_fn(parser)

    def execute(self, args: Any) -> int:
        """Execute the command's run function, returning the exit code."""
        if self._run_fn is None:
            raise RuntimeError(f'Command {self.name} has no run function')
        return self._run_fn(args) or 0
