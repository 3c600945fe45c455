"""Interactive questions asked for each color.

The questions are declared as an ordered sequence of field descriptors and
asked through rich prompts. Text answers are validated and re-asked inside
the prompt, so callers only ever receive trimmed, valid values.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import IO, Any, Optional

from rich.console import Console
from rich.prompt import Confirm, InvalidResponse, Prompt

from tailwind_palette.colors import is_valid_hex

# Returns an error message for invalid input, None when the value is fine
Validator = Callable[[str], Optional[str]]


class FieldKind(str, Enum):
    """Kinds of questions."""

    TEXT = "text"
    CONFIRM = "confirm"


@dataclass(frozen=True)
class FieldDescriptor:
    """A single question in the prompt sequence."""

    name: str
    message: str
    kind: FieldKind = FieldKind.TEXT
    validator: Validator | None = None
    default: Any = ...


def validate_color_name(value: str) -> str | None:
    """Reject empty color names."""
    if not value.strip():
        return "Color name cannot be empty."
    return None


def validate_color_hex(value: str) -> str | None:
    """Reject values that are not 3- or 6-digit hex colors."""
    if not is_valid_hex(value):
        return "Please enter a valid HEX color."
    return None


COLOR_FIELDS: tuple[FieldDescriptor, ...] = (
    FieldDescriptor(
        name="color_name",
        message="Enter the name for the color",
        validator=validate_color_name,
    ),
    FieldDescriptor(
        name="color_hex",
        message="Enter the color in HEX format without #",
        validator=validate_color_hex,
    ),
    FieldDescriptor(
        name="add_another",
        message="Do you want to add another color?",
        kind=FieldKind.CONFIRM,
        default=False,
    ),
)


class ValidatedPrompt(Prompt):
    """Text prompt that trims the answer and re-asks until it validates."""

    def __init__(
        self,
        prompt: str = "",
        *,
        validator: Validator | None = None,
        console: Console | None = None,
    ) -> None:
        super().__init__(prompt, console=console)
        self.validator = validator

    def process_response(self, value: str) -> str:
        value = value.strip()
        if self.validator is not None:
            error = self.validator(value)
            if error is not None:
                raise InvalidResponse(f"[prompt.invalid]{error}")
        return value


def ask_field(
    field: FieldDescriptor,
    *,
    console: Console | None = None,
    stream: IO[str] | None = None,
) -> Any:
    """Ask a single question and return the validated answer."""
    if field.kind is FieldKind.CONFIRM:
        return Confirm.ask(
            field.message,
            console=console,
            default=field.default,
            stream=stream,
        )
    prompt = ValidatedPrompt(field.message, validator=field.validator, console=console)
    return prompt(default=field.default, stream=stream)


def ask_fields(
    fields: Sequence[FieldDescriptor],
    *,
    console: Console | None = None,
    stream: IO[str] | None = None,
) -> dict[str, Any]:
    """Ask every question in order.

    Args:
        fields: The questions to ask.
        console: Console used for prompt output.
        stream: Optional input stream; defaults to stdin.

    Returns:
        Field name to answer.
    """
    return {field.name: ask_field(field, console=console, stream=stream) for field in fields}
