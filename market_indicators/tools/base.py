"""
Base classes for indicator tools.

A tool pairs a pydantic input model with a handler that returns a
JSON-serializable dict. Tools are what the CLI and the stdio server expose.
"""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Annotated, Any

from pydantic import BaseModel, Field, FiniteFloat, StrictInt, ValidationError

logger = logging.getLogger(__name__)

# Schema building blocks shared by the period-based tools
NonEmptySeries = Annotated[list[FiniteFloat], Field(min_length=1)]
PositiveInt = Annotated[StrictInt, Field(gt=0)]


class ToolInputError(ValueError):
    """Raised when tool arguments fail schema validation."""


class UnknownToolError(KeyError):
    """Raised when a tool name is not registered."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


@dataclass(frozen=True)
class ToolDefinition:
    """A named indicator operation with its input schema."""

    name: str
    description: str
    input_model: type[BaseModel]
    handler: Callable[[Any], dict]

    def validate(self, arguments: dict) -> BaseModel:
        """
        Parse raw arguments into the tool's input model.

        Raises:
            ToolInputError: If arguments do not match the schema
        """
        try:
            return self.input_model.model_validate(arguments)
        except ValidationError as e:
            raise ToolInputError(f"Invalid arguments for {self.name}: {e}") from e

    def run(self, arguments: dict) -> dict:
        """Validate arguments and run the handler. Handler errors propagate unchanged."""
        return self.handler(self.validate(arguments))

    def input_schema(self) -> dict:
        """JSON schema of the tool's input (field aliases as the wire names)."""
        return self.input_model.model_json_schema(by_alias=True)


def align_series(label: str, *series: Sequence[float]) -> tuple[list[float], ...]:
    """
    Truncate parallel series to their shortest length.

    Keeps the leading prefix of each series. Logs a warning when any series
    had to be cut, since mismatched inputs usually mean a data problem
    upstream.

    Args:
        label: Indicator name used in the warning
        *series: Series that should share one length

    Returns:
        Tuple of lists, all of the shortest input length
    """
    if not series:
        return ()

    min_length = min(len(s) for s in series)
    if any(len(s) > min_length for s in series):
        logger.warning(
            "%s: Input arrays have different lengths. Truncating to the shortest length: %d",
            label,
            min_length,
        )

    return tuple(list(s[:min_length]) for s in series)
