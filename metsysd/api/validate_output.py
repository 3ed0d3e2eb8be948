"""Validate command output against its registered schema."""

from collections.abc import Callable
from typing import Any

from pydantic import ValidationError

from ._output_schemas import get_output_schema


def validate_output(func: Callable, output: dict[str, Any]) -> dict[str, Any]:
    """Validate a command's output dict against its registered output schema.

    The domain and command name are derived from the function's module,
    e.g. ``metsysd.api.service.cmd_create`` -> ("service", "create").

    Args:
        func: The cmd_* function that produced the output
        output: Output dict to validate

    Returns:
        Normalized output dict (schema field order, defaults filled)

    Raises:
        ValueError: If the output does not match the registered schema
    """
    module_parts = getattr(func, "__module__", "").split(".")
    if len(module_parts) < 2 or not module_parts[-1].startswith("cmd_"):
        return output
    domain = module_parts[-2]
    command_name = module_parts[-1].removeprefix("cmd_")

    schema = get_output_schema(domain, command_name)
    if schema is None:
        return output

    try:
        return schema.model_validate(output).model_dump(mode="python")
    except ValidationError as e:
        raise ValueError(f"{domain}.{command_name} output does not match {schema.__name__}: {e}") from e
