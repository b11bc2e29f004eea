"""Function-calling schema for the transfer tool."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel


def schema_from_model(model: type[BaseModel], *, name: str, description: str | None = None) -> dict[str, Any]:
    """Create a tool schema from a Pydantic model, using wire (alias) field names."""
    model_description = description if description is not None else (model.__doc__ or "")
    return {
        "type": "function",
        "function": {
            "name": name,
            "description": model_description.strip(),
            "parameters": model.model_json_schema(by_alias=True),
        },
    }
