"""
CookHub Backend — JSON Body Parsing
=====================================

What:  Dependency that reads a request body as JSON whatever its
       Content-Type says, and validates it against a request schema.
How:   `payload: RecipeCreate = Depends(json_body(RecipeCreate))`

FastAPI's own body binding only parses bodies declared as application/json.
Clients such as `curl -d` send form content types with JSON payloads, so the
raw bytes are decoded here instead. A body that is empty, not JSON, or has a
field of the wrong type raises ValidationError (400 "Invalid JSON").
"""

from typing import Any, Callable, Dict, Type, TypeVar

from fastapi import Request
from pydantic import BaseModel
from pydantic import ValidationError as SchemaError

from cookhub.exceptions import ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


def json_body(model: Type[ModelT]) -> Callable:
    async def parse(request: Request) -> ModelT:
        raw = await request.body()
        try:
            return model.model_validate_json(raw)
        except SchemaError as e:
            raise ValidationError(
                message="Invalid JSON",
                context={"errors": [error["msg"] for error in e.errors()]},
            )

    return parse


def json_body_docs(model: Type[BaseModel]) -> Dict[str, Any]:
    """`openapi_extra` documenting the body that json_body() parses."""
    return {
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": model.model_json_schema()}},
        }
    }
