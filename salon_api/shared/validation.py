"""Deferred request-body validation"""

from typing import Any, TypeVar

from fastapi.encoders import jsonable_encoder
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ..errors import ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


def parse_body(model: type[ModelT], payload: Any) -> ModelT:
    """
    Validate a raw JSON body against ``model``.

    Used by routes that must resolve the target record (and answer 404)
    before looking at the body. Failures render like FastAPI's own body
    errors: a 400 with pydantic's error list as details.
    """
    try:
        return model.model_validate(payload)
    except PydanticValidationError as e:
        raise ValidationError(details=jsonable_encoder(e.errors(include_url=False))) from e
