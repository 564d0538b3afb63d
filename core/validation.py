"""Schema validation for structured input.

A single entry point, `validate_payload`, checks a mapping against a
pydantic model and returns a `ValidationResult` that holds either the
parsed model or a list of field/message pairs. Callers that want an
exception call `unwrap()`.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Generic, List, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from core.exceptions import ValidationError

M = TypeVar("M", bound=BaseModel)


@dataclass
class ValidationResult(Generic[M]):
    """Outcome of validating a payload: a value or field-level errors."""

    value: Optional[M] = None
    errors: List[Dict[str, str]] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def unwrap(self) -> M:
        """Return the parsed value or raise `ValidationError` with the field errors."""
        if self.errors:
            raise ValidationError("Validation failed", errors=self.errors)
        return self.value


def format_errors(exc: PydanticValidationError) -> List[Dict[str, str]]:
    """Flatten pydantic errors into ``{"field", "message"}`` pairs."""
    errors = []
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ()) if part != "body"]
        errors.append({
            "field": ".".join(loc) or "__root__",
            "message": error.get("msg", "Invalid value"),
        })
    return errors


def validate_payload(schema: Type[M], data: Optional[Mapping[str, Any]]) -> ValidationResult[M]:
    """Validate `data` against `schema` without raising."""
    try:
        return ValidationResult(value=schema.model_validate(dict(data or {})))
    except PydanticValidationError as exc:
        return ValidationResult(errors=format_errors(exc))
