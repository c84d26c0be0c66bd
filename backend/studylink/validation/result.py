from __future__ import annotations

from dataclasses import dataclass, field

from studylink.errors import FieldError, ValidationFailed


@dataclass
class ValidationResult:
    errors: list[FieldError] = field(default_factory=list)
    code: str | None = None

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def add(self, field_name: str, message: str, code: str | None = None) -> None:
        self.errors.append(FieldError(field=field_name, message=message))
        if code:
            self.code = code

    def has_error(self, field_name: str) -> bool:
        return any(error.field == field_name for error in self.errors)

    def raise_if_invalid(self, message: str | None = None) -> None:
        if not self.is_valid:
            raise ValidationFailed(self.errors, message=message, code=self.code)


def is_blank(value) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple)):
        return not any(str(item).strip() for item in value)
    return False


def wants(data: dict, field_name: str, is_update: bool) -> bool:
    """Create checks every field; update only checks the fields it carries."""
    return not is_update or field_name in data
