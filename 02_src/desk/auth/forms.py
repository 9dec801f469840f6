"""Login and password-reset form schemas."""

from typing import Any, ClassVar, TypeVar

from pydantic import (
    BaseModel,
    ConfigDict,
    EmailStr,
    Field,
    ValidationError,
    ValidationInfo,
    field_validator,
)

from ..errors import FormError

F = TypeVar("F", bound="DeskForm")


class DeskForm(BaseModel):
    """Base for forms whose errors are shown next to each field."""

    # field (or alias) -> message shown instead of pydantic's own
    error_messages: ClassVar[dict[str, str]] = {}


class LoginForm(DeskForm):
    """Admin sign-in."""

    error_messages: ClassVar[dict[str, str]] = {
        "email": "Enter a valid email",
        "password": "Password must be at least 6 characters",
        "robot": "Please verify you are a human",
    }

    email: EmailStr
    password: str = Field(min_length=6)
    robot: bool = Field(default=False, validate_default=True)

    @field_validator("robot")
    @classmethod
    def must_be_human(cls, value: bool) -> bool:
        if value is not True:
            raise ValueError("robot check not ticked")
        return value


class ResetPasswordForm(DeskForm):
    """New password entered twice."""

    model_config = ConfigDict(populate_by_name=True)

    error_messages: ClassVar[dict[str, str]] = {
        "password": "Password must be at least 8 characters",
        "confirmPassword": "Passwords do not match",
    }

    password: str = Field(min_length=8)
    confirm_password: str = Field(alias="confirmPassword")

    @field_validator("confirm_password")
    @classmethod
    def passwords_match(cls, value: str, info: ValidationInfo) -> str:
        if "password" in info.data and value != info.data["password"]:
            raise ValueError("passwords differ")
        return value


def validate_form(model: type[F], payload: Any) -> F:
    """Validate `payload`, raising FormError with one message per field."""
    try:
        return model.model_validate(payload)
    except ValidationError as e:
        errors: dict[str, str] = {}
        for error in e.errors():
            field = str(error["loc"][0]) if error["loc"] else "form"
            if field in errors:
                continue
            if error["type"] == "missing":
                errors[field] = "This field is required"
            else:
                errors[field] = model.error_messages.get(field, error["msg"])
        raise FormError(errors) from e
