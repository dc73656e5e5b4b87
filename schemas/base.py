import uuid
from typing import Annotated, Type, TypeVar

from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator, AnyUrl, BaseModel, ConfigDict, TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from utils.errors import ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)

_URL = TypeAdapter(AnyUrl)


def _check_uuid(value: str) -> str:
    try:
        return str(uuid.UUID(value))
    except (ValueError, AttributeError, TypeError):
        raise ValueError("Invalid UUID")


def _check_url(value: str) -> str:
    try:
        _URL.validate_python(value)
    except PydanticValidationError:
        raise ValueError("Must be a valid URL")
    # keep exactly what the caller sent
    return value


def _check_email(value: str) -> str:
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as exc:
        raise ValueError(f"Invalid email: {exc}")
    # stored as sent, domain case included
    return value


IdStr = Annotated[str, AfterValidator(_check_uuid)]
UrlStr = Annotated[str, AfterValidator(_check_url)]
EmailStr = Annotated[str, AfterValidator(_check_email)]


class InputModel(BaseModel):
    """Accepts both ``snake_case`` and ``camelCase`` keys."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )


class ORMModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)


def parse_input(schema: Type[ModelT], data) -> ModelT:
    if isinstance(data, schema):
        return data
    if isinstance(data, BaseModel):
        data = data.model_dump(exclude_unset=True)
    try:
        return schema.model_validate(data)
    except PydanticValidationError as exc:
        raise ValidationError.from_pydantic(exc) from exc


def reject_null(value):
    """For partial updates: a field may be omitted but not set to null."""
    if value is None:
        raise ValueError("Field cannot be null")
    return value
