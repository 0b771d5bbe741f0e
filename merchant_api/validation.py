"""
Validation Layer

Declarative field constraints for inbound representations and the single entry
point that turns a raw payload into a typed request DTO.

Each DTO field declares its constraints (pydantic Field bounds plus the reusable
annotated types below). pydantic evaluates every field independently, so one
submission yields the complete list of violations rather than the first one.
validate_request() converts that list into a ValidationError carrying
FieldViolation(field, constraint, message) entries keyed by the external
(camelCase, dotted for nested objects) field name.
"""

from typing import Any, Annotated, Mapping, Optional, Type, TypeVar
import logging

from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator, BaseModel, StringConstraints
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import PydanticCustomError

from merchant_api.domain.value_objects import is_valid_cnpj, is_valid_cpf
from merchant_api.exceptions import FieldViolation, ValidationError

logger = logging.getLogger(__name__)

M = TypeVar('M', bound=BaseModel)


# pydantic error type -> constraint name reported to callers
CONSTRAINT_NAMES = {
    'missing': 'required',
    'string_too_long': 'max_length',
    'string_too_short': 'min_length',
    'greater_than': 'min_exclusive',
    'greater_than_equal': 'min',
    'less_than_equal': 'max',
    'decimal_max_digits': 'max_digits',
    'decimal_max_places': 'decimal_places',
    'enum': 'enum',
}

_TYPE_ERRORS = {
    'string_type', 'int_type', 'int_parsing', 'int_from_float', 'decimal_type',
    'decimal_parsing', 'model_type', 'model_attributes_type', 'dict_type',
}


def ensure_not_blank(value: str) -> str:
    if not value.strip():
        raise PydanticCustomError('not_blank', 'must not be blank')
    return value


def ensure_email(value: str) -> str:
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as e:
        raise PydanticCustomError('email', 'invalid email address: {reason}', {'reason': str(e)})
    return value


def ensure_cnpj(value: str) -> str:
    if not is_valid_cnpj(value):
        raise PydanticCustomError('cnpj', 'invalid organization tax ID (CNPJ)')
    return value


def ensure_cpf(value: str) -> str:
    if not is_valid_cpf(value):
        raise PydanticCustomError('cpf', 'invalid individual tax ID (CPF)')
    return value


def required_str(max_length: int):
    """Non-blank string no longer than max_length."""
    return Annotated[str, StringConstraints(max_length=max_length), AfterValidator(ensure_not_blank)]


def optional_str(max_length: int):
    """Optional string no longer than max_length."""
    return Optional[Annotated[str, StringConstraints(max_length=max_length)]]


Cnpj = Annotated[str, AfterValidator(ensure_cnpj)]
Cpf = Annotated[str, AfterValidator(ensure_cpf)]


def max_utf8_bytes(limit: int):
    """AfterValidator rejecting strings whose UTF-8 encoding exceeds limit bytes."""
    def check(value: str) -> str:
        size = len(value.encode('utf-8'))
        if size > limit:
            raise PydanticCustomError(
                'max_length',
                'must be at most {limit} bytes when UTF-8 encoded (got {size})',
                {'limit': limit, 'size': size},
            )
        return value
    return AfterValidator(check)


def email_str(max_length: int):
    """Non-blank string with valid email syntax."""
    return Annotated[
        str,
        StringConstraints(max_length=max_length),
        AfterValidator(ensure_not_blank),
        AfterValidator(ensure_email),
    ]


def _field_name(loc: tuple) -> str:
    return ".".join(str(part) for part in loc if part != '__root__')


def _constraint_name(error: dict) -> str:
    error_type = error['type']
    if error.get('input') is None and (error_type in _TYPE_ERRORS or error_type == 'enum'):
        return 'required'
    if error_type in _TYPE_ERRORS:
        return 'type'
    return CONSTRAINT_NAMES.get(error_type, error_type)


def violations_from(error: PydanticValidationError) -> list[FieldViolation]:
    """
    Convert a pydantic error into field violations.

    Args:
        error: pydantic ValidationError raised while building a DTO

    Returns:
        One FieldViolation per failed constraint, in pydantic's reporting order
    """
    return [
        FieldViolation(
            field=_field_name(err['loc']),
            constraint=_constraint_name(err),
            message=err['msg'],
        )
        for err in error.errors()
    ]


def validate_request(schema: Type[M], payload: Any) -> M:
    """
    Validate a candidate request representation.

    Args:
        schema: Request DTO class
        payload: Mapping of external field names to values, or an
            already-validated instance of schema

    Returns:
        Fully-typed DTO instance

    Raises:
        ValidationError: With every violation found in the submission
    """
    if isinstance(payload, schema):
        return payload
    if isinstance(payload, BaseModel):
        payload = payload.model_dump(by_alias=True)
    if not isinstance(payload, Mapping):
        raise ValidationError(
            f"{schema.__name__} payload must be an object",
            [FieldViolation(field='', constraint='type', message='expected an object')]
        )

    try:
        return schema.model_validate(payload)
    except PydanticValidationError as e:
        violations = violations_from(e)
        logger.debug(f"{schema.__name__} rejected with {len(violations)} violation(s)")
        raise ValidationError(
            f"{schema.__name__} failed validation ({len(violations)} violation(s))",
            violations
        ) from e
