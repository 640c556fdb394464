"""JSON wire codec for records.

Encodes with orjson after pydantic's JSON-mode dump, so languages become
their wire strings and newtypes bare integers. Decoding converts pydantic
validation errors into ``DecodeError`` naming the record and field.
"""

from typing import NoReturn, TypeVar, Union

import orjson
from pydantic import BaseModel, ValidationError

from steam_review_api.core import Language
from steam_review_api.errors import (
    DecodeError,
    ErrorCode,
    LangParseError,
    PayloadError,
)
from steam_review_api.observ import get_logger


logger = get_logger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


def encode(record: BaseModel) -> bytes:
    """Serialize a record to JSON bytes."""
    return orjson.dumps(record.model_dump(mode="json"))


def decode(
    record_type: type[RecordT],
    payload: Union[bytes, str, dict]
) -> RecordT:
    """Decode one record from JSON text or an already parsed object.

    Raises:
        PayloadError: If the payload is not a JSON object.
        DecodeError: If a field fails validation.
    """
    record = record_type.__name__

    if isinstance(payload, (bytes, str)):
        try:
            payload = orjson.loads(payload)
        except orjson.JSONDecodeError as e:
            _fail(PayloadError(record, f"invalid JSON ({e.msg})"))

    if not isinstance(payload, dict):
        _fail(PayloadError(record, "expected a JSON object"))

    try:
        return record_type.model_validate(payload)
    except ValidationError as e:
        _fail(_from_validation_error(record, e))


def decode_language(value: str, *, field: str, record: str) -> Language:
    """Decode a single language token, naming where it came from."""
    try:
        return Language.parse(value)
    except LangParseError as e:
        raise DecodeError(
            record=record,
            field=field,
            reason=e.message,
            code=ErrorCode.UNKNOWN_LANGUAGE
        ) from e


def _from_validation_error(record: str, exc: ValidationError) -> DecodeError:
    # Only type, location and message are read; pydantic's ``input`` is not
    # copied so the bad value never reaches the error or the logs.
    errors = exc.errors(include_url=False, include_input=False)
    first = errors[0]
    field = ".".join(str(part) for part in first["loc"]) or None
    code = (
        ErrorCode.UNKNOWN_LANGUAGE
        if first["type"] == "unknown_language"
        else ErrorCode.FIELD_DECODE_FAILED
    )
    return DecodeError(
        record=record,
        field=field,
        reason=first["msg"],
        code=code,
        error_type=first["type"],
        error_count=len(errors)
    )


def _fail(error: DecodeError) -> NoReturn:
    detail = error.to_detail()
    logger.warning(
        "record_decode_failed",
        record=detail.record,
        field=detail.field,
        code=detail.code.value,
        reason=detail.message,
        **detail.context
    )
    raise error from None
