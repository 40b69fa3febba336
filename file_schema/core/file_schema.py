"""File schema: pydantic 위에 얹은 파일 콘텐츠 검증 규칙"""

import logging
import re
import warnings
from dataclasses import dataclass, field
from functools import lru_cache
import types
from types import MappingProxyType
from typing import Annotated, Any, Dict, Mapping, Optional, Union, get_args, get_origin

from pydantic import AfterValidator, GetCoreSchemaHandler, PlainValidator, TypeAdapter, ValidationError, WithJsonSchema
from pydantic_core import CoreSchema, PydanticCustomError, core_schema

from file_schema.core.config import settings
from file_schema.core.exceptions import FileSchemaValidationError, UnknownFileVariantError
from file_schema.core.metadata import FILE_KIND, copy_meta, with_meta
from file_schema.core.parsed_type import BUFFER_TYPES, get_parsed_type
from file_schema.schemas.enums.file_variant import FileVariant
from file_schema.schemas.enums.issue_code import IssueCode
from file_schema.schemas.models.common.parse_result import ParseFailure, ParseResult, ParseSuccess
from file_schema.schemas.models.common.validation_issue import issues_from_validation_error

logger = logging.getLogger(__name__)

BASE64_PATTERN = re.compile(r"^([0-9a-zA-Z+/]{4})*(([0-9a-zA-Z+/]{2}==)|([0-9a-zA-Z+/]{3}=))?$")

# typing.Optional[X] / Union[X, None] / X | None
UNION_TYPES = (Union, getattr(types, "UnionType", Union))


def _is_optional(source_type: Any) -> bool:
    return get_origin(source_type) in UNION_TYPES and type(None) in get_args(source_type)


def _check_string(value: Any) -> str:
    if isinstance(value, str):
        return value
    raise PydanticCustomError(
        IssueCode.INVALID_TYPE.value,
        "Expected {expected}, received {received}",
        {"expected": "string", "received": get_parsed_type(value)},
    )


def _check_buffer(value: Any) -> Any:
    if isinstance(value, BUFFER_TYPES):
        return value
    raise PydanticCustomError(IssueCode.CUSTOM.value, "Expected Buffer", {"fatal": True})


def _check_binary(value: Any) -> Any:
    if isinstance(value, BUFFER_TYPES) or isinstance(value, str):
        return value
    raise PydanticCustomError(IssueCode.CUSTOM.value, "Expected Buffer or string", {"fatal": True})


def _check_base64(value: str) -> str:
    if BASE64_PATTERN.fullmatch(value):
        return value
    raise PydanticCustomError(
        IssueCode.INVALID_STRING.value,
        "Does not match base64 encoding",
        {"validation": "regex"},
    )


# variant별 검사 순서: 구조(타입) 검사 -> 형식 검사. 첫 실패에서 중단된다.
_VALIDATORS: Dict[FileVariant, tuple] = {
    FileVariant.STRING: (PlainValidator(_check_string),),
    FileVariant.BUFFER: (PlainValidator(_check_buffer),),
    FileVariant.BINARY: (PlainValidator(_check_binary),),
    FileVariant.BASE64: (PlainValidator(_check_string), AfterValidator(_check_base64)),
}


def _annotation(variant: FileVariant, *extras: Any) -> Any:
    return Annotated[(Any, *_VALIDATORS[variant], *extras)]


@lru_cache(maxsize=None)
def _get_adapter(variant: FileVariant) -> TypeAdapter:
    """variant별 TypeAdapter (상태가 없으므로 공유한다)"""
    logger.debug(f"Building TypeAdapter for file variant: {variant.value}")
    return TypeAdapter(_annotation(variant))


def _resolve_variant(variant: Union[FileVariant, str, None]) -> FileVariant:
    if variant is None:
        return FileVariant.STRING
    try:
        return FileVariant(variant)
    except ValueError as e:
        raise UnknownFileVariantError(variant) from e


@dataclass(frozen=True, eq=False)
class FileSchema:
    """
    파일 콘텐츠 검증 규칙.

    생성 후 변경되지 않으며 여러 값 검증에 재사용할 수 있다.
    pydantic 모델 필드의 Annotated 메타데이터로도 사용 가능하다.

    Usage:
        avatar: Annotated[bytes, ez.file("buffer")]
    """

    variant: FileVariant = FileVariant.STRING
    meta: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({"kind": FILE_KIND}))

    def safe_parse(self, value: Any) -> ParseResult:
        """
        값을 검증하고 결과를 반환한다. 예외를 발생시키지 않는다.

        Returns:
            ParseSuccess(data=value) 또는 ParseFailure(issues=[...])
        """
        try:
            data = _get_adapter(self.variant).validate_python(value)
        except ValidationError as e:
            return ParseFailure(issues=issues_from_validation_error(e))
        return ParseSuccess(data=data)

    validate = safe_parse

    def parse(self, value: Any) -> Any:
        """검증된 값을 반환한다. 실패 시 FileSchemaValidationError."""
        result = self.safe_parse(value)
        if not result.success:
            raise FileSchemaValidationError(result.issues)
        return result.data

    def example(self, value: Any) -> "FileSchema":
        """examples 메타데이터에 value를 추가한 새 스키마를 반환한다."""
        examples = tuple(self.meta.get("examples", ())) + (value,)
        return with_meta(self, examples=examples)

    def json_schema(self) -> Dict[str, Any]:
        """OpenAPI 형식의 스키마 표현"""
        depiction: Dict[str, Any] = {"type": "string", "format": self.variant.openapi_format}
        examples = self.meta.get("examples")
        if examples:
            depiction["examples"] = [
                example if isinstance(example, str) else bytes(example).decode("latin-1")
                for example in examples
            ]
        return depiction

    def __get_pydantic_core_schema__(self, source_type: Any, handler: GetCoreSchemaHandler) -> CoreSchema:
        schema = handler.generate_schema(_annotation(self.variant, WithJsonSchema(self.json_schema())))
        # Annotated[Optional[bytes], ez.file(...)]: None은 검사 없이 통과
        if _is_optional(source_type):
            return core_schema.nullable_schema(schema)
        return schema

    # Deprecated mutators: create_file_schema(variant) 사용 권장

    def string(self, message: Optional[str] = None) -> "FileSchema":
        return self._deprecated_variant(FileVariant.STRING, message)

    def buffer(self, message: Optional[str] = None) -> "FileSchema":
        return self._deprecated_variant(FileVariant.BUFFER, message)

    def binary(self, message: Optional[str] = None) -> "FileSchema":
        return self._deprecated_variant(FileVariant.BINARY, message)

    def base64(self, message: Optional[str] = None) -> "FileSchema":
        return self._deprecated_variant(FileVariant.BASE64, message)

    def _deprecated_variant(self, variant: FileVariant, message: Optional[str]) -> "FileSchema":
        """
        variant를 바꾼 새 스키마를 반환한다. message는 하위 호환용으로만 받고 검증에는 쓰지 않는다.
        """
        notice = f'FileSchema.{variant.value}() is deprecated, use ez.file("{variant.value}") instead'
        logger.warning(notice if message is None else f"{notice} (message: {message!r})")
        if settings.DEPRECATION_WARNINGS:
            warnings.warn(notice, DeprecationWarning, stacklevel=3)
        return copy_meta(self, create_file_schema(variant))

    def __repr__(self) -> str:
        return f"FileSchema(variant={self.variant.value!r}, meta={dict(self.meta)!r})"


def create_file_schema(variant: Union[FileVariant, str, None] = FileVariant.STRING) -> FileSchema:
    """
    variant에 맞는 FileSchema를 생성한다.

    Args:
        variant: string(기본) / buffer / binary / base64. None이면 string

    Returns:
        kind=File 메타데이터가 붙은 FileSchema

    Raises:
        UnknownFileVariantError: 지원하지 않는 variant
    """
    resolved = _resolve_variant(variant)
    logger.debug(f"Created file schema: {resolved.value}")
    return FileSchema(variant=resolved)
