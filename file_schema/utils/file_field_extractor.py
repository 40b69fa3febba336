"""Pydantic 모델에서 File 필드를 찾아 문서화용 표현을 만드는 유틸리티"""

import logging
from typing import Annotated, Any, Dict, Optional, Type, get_args, get_origin, get_type_hints

from pydantic import BaseModel

from file_schema.core.exceptions import NotAFileSchemaError
from file_schema.core.file_schema import UNION_TYPES, FileSchema
from file_schema.core.metadata import FILE_KIND, get_meta

logger = logging.getLogger(__name__)


def depict_file_schema(schema: Any) -> Dict[str, Any]:
    """
    File 스키마의 OpenAPI 표현을 반환한다.

    Args:
        schema: kind=File 메타데이터를 가진 스키마

    Returns:
        dict: {"type": "string", "format": "file" | "binary" | "byte", ...}

    Raises:
        NotAFileSchemaError: kind 메타데이터가 File이 아닌 경우
    """
    if get_meta(schema, "kind") != FILE_KIND or not isinstance(schema, FileSchema):
        raise NotAFileSchemaError(schema)
    return schema.json_schema()


def _find_file_schema(annotation: Any) -> Optional[FileSchema]:
    """
    타입 힌트에서 File 스키마를 찾는다.

    Annotated 메타데이터를 먼저 보고, Optional/Union이면 각 멤버 안의 Annotated까지 탐색한다.
    """
    if get_origin(annotation) is Annotated:
        args = get_args(annotation)
        for arg in args[1:]:  # 첫 번째는 실제 타입
            if get_meta(arg, "kind") == FILE_KIND:
                return arg
        annotation = args[0]

    if get_origin(annotation) in UNION_TYPES:
        for member in get_args(annotation):
            found = _find_file_schema(member)
            if found is not None:
                return found
    return None


def extract_file_fields(model_class: Type[BaseModel]) -> Dict[str, FileSchema]:
    """
    모델 필드 중 Annotated 메타데이터에 File 스키마가 있는 필드를 찾는다.

    variant를 확인하지 않고 kind 메타데이터만으로 판별한다.
    Optional[Annotated[bytes, ez.file("buffer")]] 형태도 포함한다.
    """
    hints = get_type_hints(model_class, include_extras=True)
    file_fields = {}

    for field_name in model_class.model_fields:
        if field_name not in hints:
            continue
        schema = _find_file_schema(hints[field_name])
        if schema is not None:
            file_fields[field_name] = schema

    logger.debug(f"Found {len(file_fields)} file field(s) in {model_class.__name__}")
    return file_fields


def describe_file_fields(model_class: Type[BaseModel]) -> str:
    """
    File 필드 목록을 문서/프롬프트용 텍스트로 변환한다.

    Returns:
        str: Markdown 목록. File 필드가 없으면 헤더만 반환한다.
    """
    lines = ["## File Fields", ""]

    for field_name, schema in extract_file_fields(model_class).items():
        field_info = model_class.model_fields[field_name]
        depiction = depict_file_schema(schema)
        req_marker = "(required)" if field_info.is_required() else "(optional)"
        description = field_info.description or ""
        lines.append(
            f"- **{field_name}** [{depiction['type']}/{depiction['format']}] "
            f"{req_marker} variant={schema.variant.value}: {description}".rstrip()
        )

    return "\n".join(lines)
