"""
스키마 메타데이터 모듈

검증 로직과 무관한 부가 정보(kind, examples 등)를 스키마에 붙여 두고,
문서화 등 하위 컴포넌트가 variant를 몰라도 조회할 수 있게 한다.
"""
import dataclasses
import logging
from types import MappingProxyType
from typing import Any, Mapping, Optional, TypeVar

logger = logging.getLogger(__name__)

FILE_KIND = "File"

S = TypeVar("S")


def _meta_of(schema: Any) -> Optional[Mapping[str, Any]]:
    meta = getattr(schema, "meta", None)
    return meta if isinstance(meta, Mapping) else None


def get_meta(schema: Any, key: str) -> Any:
    """
    스키마의 메타데이터 값을 반환한다.

    Args:
        schema: 메타데이터를 가진 스키마 (meta 속성이 없으면 None 반환)
        key: 메타데이터 키 (예: "kind")

    Returns:
        메타데이터 값, 없으면 None
    """
    meta = _meta_of(schema)
    if meta is None:
        return None
    return meta.get(key)


def has_meta(schema: Any) -> bool:
    """스키마에 메타데이터가 하나라도 있는지 확인한다."""
    meta = _meta_of(schema)
    return bool(meta)


def with_meta(schema: S, **values: Any) -> S:
    """메타데이터를 병합한 새 스키마를 반환한다. 원본은 변경하지 않는다."""
    merged = dict(_meta_of(schema) or {})
    merged.update(values)
    return dataclasses.replace(schema, meta=MappingProxyType(merged))


def copy_meta(src: Any, dest: S) -> S:
    """
    src의 메타데이터를 dest에 병합한 새 스키마를 반환한다.

    examples는 dest 쪽 목록 뒤에 src 쪽 목록을 이어 붙인다.
    """
    src_meta = _meta_of(src)
    if not src_meta:
        return dest

    merged = dict(_meta_of(dest) or {})
    for key, value in src_meta.items():
        if key == "examples":
            merged[key] = tuple(merged.get(key, ())) + tuple(value)
        else:
            merged[key] = value

    logger.debug(f"Copied metadata keys {sorted(src_meta)} onto {type(dest).__name__}")
    return dataclasses.replace(dest, meta=MappingProxyType(merged))
