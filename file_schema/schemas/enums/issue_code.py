from enum import Enum


class IssueCode(str, Enum):
    """검증 실패 코드"""
    INVALID_TYPE = "invalid_type"      # 런타임 타입 불일치
    INVALID_STRING = "invalid_string"  # 문자열이지만 형식 검사 실패 (base64)
    CUSTOM = "custom"                  # 기본 타입으로 표현할 수 없는 구조 검사 실패
