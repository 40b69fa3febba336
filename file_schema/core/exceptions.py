"""File schema 관련 예외 정의"""

from typing import List, Optional

from file_schema.schemas.models.common.validation_issue import ValidationIssue


class FileSchemaError(Exception):
    """File schema 관련 기본 예외"""

    def __init__(self, message: str, original_error: Exception = None):
        self.original_error = original_error
        super().__init__(message)


class UnknownFileVariantError(FileSchemaError):
    """지원하지 않는 variant 요청"""

    def __init__(self, variant: object):
        self.variant = variant
        super().__init__(f"Unknown file variant: {variant!r}")


class NotAFileSchemaError(FileSchemaError):
    """kind=File 메타데이터가 없는 스키마를 문서화하려는 경우"""

    def __init__(self, schema: object):
        super().__init__(f"Not a file schema: {schema!r}")


class FileSchemaValidationError(FileSchemaError):
    """parse() 실패 시 발생. 검증 이슈 목록을 함께 전달한다."""

    def __init__(self, issues: List[ValidationIssue], message: Optional[str] = None):
        self.issues = list(issues)
        if message is None:
            message = "; ".join(issue.message for issue in self.issues) or "Validation failed"
        super().__init__(message)
