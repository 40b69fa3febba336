from typing import Any, List, Literal, Union

from pydantic import BaseModel, Field

from file_schema.core.exceptions import FileSchemaValidationError
from file_schema.schemas.models.common.validation_issue import ValidationIssue


class ParseSuccess(BaseModel):
    """검증 성공 결과"""

    success: Literal[True] = True
    data: Any = Field(..., description="검증된 값 (입력 그대로)")


class ParseFailure(BaseModel):
    """검증 실패 결과"""

    success: Literal[False] = False
    issues: List[ValidationIssue] = Field(..., description="발생 순서대로의 검증 이슈")

    @property
    def error(self) -> FileSchemaValidationError:
        return FileSchemaValidationError(self.issues)


ParseResult = Union[ParseSuccess, ParseFailure]
