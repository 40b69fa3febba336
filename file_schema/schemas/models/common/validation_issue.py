from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field, ValidationError


class ValidationIssue(BaseModel):
    """Single structured validation failure."""

    code: str = Field(..., description="Issue code (invalid_type, invalid_string, custom, ...)")
    message: str = Field(..., description="Human readable message")
    path: List[Union[str, int]] = Field(
        default_factory=list,
        description="Property access steps from the root value to the failing value"
    )
    validation: Optional[str] = Field(default=None, description="Failed format check, e.g. regex")
    fatal: Optional[bool] = Field(default=None, description="No further checks ran for this value")
    expected: Optional[str] = Field(default=None, description="Expected runtime type name")
    received: Optional[str] = Field(default=None, description="Received runtime type name")

    def to_dict(self) -> Dict[str, Any]:
        """Dict form without the optional keys that were not set."""
        return self.model_dump(exclude_none=True)


def issues_from_validation_error(error: ValidationError) -> List[ValidationIssue]:
    """
    pydantic ValidationError를 ValidationIssue 목록으로 변환한다.

    File schema 검증기는 PydanticCustomError의 context에 expected/received/validation/fatal을
    담아 두므로 그대로 옮긴다. 모델 안에서 발생한 에러는 loc가 path가 된다.
    """
    issues = []
    for item in error.errors(include_url=False):
        ctx = item.get("ctx") or {}
        issues.append(
            ValidationIssue(
                code=item["type"],
                message=item["msg"],
                path=list(item["loc"]),
                validation=ctx.get("validation"),
                fatal=ctx.get("fatal"),
                expected=ctx.get("expected"),
                received=ctx.get("received"),
            )
        )
    return issues
