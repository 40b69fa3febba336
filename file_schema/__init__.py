from file_schema import ez
from file_schema.core.exceptions import (
    FileSchemaError,
    FileSchemaValidationError,
    NotAFileSchemaError,
    UnknownFileVariantError,
)
from file_schema.core.file_schema import FileSchema, create_file_schema
from file_schema.core.metadata import FILE_KIND, copy_meta, get_meta, has_meta, with_meta
from file_schema.schemas.enums.file_variant import FileVariant
from file_schema.schemas.enums.issue_code import IssueCode
from file_schema.schemas.models.common.parse_result import ParseFailure, ParseResult, ParseSuccess
from file_schema.schemas.models.common.validation_issue import ValidationIssue, issues_from_validation_error

__all__ = [
    'ez', 'FileSchema', 'create_file_schema', 'FileVariant', 'IssueCode',
    'ValidationIssue', 'issues_from_validation_error', 'ParseSuccess', 'ParseFailure', 'ParseResult',
    'FILE_KIND', 'get_meta', 'has_meta', 'with_meta', 'copy_meta',
    'FileSchemaError', 'FileSchemaValidationError', 'NotAFileSchemaError', 'UnknownFileVariantError',
]
