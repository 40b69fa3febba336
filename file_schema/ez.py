"""
Schema extensions namespace.

Usage:
    from file_schema import ez

    avatar: Annotated[bytes, ez.file("buffer")]
"""
from typing import Optional, Union

from file_schema.core.file_schema import FileSchema, create_file_schema
from file_schema.schemas.enums.file_variant import FileVariant


def file(variant: Optional[Union[FileVariant, str]] = FileVariant.STRING) -> FileSchema:
    """File content schema: string (default), buffer, binary or base64."""
    return create_file_schema(variant)


__all__ = ['file']
