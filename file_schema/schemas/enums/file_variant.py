from enum import Enum


class FileVariant(str, Enum):
    """
    파일 스키마가 허용하는 표현 방식.

    각 멤버는 (값, OpenAPI format) 쌍으로 정의되며, format은 문서화 단계에서 사용된다.
    """

    STRING = ("string", "file")
    BUFFER = ("buffer", "binary")
    BINARY = ("binary", "binary")
    BASE64 = ("base64", "byte")

    def __new__(cls, value: str, openapi_format: str):
        obj = str.__new__(cls, value)
        obj._value_ = value
        obj._openapi_format = openapi_format
        return obj

    @property
    def openapi_format(self) -> str:
        """OpenAPI string format (file / binary / byte)"""
        return self._openapi_format
