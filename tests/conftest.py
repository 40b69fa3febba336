import logging
import os
import sys
from pathlib import Path

import pytest

# 프로젝트 루트 경로 설정
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from file_schema.core.config import settings

logging.basicConfig(level=logging.INFO)

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture
def logo_path() -> Path:
    return DATA_DIR / "logo.svg"


@pytest.fixture
def logo_bytes(logo_path) -> bytes:
    """테스트용 샘플 파일 원본 바이트 (파일 읽기는 호출자 책임)"""
    return logo_path.read_bytes()


@pytest.fixture
def deprecation_warnings_enabled(monkeypatch):
    monkeypatch.setattr(settings, "DEPRECATION_WARNINGS", True)
    return settings
