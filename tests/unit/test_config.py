import importlib
import logging
import os

from file_schema.core import config as config_module
from file_schema.core.config import Settings


class TestSettings:
    """환경 변수 기반 설정 테스트"""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("FILE_SCHEMA_DEPRECATION_WARNINGS", raising=False)
        monkeypatch.delenv("FILE_SCHEMA_LOG_LEVEL", raising=False)
        config = Settings(_env_file=None)
        assert config.DEPRECATION_WARNINGS is True
        assert config.LOG_LEVEL == "INFO"

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("FILE_SCHEMA_DEPRECATION_WARNINGS", "false")
        monkeypatch.setenv("FILE_SCHEMA_LOG_LEVEL", "DEBUG")
        config = Settings(_env_file=None)
        assert config.DEPRECATION_WARNINGS is False
        assert config.LOG_LEVEL == "DEBUG"


class TestEnvLocalLoading:
    """.env.local 로딩 시 호스트 프로세스 상태 보존 테스트"""

    def test_import_leaves_process_untouched(self, tmp_path, monkeypatch):
        """.env.local은 Settings에만 반영되고 os.environ / root logger는 그대로 유지된다"""
        (tmp_path / ".env.local").write_text(
            "HOME_DIR_OVERRIDE=hijacked\nFILE_SCHEMA_DEPRECATION_WARNINGS=false\n",
            encoding="utf-8",
        )
        monkeypatch.setenv("HOME_DIR_OVERRIDE", "original")
        monkeypatch.delenv("FILE_SCHEMA_DEPRECATION_WARNINGS", raising=False)
        monkeypatch.chdir(tmp_path)
        # 모듈 재실행 후 원래 전역 객체로 복원되도록 기록해 둔다
        monkeypatch.setattr(config_module, "settings", config_module.settings)
        monkeypatch.setattr(config_module, "ENV_LOCAL_PATH", config_module.ENV_LOCAL_PATH)
        monkeypatch.setattr(config_module, "Settings", config_module.Settings)
        root_handlers = list(logging.getLogger().handlers)

        reloaded = importlib.reload(config_module)

        assert os.path.samefile(reloaded.ENV_LOCAL_PATH, tmp_path / ".env.local")
        assert reloaded.settings.DEPRECATION_WARNINGS is False
        assert os.environ["HOME_DIR_OVERRIDE"] == "original"
        assert "FILE_SCHEMA_DEPRECATION_WARNINGS" not in os.environ
        assert logging.getLogger().handlers == root_handlers
