"""Unit tests for application configuration."""

from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from miniwiki.config import Settings, WikiConfig
from miniwiki.core.auth import verify_password


class TestSettings:
    def test_defaults(self):
        with patch.dict("os.environ", {}, clear=True):
            s = Settings(_env_file=None)
            assert s.host == "0.0.0.0"
            assert s.port == 8080
            assert s.name == "wiki"
            assert s.password == ""
            assert s.data_dir == Path("./pages")
            assert s.debug is False

    def test_from_env(self):
        env = {
            "MINIWIKI_DATA_DIR": "/tmp/wiki",
            "MINIWIKI_NAME": "notes",
            "MINIWIKI_PASSWORD": "secret",
            "MINIWIKI_PORT": "9000",
            "MINIWIKI_DEBUG": "true",
        }
        with patch.dict("os.environ", env, clear=True):
            s = Settings(_env_file=None)
            assert s.data_dir == Path("/tmp/wiki")
            assert s.name == "notes"
            assert s.password == "secret"
            assert s.port == 9000
            assert s.debug is True

    def test_port_out_of_range(self):
        with patch.dict("os.environ", {"MINIWIKI_PORT": "70000"}, clear=True):
            with pytest.raises(ValidationError):
                Settings(_env_file=None)


class TestWikiConfig:
    def test_editable_with_password(self, tmp_path):
        config = WikiConfig.from_settings(Settings(password="secret", data_dir=tmp_path))
        assert config.editable is True
        assert config.data_dir == tmp_path
        assert config.name == "wiki"

    def test_not_editable_without_password(self, tmp_path):
        config = WikiConfig.from_settings(Settings(password="", data_dir=tmp_path))
        assert config.editable is False

    def test_stores_hash_not_password(self, tmp_path):
        config = WikiConfig.from_settings(Settings(password="secret", data_dir=tmp_path))
        assert config.pass_hash != "secret"
        assert verify_password("secret", config.pass_hash)

    def test_empty_password_is_hashed(self, tmp_path):
        config = WikiConfig.from_settings(Settings(password="", data_dir=tmp_path))
        assert config.pass_hash.startswith("$2")
        assert verify_password("", config.pass_hash)

    def test_frozen(self, tmp_path):
        config = WikiConfig.from_settings(Settings(password="secret", data_dir=tmp_path))
        with pytest.raises(ValidationError):
            config.editable = False
