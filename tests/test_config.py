"""
Tests for configuration loading.
"""

import json
from datetime import timedelta

import pytest

from tokenauth.core.config import Config, TokenConfig
from tokenauth.util.config import (
    get_config_value,
    parse_duration_string,
    parse_mapping_string,
)

SECRET = "config-test-secret-0123456789abcdef"


class TestConfigHelpers:
    """Test configuration parsing helpers"""

    def test_parse_duration_string(self):
        assert parse_duration_string("30s") == timedelta(seconds=30)
        assert parse_duration_string("5m") == timedelta(minutes=5)
        assert parse_duration_string("2h") == timedelta(hours=2)
        assert parse_duration_string("1d") == timedelta(days=1)

        with pytest.raises(ValueError):
            parse_duration_string("soon")

    def test_parse_mapping_string(self):
        mapping = parse_mapping_string("uId=id, cId=companyId,")

        assert mapping == {"uId": "id", "cId": "companyId"}
        assert list(mapping) == ["uId", "cId"]

        with pytest.raises(ValueError):
            parse_mapping_string("uId")

    def test_get_config_value(self, monkeypatch):
        monkeypatch.setenv("TOKENAUTH_EXPIRY", "10m")
        monkeypatch.setenv("TOKENAUTH_FLAG", "yes")

        assert get_config_value("expiry", cast_type=timedelta) == timedelta(minutes=10)
        assert get_config_value("flag", cast_type=bool) is True
        assert get_config_value("missing", "fallback") == "fallback"


class TestConfig:
    """Test Config dataclass"""

    def test_defaults(self):
        config = Config(token_config=TokenConfig(secret_key=SECRET))

        assert config.payload == {}
        assert config.scope == {}
        assert config.refresh_token_expiry == timedelta(days=30)
        assert config.token_config.expires_in == timedelta(minutes=20)
        assert config.validate() is True

    def test_secret_from_env(self, monkeypatch):
        monkeypatch.setenv("TOKENAUTH_SECRET_KEY", SECRET)

        assert TokenConfig().secret_key == SECRET

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("TOKENAUTH_PAYLOAD", "uId=id,cId=companyId")
        monkeypatch.setenv("TOKENAUTH_SCOPE", "admin=a")
        monkeypatch.setenv("TOKENAUTH_SECRET_KEY", SECRET)
        monkeypatch.setenv("TOKENAUTH_ACCESS_TOKEN_EXPIRY", "15m")
        monkeypatch.setenv("TOKENAUTH_REFRESH_TOKEN_EXPIRY", "7d")
        monkeypatch.setenv("TOKENAUTH_REFRESH_TOKEN_COOKIE", "rt")

        config = Config.from_env()

        assert config.payload == {"uId": "id", "cId": "companyId"}
        assert config.scope == {"admin": "a"}
        assert config.refresh_token_cookie == "rt"
        assert config.refresh_token_expiry == timedelta(days=7)
        assert config.token_config.secret_key == SECRET
        assert config.token_config.expires_in == timedelta(minutes=15)

    def test_from_yaml_file(self, tmp_path):
        path = tmp_path / "auth.yaml"
        path.write_text(
            "payload:\n"
            "  uId: id\n"
            "scope:\n"
            "  admin: a\n"
            "refresh_token_expiry: 12h\n"
            "token_config:\n"
            f"  secret_key: {SECRET}\n"
            "  expires_in: 5m\n",
            encoding="utf-8",
        )

        config = Config.from_file(str(path))

        assert config.payload == {"uId": "id"}
        assert config.refresh_token_expiry == timedelta(hours=12)
        assert config.token_config.expires_in == timedelta(minutes=5)

    def test_from_json_file(self, tmp_path):
        path = tmp_path / "auth.json"
        path.write_text(json.dumps({
            "payload": {"uId": "id"},
            "token_config": {"secret_key": SECRET, "expires_in": 600},
        }), encoding="utf-8")

        config = Config.from_file(str(path))

        assert config.token_config.expires_in == timedelta(minutes=10)

    def test_unknown_keys_rejected(self):
        with pytest.raises(ValueError):
            Config.from_dict({"payloads": {}})

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            Config.from_file(str(tmp_path / "missing.yaml"))

    def test_validate(self):
        with pytest.raises(ValueError):
            Config(payload={"uId": "id", "userId": "id"},
                   token_config=TokenConfig(secret_key=SECRET)).validate()

        with pytest.raises(ValueError):
            Config(refresh_token_expiry=timedelta(0),
                   token_config=TokenConfig(secret_key=SECRET)).validate()
