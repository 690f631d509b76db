"""Tests for configuration parsing and auth mode selection"""

import os

import pytest

from indexy_mcp.config import AuthMode, Config
from indexy_mcp.errors import ConfigError


PK = "0x" + "11" * 32


def test_defaults():
    config = Config({"INDEXY_API_KEY": "k"})
    assert config.API_URL == "https://indexy.co"
    assert config.WALLET_CHAIN == "base"
    assert config.WALLET_PASSWORD == ""
    assert config.HTTP_TIMEOUT == 30.0
    assert config.X402_ENABLED is True
    assert config.X402_MAX_VALUE is None


def test_api_url_trailing_slash_stripped():
    config = Config({"INDEXY_API_URL": "http://localhost:3000/", "INDEXY_API_KEY": "k"})
    assert config.API_URL == "http://localhost:3000"


@pytest.mark.parametrize(
    "env, expected",
    [
        ({"INDEXY_API_KEY": "k"}, AuthMode.API_KEY),
        ({"INDEXY_WALLET_KEYSTORE_PATH": "/ks.json"}, AuthMode.WALLET_KEYSTORE),
        ({"INDEXY_WALLET_PRIVATE_KEY": PK}, AuthMode.WALLET_PRIVATE_KEY),
        # Precedence: private key > keystore > API key
        (
            {
                "INDEXY_API_KEY": "k",
                "INDEXY_WALLET_KEYSTORE_PATH": "/ks.json",
                "INDEXY_WALLET_PRIVATE_KEY": PK,
            },
            AuthMode.WALLET_PRIVATE_KEY,
        ),
        (
            {"INDEXY_API_KEY": "k", "INDEXY_WALLET_KEYSTORE_PATH": "/ks.json"},
            AuthMode.WALLET_KEYSTORE,
        ),
        ({"INDEXY_API_KEY": "k", "INDEXY_WALLET_PRIVATE_KEY": PK}, AuthMode.WALLET_PRIVATE_KEY),
    ],
)
def test_auth_mode_precedence(env, expected):
    assert Config(env).validate() is expected


def test_no_auth_configured_is_fatal():
    config = Config({"INDEXY_WALLET_PASSWORD": "only-a-password"})
    assert config.auth_mode is AuthMode.NONE
    with pytest.raises(ConfigError) as exc:
        config.validate()
    message = str(exc.value)
    assert "INDEXY_WALLET_PRIVATE_KEY" in message
    assert "INDEXY_API_KEY" in message


def test_empty_values_count_as_unset():
    config = Config({"INDEXY_WALLET_PRIVATE_KEY": "", "INDEXY_API_KEY": "  "})
    assert config.auth_mode is AuthMode.NONE


def test_wallet_modes_flagged():
    assert AuthMode.WALLET_PRIVATE_KEY.is_wallet
    assert AuthMode.WALLET_KEYSTORE.is_wallet
    assert not AuthMode.API_KEY.is_wallet


def test_numeric_settings():
    config = Config({
        "INDEXY_API_KEY": "k",
        "INDEXY_HTTP_TIMEOUT": "5.5",
        "INDEXY_X402_MAX_VALUE": "100000",
        "INDEXY_X402_ENABLED": "false",
    })
    assert config.HTTP_TIMEOUT == 5.5
    assert config.X402_MAX_VALUE == 100000
    assert config.X402_ENABLED is False


@pytest.mark.parametrize("value", ["soon", "-1", "0"])
def test_bad_timeout_is_fatal(value):
    with pytest.raises(ConfigError, match="INDEXY_HTTP_TIMEOUT"):
        Config({"INDEXY_API_KEY": "k", "INDEXY_HTTP_TIMEOUT": value})


def test_from_env_reads_dotenv_in_working_directory(tmp_path, monkeypatch):
    (tmp_path / ".env").write_text("INDEXY_API_KEY=from-dotenv\n")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(os, "environ", {})

    config = Config.from_env()

    assert config.API_KEY == "from-dotenv"
    assert config.auth_mode is AuthMode.API_KEY


def test_no_mapping_reads_process_environment(monkeypatch):
    monkeypatch.setattr(os, "environ", {"INDEXY_API_KEY": "from-process"})
    assert Config().API_KEY == "from-process"
