"""Tests for wallet loading and the auth strategy selector"""

import json

import pytest
from eth_account import Account

from indexy_mcp.auth import ApiKeyAuth, WalletAuth, create_auth, load_wallet
from indexy_mcp.auth.wallet import from_keystore, from_private_key
from indexy_mcp.config import AuthMode, Config
from indexy_mcp.errors import ConfigError, WalletError


@pytest.fixture
def keystore_file(tmp_path, private_key):
    keystore = Account.encrypt(private_key, "hunter2", kdf="pbkdf2", iterations=1000)
    path = tmp_path / "keystore.json"
    path.write_text(json.dumps(keystore))
    return path


def test_private_key_wallet(private_key):
    wallet = from_private_key(private_key)
    assert wallet.address == Account.from_key(private_key).address


def test_private_key_with_and_without_prefix(private_key):
    bare = private_key[2:] if private_key.startswith("0x") else private_key
    assert from_private_key(bare).address == from_private_key("0x" + bare).address


@pytest.mark.parametrize("bad_key", ["not-a-key", "0x1234", "0x" + "zz" * 32])
def test_malformed_private_key(bad_key):
    with pytest.raises(WalletError) as exc:
        from_private_key(bad_key)
    assert bad_key not in str(exc.value)


def test_keystore_wallet(keystore_file, private_key):
    wallet = from_keystore(str(keystore_file), "hunter2")
    assert wallet.address == Account.from_key(private_key).address


def test_keystore_wrong_password(keystore_file):
    with pytest.raises(WalletError, match="Failed to decrypt"):
        from_keystore(str(keystore_file), "wrong")


def test_keystore_missing(tmp_path):
    with pytest.raises(WalletError, match="Keystore not found"):
        from_keystore(str(tmp_path / "nope.json"), "hunter2")


def test_keystore_corrupt(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json")
    with pytest.raises(WalletError, match="Could not read keystore"):
        from_keystore(str(path), "")


def test_wallet_errors_are_config_errors():
    assert issubclass(WalletError, ConfigError)


def test_load_wallet_logs_address_not_key(private_key, capsys):
    config = Config({"INDEXY_WALLET_PRIVATE_KEY": private_key, "INDEXY_WALLET_CHAIN": "ethereum"})
    wallet = load_wallet(config)

    err = capsys.readouterr().err
    assert wallet.address in err
    assert "chain: ethereum" in err
    assert private_key not in err
    assert private_key not in repr(wallet)


def test_load_wallet_from_keystore_logs_no_password(keystore_file, capsys):
    config = Config({
        "INDEXY_WALLET_KEYSTORE_PATH": str(keystore_file),
        "INDEXY_WALLET_PASSWORD": "hunter2",
    })
    wallet = load_wallet(config)

    err = capsys.readouterr().err
    assert "Decrypting wallet keystore" in err
    assert wallet.address in err
    assert "hunter2" not in err


def test_create_auth_api_key():
    auth = create_auth(Config({"INDEXY_API_KEY": "secret"}))
    assert isinstance(auth, ApiKeyAuth)
    assert auth.mode is AuthMode.API_KEY
    assert auth.wallet is None
    assert auth.headers() == {"Authorization": "Bearer secret"}
    assert "secret" not in repr(auth)


def test_create_auth_prefers_private_key(private_key, tmp_path):
    # The keystore path doesn't exist, so it must never be touched
    auth = create_auth(Config({
        "INDEXY_API_KEY": "secret",
        "INDEXY_WALLET_KEYSTORE_PATH": str(tmp_path / "missing.json"),
        "INDEXY_WALLET_PRIVATE_KEY": private_key,
    }))
    assert isinstance(auth, WalletAuth)
    assert auth.mode is AuthMode.WALLET_PRIVATE_KEY


def test_create_auth_keystore(keystore_file):
    auth = create_auth(Config({
        "INDEXY_WALLET_KEYSTORE_PATH": str(keystore_file),
        "INDEXY_WALLET_PASSWORD": "hunter2",
        "INDEXY_API_KEY": "secret",
    }))
    assert auth.mode is AuthMode.WALLET_KEYSTORE
    assert "x-web3-signature" in auth.headers()


def test_create_auth_missing_keystore_is_fatal(tmp_path):
    with pytest.raises(WalletError):
        create_auth(Config({"INDEXY_WALLET_KEYSTORE_PATH": str(tmp_path / "missing.json")}))


def test_create_auth_nothing_configured():
    with pytest.raises(ConfigError):
        create_auth(Config({}))
