"""Configuration loader - reads from environment / .env file"""

import os
from enum import Enum
from typing import Mapping, Optional

from dotenv import find_dotenv, load_dotenv

from .errors import ConfigError


DEFAULT_API_URL = "https://indexy.co"
DEFAULT_WALLET_CHAIN = "base"
DEFAULT_HTTP_TIMEOUT = 30.0


class AuthMode(str, Enum):
    """How outbound requests are authenticated"""

    WALLET_PRIVATE_KEY = "web3-pk"
    WALLET_KEYSTORE = "web3-keystore"
    API_KEY = "apikey"
    NONE = "none"

    @property
    def is_wallet(self) -> bool:
        return self in (AuthMode.WALLET_PRIVATE_KEY, AuthMode.WALLET_KEYSTORE)


def _get(env: Mapping[str, str], name: str) -> Optional[str]:
    # Empty values count as unset
    value = env.get(name)
    if value is None:
        return None
    value = value.strip()
    return value or None


def _parse_bool(raw: Optional[str], default: bool) -> bool:
    if raw is None:
        return default
    return raw.lower() not in ("0", "false", "no", "off")


class Config:
    """
    Server settings.

    Built from an environment mapping so tests can pass a plain dict
    instead of touching os.environ. Use Config.from_env() in the process.
    """

    def __init__(self, env: Optional[Mapping[str, str]] = None):
        env = os.environ if env is None else env

        # Remote API
        self.API_URL = (_get(env, "INDEXY_API_URL") or DEFAULT_API_URL).rstrip("/")
        self.API_KEY = _get(env, "INDEXY_API_KEY")

        # Web3 wallet auth
        self.WALLET_PRIVATE_KEY = _get(env, "INDEXY_WALLET_PRIVATE_KEY")
        self.WALLET_KEYSTORE_PATH = _get(env, "INDEXY_WALLET_KEYSTORE_PATH")
        # Password is not stripped, whitespace may be part of it
        self.WALLET_PASSWORD = env.get("INDEXY_WALLET_PASSWORD") or ""
        self.WALLET_CHAIN = _get(env, "INDEXY_WALLET_CHAIN") or DEFAULT_WALLET_CHAIN

        # HTTP client
        self.HTTP_TIMEOUT = self._parse_number(
            env, "INDEXY_HTTP_TIMEOUT", float, DEFAULT_HTTP_TIMEOUT
        )

        # x402 payments (wallet modes only)
        self.X402_ENABLED = _parse_bool(_get(env, "INDEXY_X402_ENABLED"), True)
        self.X402_MAX_VALUE = self._parse_number(env, "INDEXY_X402_MAX_VALUE", int, None)

    @classmethod
    def from_env(cls) -> "Config":
        """Load .env from the working directory (if present) on top of the process environment"""
        load_dotenv(find_dotenv(usecwd=True))
        return cls(os.environ)

    @staticmethod
    def _parse_number(env, name, kind, default):
        raw = _get(env, name)
        if raw is None:
            return default
        try:
            value = kind(raw)
        except ValueError:
            raise ConfigError(f"{name} must be a number, got {raw!r}") from None
        if value <= 0:
            raise ConfigError(f"{name} must be positive, got {raw!r}")
        return value

    @property
    def auth_mode(self) -> AuthMode:
        """Pick the auth mode: private key, then keystore, then API key"""
        if self.WALLET_PRIVATE_KEY:
            return AuthMode.WALLET_PRIVATE_KEY
        if self.WALLET_KEYSTORE_PATH:
            return AuthMode.WALLET_KEYSTORE
        if self.API_KEY:
            return AuthMode.API_KEY
        return AuthMode.NONE

    def validate(self) -> AuthMode:
        """Check that an auth method is configured and return it"""
        mode = self.auth_mode
        if mode is AuthMode.NONE:
            raise ConfigError(
                "No authentication configured. Set one of: "
                "INDEXY_WALLET_PRIVATE_KEY, "
                "INDEXY_WALLET_KEYSTORE_PATH + INDEXY_WALLET_PASSWORD, "
                "or INDEXY_API_KEY"
            )
        return mode
