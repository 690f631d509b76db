"""Authentication strategies - produce the auth headers for each outbound call"""

from typing import Optional

from ..config import AuthMode, Config
from .signer import RequestSigner
from .wallet import WalletIdentity, load_wallet


class ApiKeyAuth:
    """Static bearer token, nothing to sign"""

    mode = AuthMode.API_KEY
    wallet: Optional[WalletIdentity] = None

    def __init__(self, api_key: str):
        self._api_key = api_key

    def headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self._api_key}"}

    def __repr__(self):
        return "ApiKeyAuth()"


class WalletAuth:
    """Signed Web3 headers, re-signed for every request"""

    def __init__(self, signer: RequestSigner, mode: AuthMode = AuthMode.WALLET_PRIVATE_KEY):
        self.signer = signer
        self.mode = mode

    @property
    def wallet(self) -> WalletIdentity:
        return self.signer.wallet

    def headers(self) -> dict[str, str]:
        return self.signer.sign().as_headers()

    def __repr__(self):
        return f"WalletAuth(mode={self.mode.value!r}, address={self.wallet.address!r})"


def create_auth(config: Config):
    """
    Select the auth mode and build its strategy.

    Raises ConfigError when nothing is configured and WalletError when the
    wallet can't be loaded. Both are fatal at startup.
    """
    mode = config.validate()

    if mode is AuthMode.API_KEY:
        return ApiKeyAuth(config.API_KEY)

    wallet = load_wallet(config)
    return WalletAuth(RequestSigner(wallet, config.WALLET_CHAIN), mode)
