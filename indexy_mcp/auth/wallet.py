"""
Wallet Loader

Builds the signing identity used for Web3 request authentication, either
straight from a hex private key or by decrypting an encrypted JSON keystore.
Loaded once at startup; only the address is ever printed.
"""

import json
import sys
from pathlib import Path

from eth_account import Account
from eth_account.messages import encode_defunct
from eth_account.signers.local import LocalAccount

from ..config import AuthMode, Config
from ..errors import WalletError


class WalletIdentity:
    """An address plus the ability to sign messages with its private key"""

    def __init__(self, account: LocalAccount):
        self._account = account

    @property
    def address(self) -> str:
        return self._account.address

    @property
    def account(self) -> LocalAccount:
        """Underlying eth_account signer (handed to the x402 payment hooks)"""
        return self._account

    def sign_message(self, message: str) -> str:
        """EIP-191 personal_sign of a text message, returned as 0x-hex"""
        signed = self._account.sign_message(encode_defunct(text=message))
        return "0x" + bytes(signed.signature).hex()

    def __repr__(self):
        return f"WalletIdentity(address={self.address!r})"


def from_private_key(private_key: str) -> WalletIdentity:
    try:
        account = Account.from_key(private_key)
    except Exception as e:
        # eth_account raises ValueError, binascii.Error, ... depending on the input;
        # the message is not echoed since it may contain the key.
        raise WalletError(
            f"INDEXY_WALLET_PRIVATE_KEY is not a valid private key ({type(e).__name__})"
        ) from None
    return WalletIdentity(account)


def from_keystore(path: str, password: str = "") -> WalletIdentity:
    """
    Decrypt a JSON keystore (geth / ethers v3 format).

    Args:
        path: Location of the keystore file
        password: Keystore password, empty string if none
    """
    keystore_path = Path(path).expanduser()
    if not keystore_path.is_file():
        raise WalletError(f"Keystore not found: {path}")

    try:
        keystore = json.loads(keystore_path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        raise WalletError(f"Could not read keystore {path}: {e}") from e

    try:
        private_key = Account.decrypt(keystore, password or "")
    except Exception as e:
        # Wrong password surfaces as a MAC mismatch ValueError
        raise WalletError(f"Failed to decrypt keystore {path}: {e}") from e

    return WalletIdentity(Account.from_key(private_key))


def load_wallet(config: Config) -> WalletIdentity:
    """Load the wallet for the configured wallet auth mode"""
    mode = config.auth_mode

    if mode is AuthMode.WALLET_PRIVATE_KEY:
        wallet = from_private_key(config.WALLET_PRIVATE_KEY)
        source = "private key"
    elif mode is AuthMode.WALLET_KEYSTORE:
        print("🔐 Decrypting wallet keystore...", file=sys.stderr)
        wallet = from_keystore(config.WALLET_KEYSTORE_PATH, config.WALLET_PASSWORD)
        source = "keystore"
    else:
        raise WalletError(f"Auth mode {mode.value} does not use a wallet")

    print(
        f"🔐 Wallet loaded from {source}: {wallet.address} (chain: {config.WALLET_CHAIN})",
        file=sys.stderr,
    )
    return wallet
