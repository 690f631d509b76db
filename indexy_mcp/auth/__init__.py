from .wallet import WalletIdentity, load_wallet
from .signer import RequestSigner, SignedAuthHeaders
from .strategy import ApiKeyAuth, WalletAuth, create_auth

__all__ = [
    "WalletIdentity",
    "load_wallet",
    "RequestSigner",
    "SignedAuthHeaders",
    "ApiKeyAuth",
    "WalletAuth",
    "create_auth",
]
