"""
Request Signer

Every wallet-authenticated request carries a freshly signed message:

    Indexy API Authentication
    Timestamp: <milliseconds since epoch>
    Address: <wallet address>

The message goes out base64 encoded since header values can't hold newlines.
The API rejects stale timestamps, so headers are never reused.
"""

import base64
import time
from dataclasses import dataclass
from typing import Callable

from .wallet import WalletIdentity


MESSAGE_PREAMBLE = "Indexy API Authentication"


def build_message(timestamp: str, address: str) -> str:
    return f"{MESSAGE_PREAMBLE}\nTimestamp: {timestamp}\nAddress: {address}"


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


@dataclass(frozen=True)
class SignedAuthHeaders:
    address: str
    chain: str
    signature: str
    message_b64: str
    timestamp: str

    @property
    def message(self) -> str:
        return base64.b64decode(self.message_b64).decode("utf-8")

    def as_headers(self) -> dict[str, str]:
        return {
            "x-web3-address": self.address,
            "x-web3-chain": self.chain,
            "x-web3-signature": self.signature,
            "x-web3-message": self.message_b64,
            "x-web3-timestamp": self.timestamp,
        }


class RequestSigner:
    """Signs a timestamped auth message with the loaded wallet"""

    def __init__(
        self,
        wallet: WalletIdentity,
        chain: str,
        clock: Callable[[], int] = _now_ms,
    ):
        self.wallet = wallet
        self.chain = chain
        self._clock = clock

    def sign(self) -> SignedAuthHeaders:
        timestamp = str(self._clock())
        message = build_message(timestamp, self.wallet.address)
        signature = self.wallet.sign_message(message)

        return SignedAuthHeaders(
            address=self.wallet.address,
            chain=self.chain,
            signature=signature,
            message_b64=base64.b64encode(message.encode("utf-8")).decode("ascii"),
            timestamp=timestamp,
        )
