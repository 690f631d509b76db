"""
x402 payment hooks

Some Indexy endpoints answer 402 Payment Required. In wallet modes the httpx
client can be wrapped with the x402 event hooks, which pay with the loaded
wallet and retry the request. Without them a 402 is just a failed request.
"""

import sys
from typing import Optional

from ..config import Config


def payment_hooks(config: Config, auth) -> Optional[dict]:
    """Build httpx event hooks for x402 payments, or None when unavailable"""
    if not config.X402_ENABLED or not auth.mode.is_wallet:
        return None

    try:
        from x402.clients.httpx import x402_payment_hooks

        hooks = x402_payment_hooks(auth.wallet.account, max_value=config.X402_MAX_VALUE)
    except Exception as e:
        print(f"⚠️ x402 payments disabled ({type(e).__name__}: {e})", file=sys.stderr)
        return None

    print("💳 x402 payment hooks enabled", file=sys.stderr)
    return hooks
