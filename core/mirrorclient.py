import asyncio
from typing import Any, Dict, Optional, Tuple

import aiohttp

from core.errors import AccountNotFound, TokenNotFound, TransportError
from core.models import TokenSupplyInfo
from utility.logger import logger


class MirrorClient:
    """Read-only client for the mirror node REST API.

    One instance is meant to serve a single circulation query: every request
    goes through the same session so the TLS connection to the mirror node is
    kept alive between the token lookup and the treasury balance lookups.
    """

    def __init__(self, source: str, session: Optional[aiohttp.ClientSession] = None):
        self.source = source
        base = source.rstrip("/")
        self.base_url = base if "://" in base else f"https://{base}"
        self._session = session
        self._owns_session = session is None

    async def __aenter__(self) -> "MirrorClient":
        if self._session is None:
            self._session = aiohttp.ClientSession(connector=aiohttp.TCPConnector(keepalive_timeout=30))
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()

    async def close(self):
        if self._owns_session and self._session is not None:
            await self._session.close()
            self._session = None

    async def _get(self, path: str, params: Dict[str, str]) -> Tuple[int, Any]:
        if self._session is None:
            raise RuntimeError("MirrorClient used outside of its context manager")
        url = f"{self.base_url}{path}"
        logger.debug(f"GET {url} {params}")
        try:
            async with self._session.get(url, params=params) as response:
                if response.status != 200:
                    return response.status, None
                return response.status, await response.json(content_type=None)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise TransportError(f"Unable to reach mirror node {self.source}: {str(e) or type(e).__name__}") from e

    async def fetch_token_supply(self, token: str, timestamp: str) -> TokenSupplyInfo:
        """
        Fetch the total supply and decimal places of an HTS token.

        :param token: token id in shard.realm.num form
        :param timestamp: consensus timestamp (seconds.nanoseconds) the supply is read at
        :return: the token's total supply in smallest units and its decimal places
        """
        status, info = await self._get(f"/api/v1/tokens/{token}", {"timestamp": timestamp})
        if status != 200:
            raise TokenNotFound(token, status)
        decimals = info.get("decimals")
        return TokenSupplyInfo(
            total_supply=int(info["total_supply"]),
            decimals=int(decimals) if decimals is not None else 0,
        )

    async def fetch_account_balance(self, account: str, timestamp: str) -> Dict[str, Any]:
        """
        Fetch the raw balance snapshot of an account, including its token balances.

        Only the first page of the balances endpoint is read.
        """
        status, info = await self._get("/api/v1/balances", {"account.id": account, "timestamp": timestamp})
        if status != 200:
            raise AccountNotFound(account, status)
        return info
