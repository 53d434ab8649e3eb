import time
from typing import Any, Dict, List, Optional, Sequence

import aiohttp

from core.errors import CirculationError
from core.mirrorclient import MirrorClient
from core.models import CirculationResult, TreasuryBalance, TreasuryBalanceOut
from core.validate import validate_input
from utility.logger import logger


def query_timestamp() -> str:
    # seconds.nanoseconds, so every request in one query reads the same ledger snapshot
    now = time.time_ns()
    return f"{now // 1_000_000_000}.{now % 1_000_000_000:09d}"


def extract_treasury_balance(info: Optional[Dict[str, Any]], treasury: str, token: str) -> Optional[TreasuryBalance]:
    if not info or not info.get("balances"):
        return None
    snapshot = info["balances"][0]
    if not snapshot or not snapshot.get("tokens"):
        return None
    for entry in snapshot["tokens"]:
        if entry.get("token_id") == token:
            balance = entry.get("balance")
            return TreasuryBalance(treasury=treasury, balance=int(balance) if balance is not None else 0)
    return None


async def fetch_treasury_balances(client: MirrorClient, token: str, treasuries: Sequence[str], timestamp: str) -> List[TreasuryBalance]:
    result = []
    for treasury in treasuries:
        info = await client.fetch_account_balance(treasury, timestamp)
        balance = extract_treasury_balance(info, treasury, token)
        if balance is None:
            logger.debug(f"Treasury {treasury} holds no {token}, skipping")
            continue
        result.append(balance)
    return result


def compute_circulating(total_supply: int, treasury_balances: Sequence[TreasuryBalance]) -> int:
    return total_supply - sum(b.balance for b in treasury_balances)


def shape_result(token: str, decimals: int, total_supply: int, circulating: int,
                 treasury_balances: Sequence[TreasuryBalance], timestamp: str, source: str) -> CirculationResult:
    return CirculationResult(
        token=token,
        decimals=decimals,
        total_supply=str(total_supply),
        circulating=str(circulating),
        treasury_balances=[TreasuryBalanceOut(treasury=b.treasury, balance=str(b.balance)) for b in treasury_balances],
        timestamp=timestamp,
        source=source,
    )


async def get_token_circulation(source: str, token: str, treasuries: Optional[Sequence[str]],
                                session: Optional[aiohttp.ClientSession] = None) -> CirculationResult:
    """
    Compute the circulating supply of an HTS token as its total supply less the
    holdings of the given treasury accounts.

    :param source: mirror node host name, or a base URL including the scheme
    :param token: token id in shard.realm.num form
    :param treasuries: treasury account ids whose balances are not circulating
    :param session: optional caller-owned session to pool connections across queries
    :return: the supply figures in smallest token units, as decimal strings
    """
    validate_input(source, token, treasuries)
    treasuries = list(treasuries or [])
    timestamp = query_timestamp()

    try:
        async with MirrorClient(source, session=session) as client:
            supply = await client.fetch_token_supply(token, timestamp)
            treasury_balances = await fetch_treasury_balances(client, token, treasuries, timestamp)
    except CirculationError as e:
        logger.error(f"Error computing circulation for {token}: {str(e)}")
        raise

    circulating = compute_circulating(supply.total_supply, treasury_balances)
    logger.info(f"Token {token} at {timestamp}: total {supply.total_supply}, circulating {circulating}")

    return shape_result(token, supply.decimals, supply.total_supply, circulating, treasury_balances, timestamp, source)
