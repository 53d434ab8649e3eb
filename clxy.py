"""Prints the circulating supply of the official $CLXY token."""
import asyncio
import json

from core.circulation import get_token_circulation

SOURCE = "mainnet-public.mirrornode.hedera.com"
TOKEN = "0.0.859814"
TREASURIES = [
    "0.0.849428",
    "0.0.859877",
    "0.0.859897",
    "0.0.859903",
    "0.0.859906",
    "0.0.859908",
    "0.0.859910",
    "0.0.859911",
]


async def get_clxy_circulation():
    result = await get_token_circulation(SOURCE, TOKEN, TREASURIES)
    print(json.dumps(result.to_dict(), indent=2))


if __name__ == "__main__":
    asyncio.run(get_clxy_circulation())
