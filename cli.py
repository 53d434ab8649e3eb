"""
Command line tool printing the circulating supply of an HTS token.

    python cli.py <mirror host> <token id> [<treasury id> ...]

The treasury accounts hold non-circulating tokens; their balances are
subtracted from the token's total supply.
"""
import argparse
import asyncio
import json
import sys

from core.circulation import get_token_circulation
from core.errors import CirculationError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Compute the circulating supply of an HTS token from a mirror node.",
    )
    parser.add_argument("source", help="mirror node host name (or base URL) to query")
    parser.add_argument("token", help="token id in shard.realm.num format")
    parser.add_argument("treasuries", nargs="*", help="treasury account ids holding non-circulating tokens")
    return parser


async def run(args: argparse.Namespace) -> str:
    result = await get_token_circulation(args.source, args.token, args.treasuries)
    return json.dumps(result.to_dict(), separators=(",", ":"))


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    try:
        output = asyncio.run(run(args))
    except CirculationError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
