import pytest

from core.errors import AccountNotFound, TokenNotFound, TransportError
from core.mirrorclient import MirrorClient

TIMESTAMP = "1700000000.123456789"


def test_host_name_implies_https():
    assert MirrorClient("mainnet-public.mirrornode.hedera.com").base_url == "https://mainnet-public.mirrornode.hedera.com"


def test_base_url_with_scheme_is_kept():
    assert MirrorClient("http://localhost:5551/").base_url == "http://localhost:5551"


def test_trailing_slash_on_bare_host_is_dropped():
    assert MirrorClient("example.mirror/").base_url == "https://example.mirror"


async def test_fetch_token_supply(mirror_node, mirror_source):
    mirror_node.add_token("0.0.5", "9999999999999999999", decimals="8")
    async with MirrorClient(mirror_source) as client:
        supply = await client.fetch_token_supply("0.0.5", TIMESTAMP)
    assert supply.total_supply == 9999999999999999999
    assert supply.decimals == 8
    assert mirror_node.requests == [("token", "0.0.5", {"timestamp": TIMESTAMP})]


async def test_fetch_token_supply_defaults_decimals(mirror_node, mirror_source):
    mirror_node.add_token("0.0.5", "10")
    async with MirrorClient(mirror_source) as client:
        supply = await client.fetch_token_supply("0.0.5", TIMESTAMP)
    assert supply.decimals == 0


async def test_fetch_token_supply_not_found(mirror_source):
    async with MirrorClient(mirror_source) as client:
        with pytest.raises(TokenNotFound) as excinfo:
            await client.fetch_token_supply("0.0.404", TIMESTAMP)
    assert excinfo.value.status_code == 404
    assert str(excinfo.value) == "HTS Token 0.0.404 was not found, code: 404"


async def test_fetch_account_balance(mirror_node, mirror_source):
    mirror_node.add_account("0.0.7", tokens=[{"token_id": "0.0.5", "balance": 42}])
    async with MirrorClient(mirror_source) as client:
        info = await client.fetch_account_balance("0.0.7", TIMESTAMP)
    assert info["balances"][0]["tokens"] == [{"token_id": "0.0.5", "balance": 42}]
    assert mirror_node.requests == [("balances", "0.0.7", {"account.id": "0.0.7", "timestamp": TIMESTAMP})]


async def test_fetch_account_balance_error_status(mirror_node, mirror_source):
    mirror_node.add_account("0.0.7", status=400)
    async with MirrorClient(mirror_source) as client:
        with pytest.raises(AccountNotFound) as excinfo:
            await client.fetch_account_balance("0.0.7", TIMESTAMP)
    assert excinfo.value.status_code == 400
    assert "Balance for 0.0.7 was not found, code: 400" == str(excinfo.value)


async def test_connection_failure_is_transport_error():
    async with MirrorClient("http://127.0.0.1:1") as client:
        with pytest.raises(TransportError):
            await client.fetch_token_supply("0.0.5", TIMESTAMP)


async def test_requires_context_manager():
    with pytest.raises(RuntimeError):
        await MirrorClient("example.mirror").fetch_token_supply("0.0.5", TIMESTAMP)
