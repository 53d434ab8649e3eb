import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer


class FakeMirrorNode:
    """Minimal stand-in for the mirror node token and balance endpoints."""

    def __init__(self):
        self.tokens = {}
        self.accounts = {}
        self.requests = []

    def add_token(self, token, total_supply, decimals=None, status=200):
        body = {"token_id": token, "total_supply": total_supply}
        if decimals is not None:
            body["decimals"] = decimals
        self.tokens[token] = (status, body)

    def add_account(self, account, tokens=None, status=200, balances=None):
        if balances is None:
            balances = [{"account": account, "balance": 0, "tokens": tokens or []}]
        self.accounts[account] = (status, {"timestamp": None, "balances": balances, "links": {"next": None}})

    async def handle_token(self, request):
        token = request.match_info["token_id"]
        self.requests.append(("token", token, dict(request.query)))
        status, body = self.tokens.get(token, (404, {"_status": {"messages": [{"message": "Not found"}]}}))
        return web.json_response(body, status=status)

    async def handle_balances(self, request):
        account = request.query.get("account.id")
        self.requests.append(("balances", account, dict(request.query)))
        status, body = self.accounts.get(account, (200, {"timestamp": None, "balances": [], "links": {"next": None}}))
        return web.json_response(body, status=status)

    def app(self) -> web.Application:
        app = web.Application()
        app.router.add_get("/api/v1/tokens/{token_id}", self.handle_token)
        app.router.add_get("/api/v1/balances", self.handle_balances)
        return app


@pytest.fixture
def mirror_node():
    return FakeMirrorNode()


@pytest.fixture
async def mirror_source(mirror_node):
    server = TestServer(mirror_node.app())
    await server.start_server()
    yield str(server.make_url("")).rstrip("/")
    await server.close()
