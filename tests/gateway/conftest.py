"""
Fixtures providing an in-process gRPC node for gateway tests.
"""
import inspect
from collections import namedtuple

import grpc
import pytest
import pytest_asyncio

from cosmos_signer import proto
from cosmos_signer.gateway import grpc_gateway as paths
from cosmos_signer.gateway.contact import Contact
from cosmos_signer.gateway.grpc_gateway import GrpcGateway

Failure = namedtuple("Failure", ["code", "details"])

# Request class for each method the gateway calls
METHODS = {
    paths.GET_SYNCING: proto.GetSyncingRequest,
    paths.GET_LATEST_BLOCK: proto.GetLatestBlockRequest,
    paths.GET_BLOCK_BY_HEIGHT: proto.GetBlockByHeightRequest,
    paths.CONSENSUS_PARAMS: proto.ConsensusParamsRequest,
    paths.LEGACY_PARAMS: proto.LegacyParamsRequest,
    paths.ACCOUNT: proto.QueryAccountRequest,
    paths.ALL_BALANCES: proto.QueryAllBalancesRequest,
    paths.BROADCAST_TX: proto.BroadcastTxRequest,
    paths.SIMULATE: proto.SimulateRequest,
    paths.GET_TX: proto.GetTxRequest,
}


class FakeNode:
    """
    Scriptable stand-in for a Cosmos node's gRPC services.

    ``responses`` maps a method path to a response message, a
    :class:`Failure`, or an async callable taking the request. Methods
    without a response abort with ``UNIMPLEMENTED``. Every request received
    is recorded in ``requests``.
    """

    def __init__(self):
        self.url = None
        self.responses = {}
        self.requests = {}

    def respond(self, path, response):
        self.responses[path] = response

    def fail(self, path, code, details=""):
        self.responses[path] = Failure(code, details)

    def handlers(self):
        services = {}
        for path, request_cls in METHODS.items():
            service, method = path.lstrip("/").split("/")
            services.setdefault(service, {})[method] = grpc.unary_unary_rpc_method_handler(
                self._handler(path),
                request_deserializer=request_cls.FromString,
                response_serializer=lambda message: message.SerializeToString(),
            )
        return [
            grpc.method_handlers_generic_handler(service, methods)
            for service, methods in services.items()
        ]

    def _handler(self, path):
        async def handle(request, context):
            self.requests.setdefault(path, []).append(request)
            response = self.responses.get(path)
            if response is None:
                await context.abort(grpc.StatusCode.UNIMPLEMENTED, f"{path} is not implemented")
            if isinstance(response, Failure):
                await context.abort(response.code, response.details)
            if inspect.iscoroutinefunction(response):
                response = await response(request)
            return response
        return handle


@pytest_asyncio.fixture
async def fake_node():
    node = FakeNode()
    server = grpc.aio.server()
    server.add_generic_rpc_handlers(node.handlers())
    port = server.add_insecure_port("127.0.0.1:0")
    await server.start()
    node.url = f"http://127.0.0.1:{port}"
    yield node
    await server.stop(None)


@pytest.fixture
def gateway(fake_node):
    return GrpcGateway(Contact(fake_node.url, timeout=5.0, chain_prefix="cosmos"))
