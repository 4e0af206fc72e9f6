import pytest
from eth_abi import encode as abi_encode
from web3 import AsyncWeb3
from web3.exceptions import Web3Exception
from web3.providers import AsyncHTTPProvider

from chains.ethereum import ethereum
from clients.evm.reader import ContractReader, decode_outputs
from tokens.dto import CallFailed, CallOk
from tokens.functions import CONTRACT_ABI, CONTRACT_FUNCTIONS


WETH = "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2"


@pytest.fixture
def reader():
    w3 = AsyncWeb3(AsyncHTTPProvider("http://127.0.0.1:8545"))
    return ContractReader(ethereum, w3)


def test_decode_string_keeps_raw_bytes():
    data = abi_encode(["bytes"], [b"\xff\xfeBad"])

    assert decode_outputs(["string"], True, data) == CallOk((b"\xff\xfeBad",))


def test_decode_uint():
    data = abi_encode(["uint8"], [18])

    assert decode_outputs(["uint8"], True, data) == CallOk((18,))


def test_decode_failure_cases():
    assert isinstance(decode_outputs(["uint256"], False, b""), CallFailed)
    assert isinstance(decode_outputs(["uint256"], True, b""), CallFailed)
    assert isinstance(decode_outputs(["string"], True, b"\x01\x02"), CallFailed)


async def test_query_contract_batches_calls(reader, fake_multicall, monkeypatch):
    multicall = fake_multicall(
        results=[
            (True, abi_encode(["uint256"], [10**24])),
            (True, abi_encode(["uint8"], [18])),
            (True, abi_encode(["string"], ["Wrapped Ether"])),
            (False, b""),
        ]
    )
    monkeypatch.setattr(reader, "_get_multicall_contract", lambda: multicall)

    results = await reader.query_contract(WETH, CONTRACT_ABI, CONTRACT_FUNCTIONS)

    assert results == {
        "totalSupply": CallOk((10**24,)),
        "decimals": CallOk((18,)),
        "name": CallOk((b"Wrapped Ether",)),
        "symbol": CallFailed("reverted"),
    }
    assert len(multicall.calls) == 4
    assert all(call[0] == WETH and call[1] is True for call in multicall.calls)


async def test_query_contract_transport_error_fails_every_function(
    reader, fake_multicall, monkeypatch
):
    multicall = fake_multicall(error=Web3Exception("node unavailable"))
    monkeypatch.setattr(reader, "_get_multicall_contract", lambda: multicall)

    results = await reader.query_contract(WETH, CONTRACT_ABI, CONTRACT_FUNCTIONS)

    assert set(results) == set(CONTRACT_FUNCTIONS)
    assert all(isinstance(result, CallFailed) for result in results.values())


async def test_unknown_function_is_not_sent(reader, fake_multicall, monkeypatch):
    multicall = fake_multicall(results=[(True, abi_encode(["uint8"], [6]))])
    monkeypatch.setattr(reader, "_get_multicall_contract", lambda: multicall)

    results = await reader.query_contract(
        WETH, CONTRACT_ABI, {"decimals": (), "owner": ()}
    )

    assert results == {
        "owner": CallFailed("function not in abi"),
        "decimals": CallOk((6,)),
    }
    assert len(multicall.calls) == 1


async def test_reader_opens_and_closes_its_own_connection():
    async with ContractReader(ethereum) as reader:
        assert reader.w3 is not None

    assert reader.w3 is None


async def test_reader_leaves_shared_connection_open(reader):
    w3 = reader.w3

    async with reader:
        pass

    assert reader.w3 is w3
