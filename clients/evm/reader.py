import asyncio
import logging
from collections.abc import Iterable, Mapping

from aiohttp import ClientError
from eth_abi.abi import decode as abi_decode
from eth_abi.exceptions import DecodingError
from web3 import AsyncWeb3
from web3.exceptions import Web3Exception

from clients.evm.base import BaseWeb3Client
from tokens.dto import CallFailed, CallOk, FunctionCallResult
from tokens.functions import output_types


module_logger = logging.getLogger(__name__)

# ABI "string" and "bytes" share an encoding. Strings are decoded as bytes so
# that text which is not valid UTF-8 still reaches the caller.
_RAW_TYPES = {"string": "bytes"}


def decode_outputs(types: list[str], success: bool, data: bytes) -> FunctionCallResult:
    if not success:
        return CallFailed("reverted")
    if not data:
        return CallFailed("empty return data")

    try:
        values = abi_decode([_RAW_TYPES.get(t, t) for t in types], data)
    except (DecodingError, OverflowError, ValueError) as e:
        return CallFailed(f"decode error: {e}")

    return CallOk(tuple(values))


class ContractReader(BaseWeb3Client):
    """Runs a batch of read-only calls against one contract through Multicall3."""

    async def query_contract(
        self,
        contract_address: str,
        abi: Iterable[dict],
        functions: Mapping[str, Iterable],
    ) -> dict[str, FunctionCallResult]:
        abi = list(abi)
        target = AsyncWeb3.to_checksum_address(contract_address)
        contract = self._get_contract(target, abi)

        results: dict[str, FunctionCallResult] = {}
        names: list[str] = []
        calls = []

        for name, args in functions.items():
            if output_types(abi, name) is None:
                results[name] = CallFailed("function not in abi")
                continue
            names.append(name)
            calls.append(
                self._create_call(
                    target,
                    contract.get_function_by_name(name)(*args)._encode_transaction_data()
                )
            )

        if not calls:
            return results

        multicall = self._get_multicall_contract()

        try:
            raw = await multicall.functions.aggregate3(calls).call()
        except (Web3Exception, ClientError, asyncio.TimeoutError) as e:
            module_logger.warning(
                "Multicall to %s on %s failed: %s",
                target, self.chain_config.name, e
            )
            for name in names:
                results[name] = CallFailed(f"call error: {e}")
            return results

        for name, (success, data) in zip(names, raw):
            results[name] = decode_outputs(output_types(abi, name), success, data)

        return results
