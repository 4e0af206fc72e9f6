from abc import ABC

from aiohttp import ClientTimeout
from web3 import AsyncWeb3
from web3.providers import AsyncHTTPProvider

from chains.dto import ChainConfig
from config import settings


class BaseWeb3Client(ABC):
    MULTICALL3_ABI = [
        {
            "inputs": [
                {
                    "components": [
                        {
                            "internalType": "address",
                            "name": "target",
                            "type": "address",
                        },
                        {
                            "internalType": "bool",
                            "name": "allowFailure",
                            "type": "bool",
                        },
                        {"internalType": "bytes", "name": "callData", "type": "bytes"},
                    ],
                    "internalType": "struct Multicall3.Call3[]",
                    "name": "calls",
                    "type": "tuple[]",
                }
            ],
            "name": "aggregate3",
            "outputs": [
                {
                    "components": [
                        {"internalType": "bool", "name": "success", "type": "bool"},
                        {
                            "internalType": "bytes",
                            "name": "returnData",
                            "type": "bytes",
                        },
                    ],
                    "internalType": "struct Multicall3.Result[]",
                    "name": "returnData",
                    "type": "tuple[]",
                }
            ],
            "stateMutability": "payable",
            "type": "function",
        }
    ]

    def __init__(self, chain_config: ChainConfig, w3: AsyncWeb3 | None = None):
        self.chain_config = chain_config
        self._w3 = w3
        self._owns_w3 = w3 is None

    async def __aenter__(self):
        if self._w3 is None:
            self._w3 = AsyncWeb3(
                AsyncHTTPProvider(
                    self.chain_config.rpc_url,
                    request_kwargs={"timeout": ClientTimeout(total=settings.RPC_TIMEOUT)},
                )
            )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if self._owns_w3 and self._w3 is not None:
            await self._w3.provider.disconnect()

            self._w3 = None

    @property
    def w3(self) -> AsyncWeb3:
        return self._w3

    @staticmethod
    def _create_call(target: str, calldata: bytes, allow_failure: bool = True) -> tuple:
        return (target, allow_failure, calldata)

    def _get_multicall_contract(self):
        return self.w3.eth.contract(
            AsyncWeb3.to_checksum_address(self.chain_config.multicall3_address),
            abi=self.MULTICALL3_ABI
        )

    def _get_contract(self, address: str, abi):
        return self.w3.eth.contract(
            AsyncWeb3.to_checksum_address(address),
            abi=list(abi)
        )
