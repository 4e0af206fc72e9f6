from aiohttp import ClientTimeout
from web3 import AsyncWeb3
from web3.providers import AsyncHTTPProvider

from chains import registery
from chains.dto import ChainConfig
from clients.evm.reader import ContractReader
from clients.evm.token import TokenService
from config import settings


class Web3ClientFactory:
    def __init__(self, chain_config: ChainConfig):
        self.chain_config = chain_config
        self._w3 = AsyncWeb3(
            AsyncHTTPProvider(
                chain_config.rpc_url,
                request_kwargs={"timeout": ClientTimeout(total=settings.RPC_TIMEOUT)},
            )
        )

    @classmethod
    def for_chain(cls, chain_id: int) -> "Web3ClientFactory":
        return cls(registery.require(chain_id))

    @property
    def w3(self) -> AsyncWeb3:
        return self._w3

    def create_token_service(self) -> TokenService:
        return TokenService(self.chain_config, self._w3)

    def create_contract_reader(self) -> ContractReader:
        return ContractReader(self.chain_config, self._w3)

    async def close(self) -> None:
        await self._w3.provider.disconnect()
