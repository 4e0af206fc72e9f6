import logging

from sqlalchemy.ext.asyncio import AsyncSession

from clients.evm.base import BaseWeb3Client
from clients.evm.reader import ContractReader
from db.repositories.token import TokenRepository
from tokens.assembler import assemble
from tokens.dto import TokenMetadata
from tokens.functions import CONTRACT_ABI, CONTRACT_FUNCTIONS
from utils.address import canonical_address


module_logger = logging.getLogger(__name__)


class TokenService(BaseWeb3Client):

    async def get_functions_of(self, token_address: str | bytes) -> TokenMetadata:
        """
        Read name, symbol, decimals and totalSupply of a token contract.

        Only the fields that could be read end up in the result, e.g. a
        contract that reverts on ``symbol()`` gives
        ``{"name": ..., "decimals": ..., "total_supply": ...}``.
        """
        address = canonical_address(token_address)

        reader = ContractReader(self.chain_config, self.w3)
        raw_results = await reader.query_contract(address, CONTRACT_ABI, CONTRACT_FUNCTIONS)

        metadata = assemble(raw_results, address)

        module_logger.debug(
            "Read %d of %d token fields for %s on %s",
            len(metadata), len(CONTRACT_FUNCTIONS), address, self.chain_config.name
        )

        return metadata

    async def get_token_metadata(
        self,
        session: AsyncSession,
        token_address: str | bytes,
    ) -> TokenMetadata:
        address = canonical_address(token_address)
        chain_id = self.chain_config.chain_id

        token_repo = TokenRepository(session)
        token = await token_repo.get_by_address(address, chain_id)

        if token:
            return TokenMetadata(**token.to_metadata())

        metadata = await self.get_functions_of(address)

        if metadata:
            token = await token_repo.upsert_metadata(chain_id, address, metadata)
            await session.commit()
            # Read back the stored row so cached and fresh calls agree.
            return TokenMetadata(**token.to_metadata())

        module_logger.info("No token metadata readable for %s on chain %s", address, chain_id)

        return metadata
