from dataclasses import replace

from chains.dto import ChainConfig


class ChainRegistry:
    def __init__(self, chains: list[ChainConfig], rpc_overrides: dict[str, str] | None = None):
        self._chains: dict[int, ChainConfig] = {}
        rpc_overrides = rpc_overrides or {}
        for cfg in chains:
            rpc_url = rpc_overrides.get(cfg.name)
            if rpc_url:
                cfg = replace(cfg, rpc_url=rpc_url)
            self._chains[cfg.chain_id] = cfg

    def get(self, chain_id: int) -> ChainConfig | None:
        return self._chains.get(chain_id)

    def require(self, chain_id: int) -> ChainConfig:
        cfg = self.get(chain_id)
        if cfg is None:
            raise ValueError(f"Unknown chain id: {chain_id}")
        return cfg

    def list(self) -> list[ChainConfig]:
        return list(self._chains.values())
