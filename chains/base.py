from chains.dto import ChainConfig


base = ChainConfig(
    chain_id=8453,
    name="base",
    display_name="Base",
    symbol="ETH",
    explorer="https://basescan.org/",
    rpc_url="https://base.drpc.org",
    multicall3_address="0xcA11bde05977b3631167028862bE2a173976CA11",
)
