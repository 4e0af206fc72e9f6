from chains.dto import ChainConfig


ethereum = ChainConfig(
    chain_id=1,
    name="ethereum",
    display_name="Ethereum",
    symbol="ETH",
    explorer="https://etherscan.io/",
    rpc_url="https://eth.drpc.org",
    multicall3_address="0xcA11bde05977b3631167028862bE2a173976CA11",
)

# sepolia = ChainConfig(
#     chain_id=11155111,
#     name="ethereum-sepolia",
#     display_name="Sepolia",
#     symbol="ETH",
#     explorer="https://sepolia.etherscan.io/",
#     rpc_url="https://0xrpc.io/sep",
#     multicall3_address="0xcA11bde05977b3631167028862bE2a173976CA11",
# )
