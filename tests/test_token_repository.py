from db.repositories.token import TokenRepository


ADDRESS = "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2"


async def test_upsert_writes_only_present_fields(session):
    repo = TokenRepository(session)

    await repo.upsert_metadata(1, ADDRESS, {"name": "Wrapped Ether", "decimals": 18})
    token = await repo.upsert_metadata(1, ADDRESS, {"symbol": "WETH"})

    assert token.address == ADDRESS.lower()
    assert token.name == "Wrapped Ether"
    assert token.symbol == "WETH"
    assert token.decimals == 18
    assert token.total_supply is None
    assert await repo.count() == 1


async def test_tokens_are_scoped_by_chain(session):
    repo = TokenRepository(session)

    await repo.upsert_metadata(1, ADDRESS, {"symbol": "WETH"})
    await repo.upsert_metadata(8453, ADDRESS, {"symbol": "WETH.b"})

    assert (await repo.get_by_address(ADDRESS, 8453)).symbol == "WETH.b"
    assert len(await repo.get_all(chain_id=1)) == 1
    assert await repo.get_by_address(ADDRESS, 56) is None


async def test_byte_cut_text_is_stored_without_partial_character(session):
    repo = TokenRepository(session)
    cut = ("é" * 200).encode("utf-8")[:255].decode("utf-8", "surrogateescape")

    token = await repo.upsert_metadata(1, ADDRESS, {"name": cut})

    assert token.name == "é" * 127
    assert token.to_metadata() == {"name": "é" * 127}
