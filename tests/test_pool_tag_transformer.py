from __future__ import annotations

import pytest

from pool_tags.domain.entities.contract_tag import RawPoolRecord, RawTokenRecord
from pool_tags.domain.services.pool_tag_transformer import (
    PROJECT_LINK,
    PROJECT_NAME,
    transform_page,
    transform_pool,
)


def _token(symbol: str, name: str) -> RawTokenRecord:
    return RawTokenRecord(id=f"0x{symbol.lower()}", name=name, symbol=symbol, decimals="18")


def _pool(
    pool_id: str,
    *,
    token0: RawTokenRecord | None = None,
    token1: RawTokenRecord | None = None,
    fee_tier: str = "500",
    tick_spacing: str | None = "10",
    created_at: int = 1_700_000_000,
) -> RawPoolRecord:
    return RawPoolRecord(
        id=pool_id,
        fee_tier=fee_tier,
        token0=token0,
        token1=token1,
        created_at_timestamp=created_at,
        tick_spacing=tick_spacing,
    )


WETH = _token("WETH", "Wrapped Ether")
USDC = _token("USDC", "USD Coin")


def test_transform_pool_builds_contract_tag():
    result = transform_pool(_pool("0xpool", token0=WETH, token1=USDC), chain_id="42161")

    assert result.rejected is None
    tag = result.tag
    assert tag is not None
    assert tag.address == "eip155:42161:0xpool"
    assert tag.label == "WETH/USDC CL Pool (0.05%, tick: 10)"
    assert tag.project == PROJECT_NAME
    assert tag.link == PROJECT_LINK
    assert tag.note == (
        f"The liquidity pool contract on {PROJECT_NAME} for WETH (Wrapped Ether) / "
        "USDC (USD Coin). Fee tier: 500, tick spacing: 10."
    )
    assert tag.to_dict() == {
        "Contract Address": "eip155:42161:0xpool",
        "Public Name Tag": "WETH/USDC CL Pool (0.05%, tick: 10)",
        "Project Name": PROJECT_NAME,
        "UI/Website Link": PROJECT_LINK,
        "Public Note": tag.note,
    }


def test_transform_pool_without_tick_spacing_uses_placeholder():
    result = transform_pool(_pool("0xpool", token0=WETH, token1=USDC, tick_spacing=None), chain_id=42161)

    assert result.tag is not None
    assert result.tag.label.endswith("tick: N/A)")
    assert result.tag.note.endswith("tick spacing: N/A.")


def test_transform_pool_skips_missing_token_silently():
    result = transform_pool(_pool("0xpool", token0=WETH, token1=None), chain_id="42161")

    assert result.tag is None
    assert result.rejected is None
    assert result.skipped is True


def test_transform_pool_rejects_markup_in_name_or_symbol():
    phishing = _token("CLAIM", "<a href='https://evil.example'>Visit</a>")

    result = transform_pool(_pool("0xbad", token0=phishing, token1=USDC), chain_id="42161")

    assert result.tag is None
    assert result.rejected is not None
    assert result.rejected.reason == "markup"
    assert "CLAIM" in result.rejected.detail
    assert "evil.example" in result.rejected.detail


def test_transform_pool_decodes_bytes32_symbol():
    mkr = _token("4d4b52".ljust(64, "0"), "Maker")

    result = transform_pool(_pool("0xmkr", token0=mkr, token1=WETH), chain_id="42161")

    assert result.tag is not None
    assert result.tag.label.startswith("MKR/WETH ")


@pytest.mark.parametrize(
    ("raw_symbol", "expected_label"),
    [
        ("X", "X/WETH CL Pool (0.05%, tick: 10)"),
        ("ミーム", "ミーム/WETH CL Pool (0.05%, tick: 10)"),
        ("A" * 33, "AAAAAAAAA.../WETH CL Pool (0.05%, tick: 10)"),
    ],
)
def test_transform_pool_keeps_raw_symbol_when_decoding_yields_nothing(raw_symbol: str, expected_label: str):
    token = _token(raw_symbol, "Odd Symbol")

    result = transform_pool(_pool("0xodd", token0=token, token1=WETH), chain_id="42161")

    assert result.rejected is None
    assert result.tag is not None
    assert result.tag.label == expected_label
    assert f"for {raw_symbol} (Odd Symbol)" in result.tag.note


def test_transform_pool_rejects_markup_hidden_in_bytes32_symbol():
    hidden = _token("<b>X</b>".encode("utf-8").hex().ljust(64, "0"), "Innocent")

    result = transform_pool(_pool("0xhidden", token0=hidden, token1=WETH), chain_id="42161")

    assert result.tag is None
    assert result.rejected is not None
    assert result.rejected.reason == "markup"


def test_transform_pool_rejects_non_numeric_fee_tier():
    result = transform_pool(_pool("0xfee", token0=WETH, token1=USDC, fee_tier="oops"), chain_id="42161")

    assert result.rejected is not None
    assert result.rejected.reason == "invalid_fee_tier"


def test_transform_page_keeps_order_and_counts_outcomes():
    records = [
        _pool("0x1", token0=WETH, token1=USDC, created_at=1),
        _pool("0x2", token0=WETH, token1=None, created_at=2),
        _pool("0x3", token0=_token("<b>X</b>", "Bold"), token1=USDC, created_at=3),
        _pool("0x4", token0=USDC, token1=WETH, created_at=4),
    ]

    page = transform_page(records, chain_id="42161", project_name="Proj", project_link="https://proj")

    assert [tag.address for tag in page.tags] == ["eip155:42161:0x1", "eip155:42161:0x4"]
    assert all(tag.project == "Proj" and tag.link == "https://proj" for tag in page.tags)
    assert page.skipped == 1
    assert [row.pool_id for row in page.rejected] == ["0x3"]
