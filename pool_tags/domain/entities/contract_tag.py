from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RawTokenRecord:
    id: str
    name: str
    symbol: str
    decimals: str | None = None


@dataclass(frozen=True)
class RawPoolRecord:
    id: str
    fee_tier: str
    token0: RawTokenRecord | None
    token1: RawTokenRecord | None
    created_at_timestamp: int
    tick_spacing: str | None = None
    liquidity: str | None = None
    sqrt_price: str | None = None


@dataclass(frozen=True)
class ContractTag:
    address: str
    label: str
    project: str
    link: str
    note: str

    def to_dict(self) -> dict[str, str]:
        return {
            "Contract Address": self.address,
            "Public Name Tag": self.label,
            "Project Name": self.project,
            "UI/Website Link": self.link,
            "Public Note": self.note,
        }
