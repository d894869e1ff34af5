"""Data shapes served to the web front end, with their JSON field names."""

from __future__ import annotations

import io
import sys
from dataclasses import dataclass, field, fields, is_dataclass
from typing import Any, Optional, Sequence, TextIO


def _jsonify(value: Any) -> Any:
    """Plain JSON-ready structure of a dataclass tree, using each field's wire name."""
    if is_dataclass(value) and not isinstance(value, type):
        return {
            f.metadata.get("json", f.name): _jsonify(getattr(value, f.name))
            for f in fields(value)
            if not f.metadata.get("skip", False)
        }
    if isinstance(value, (list, tuple)):
        return [_jsonify(item) for item in value]
    return value


@dataclass
class ApiData:
    """Latest state pushed to the front end, plus the captured terminal output."""

    timestamp: int = 0
    # own hand as 34 counts
    counts: list[int] = field(default_factory=list)
    # deal-in risk of each of the 34 tiles
    risk_table: list[float] = field(default_factory=list, metadata={"json": "risk"})
    outputs: str = ""
    stream: Optional[TextIO] = field(
        default=None, repr=False, compare=False, metadata={"skip": True}
    )
    _buffer: io.StringIO = field(
        default_factory=io.StringIO, repr=False, compare=False, metadata={"skip": True}
    )

    def reset_output(self) -> None:
        """Discard the captured output; `outputs` keeps its last value."""
        self._buffer = io.StringIO()

    def collect_output(self) -> None:
        """Copy the captured output into `outputs`, if anything was captured."""
        captured = self._buffer.getvalue()
        if captured:
            self.outputs = captured

    def write(self, text: str) -> int:
        """Capture `text` and echo it to the stream (standard output by default)."""
        self._buffer.write(text)
        stream = self.stream if self.stream is not None else sys.stdout
        return stream.write(text)

    def to_dict(self) -> dict[str, Any]:
        return _jsonify(self)


@dataclass
class RoundInfo:
    round_wind_tile: int = 0
    self_wind_tile: int = 0
    dora_indicators: list[int] = field(default_factory=list)


@dataclass
class OptionImprove:
    tile: int = 0
    waits_count: int = 0
    indexes: list[int] = field(default_factory=list)


@dataclass
class Option:
    """One discard (or call) option as shown to the user."""

    waits_count: int = 0
    avg_improve_waits_count: float = 0.0
    highlight_avg_improve_waits_count: bool = False
    shanten: int = 0

    open_tiles: list[int] = field(default_factory=list)
    meld_type: str = ""

    is_discard_tile_dora: bool = False
    discard_tile: int = 0
    discard_risk: float = 0.0

    avg_next_shanten_waits_count: float = 0.0
    furiten_rate: float = 0.0
    is_part_wait: bool = False
    avg_agari_rate: float = 0.0
    mixed_waits_score: float = 0.0
    highlight_mixed_score: bool = False
    mixed_round_point: int = 0
    ron_type: str = ""
    dama_point: int = 0
    riichi_point: int = 0
    yaku_types: list[int] = field(default_factory=list)
    dora_count: int = 0
    wait_tiles: list[int] = field(default_factory=list)
    improves: list[OptionImprove] = field(default_factory=list)


@dataclass
class Options:
    shanten: int = 0
    info: str = ""
    options: list[Option] = field(default_factory=list)


@dataclass
class TileRisk:
    tile: int = 0
    risk: float = 0.0


@dataclass
class RiskInfo:
    tiles_risk: list[TileRisk] = field(default_factory=list)
    tenpai_rate: float = 0.0
    left_no_suji_tiles: int = 0
    no_suji_info: str = ""


@dataclass
class PlayerSummary:
    name: str = ""
    is_naki: bool = field(default=False, metadata={"json": "isNaki"})
    discard_tiles: list[int] = field(default_factory=list)
    meld_discards_at: list[int] = field(default_factory=list)


@dataclass
class Human:
    hand_tiles: list[int] = field(default_factory=list)
    melds: list[list[int]] = field(default_factory=list)
    risks_info: list[RiskInfo] = field(default_factory=list)
    nc_safe_tiles: list[int] = field(default_factory=list)
    oc_safe_tiles: list[int] = field(default_factory=list)

    def set_hand_tiles(self, tiles: Sequence[int]) -> None:
        """Set the hand from 34 counts, expanded to sorted tile indexes."""
        self.hand_tiles = [tile for tile, count in enumerate(tiles) for _ in range(max(count, 0))]


@dataclass
class Result:
    round_info: RoundInfo = field(default_factory=RoundInfo)
    players: list[PlayerSummary] = field(default_factory=list)
    human: Human = field(default_factory=Human)
    info: str = ""
    options: list[Options] = field(default_factory=list, metadata={"json": "options_groups"})

    def init_round(self, round_wind: int, self_wind: int, dora: Sequence[int]) -> None:
        self.round_info = RoundInfo(
            round_wind_tile=round_wind,
            self_wind_tile=self_wind,
            dora_indicators=list(dora),
        )

    def reset(self) -> None:
        """Clear own hand and option groups; round info and players stay."""
        self.human = Human()
        self.options = []

    def to_dict(self) -> dict[str, Any]:
        return _jsonify(self)