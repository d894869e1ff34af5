"""Yaku detection for a winning hand split into pair, sequences and triplets."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from mjhelper.tenpai import Meld, MeldType
from mjhelper.tiles import YAOCHU_TILES, is_man, is_pin, is_sou, is_yaochupai
from mjhelper.yaku_data import (
    NAKI_YAKU_HAN,
    NAKI_YAKUMAN_TIMES,
    OLD_NAKI_YAKU_HAN,
    OLD_YAKU_HAN,
    OLD_YAKUMAN_TIMES,
    YAKU_HAN,
    YAKUMAN_TIMES,
    Yaku,
)

_RYUU_TILES = frozenset((19, 20, 21, 23, 25, 32))


@dataclass
class DivideResult:
    """One way of splitting a complete hand into a pair and melds."""

    pair_tile: int = -1
    shuntsu_first_tiles: list[int] = field(default_factory=list)
    kotsu_tiles: list[int] = field(default_factory=list)
    is_chiitoi: bool = False
    is_chuuren_poutou: bool = False
    is_ittsuu: bool = False
    is_ryanpeikou: bool = False
    is_iipeikou: bool = False


@dataclass
class HandInfo:
    """A winning hand: the closed tiles, the melds and one division of the closed tiles."""

    hand_tiles34: list[int]
    divide_result: DivideResult
    win_tile: int
    melds: list[Meld] = field(default_factory=list)
    is_tsumo: bool = False
    is_riichi: bool = False
    is_daburii: bool = False
    round_wind_tile: int = 27
    self_wind_tile: int = 27

    def is_naki(self) -> bool:
        """Whether any meld other than a closed kan has been made."""
        return any(meld.meld_type != MeldType.ANKAN for meld in self.melds)

    def is_yaku_tile(self, tile: int) -> bool:
        return tile >= 31 or tile in (self.round_wind_tile, self.self_wind_tile)

    def is_double_wind_tile(self, tile: int) -> bool:
        return self.round_wind_tile == self.self_wind_tile == tile

    def contain_honor(self) -> bool:
        if any(self.hand_tiles34[27:]):
            return True
        return any(tile >= 27 for meld in self.melds for tile in meld.tiles)

    def num_ankou(self) -> int:
        """Concealed triplets; a triplet completed by ron is open unless the tile fits a sequence."""
        dr = self.divide_result
        count = len(dr.kotsu_tiles)
        if not self.is_tsumo and self.win_tile in dr.kotsu_tiles:
            in_shuntsu = any(t <= self.win_tile <= t + 2 for t in dr.shuntsu_first_tiles)
            if not in_shuntsu:
                count -= 1
        count += sum(1 for meld in self.melds if meld.meld_type == MeldType.ANKAN)
        return count

    def num_kantsu(self) -> int:
        return sum(1 for meld in self.melds if meld.is_kan)

    def all_shuntsu_first_tiles(self) -> list[int]:
        """Sorted first tiles of every sequence, closed and called."""
        tiles = list(self.divide_result.shuntsu_first_tiles)
        tiles.extend(min(meld.tiles) for meld in self.melds if meld.meld_type == MeldType.CHI)
        return sorted(tiles)

    def all_kotsu_tiles(self) -> list[int]:
        """Sorted tiles of every triplet and quad, closed and called."""
        tiles = list(self.divide_result.kotsu_tiles)
        tiles.extend(meld.tiles[0] for meld in self.melds if meld.meld_type != MeldType.CHI)
        return sorted(tiles)


_Checker = Callable[[HandInfo], bool]


def _three_colours(tiles: list[int]) -> bool:
    present = set(tiles)
    return any(is_man(t) and t + 9 in present and t + 18 in present for t in present)


def _count_special_kotsu(hand: HandInfo, low: int, high: int) -> int:
    return sum(1 for tile in hand.all_kotsu_tiles() if low <= tile <= high)


# standard yaku

def _daburii(hand: HandInfo) -> bool:
    return hand.is_daburii


def _riichi(hand: HandInfo) -> bool:
    return not hand.is_daburii and hand.is_riichi


def _tsumo(hand: HandInfo) -> bool:
    return not hand.is_naki() and hand.is_tsumo


def _chiitoi(hand: HandInfo) -> bool:
    return hand.divide_result.is_chiitoi


def _pinfu(hand: HandInfo) -> bool:
    dr = hand.divide_result
    if len(dr.shuntsu_first_tiles) != 4:
        return False
    if hand.is_yaku_tile(dr.pair_tile):
        return False
    win = hand.win_tile
    return any(
        (t % 9 < 6 and t == win) or (t % 9 > 0 and t + 2 == win)
        for t in dr.shuntsu_first_tiles
    )


def _ryanpeikou(hand: HandInfo) -> bool:
    return hand.divide_result.is_ryanpeikou


def _iipeikou(hand: HandInfo) -> bool:
    return hand.divide_result.is_iipeikou


def _sanshoku_doujun(hand: HandInfo) -> bool:
    shuntsu = hand.all_shuntsu_first_tiles()
    return len(shuntsu) >= 3 and _three_colours(shuntsu)


def _ittsuu(hand: HandInfo) -> bool:
    if not any(meld.meld_type == MeldType.CHI for meld in hand.melds):
        return hand.divide_result.is_ittsuu
    shuntsu = hand.all_shuntsu_first_tiles()
    if len(shuntsu) < 3:
        return False
    present = set(shuntsu)
    return any(t % 9 == 0 and t + 3 in present and t + 6 in present for t in present)


def _toitoi(hand: HandInfo) -> bool:
    return len(hand.all_kotsu_tiles()) == 4


def _san_ankou(hand: HandInfo) -> bool:
    return hand.num_ankou() == 3


def _sanshoku_doukou(hand: HandInfo) -> bool:
    kotsu = [t for t in hand.all_kotsu_tiles() if t < 27]
    return len(kotsu) >= 3 and _three_colours(kotsu)


def _san_kantsu(hand: HandInfo) -> bool:
    return len(hand.melds) >= 3 and hand.num_kantsu() == 3


def _tanyao(hand: HandInfo) -> bool:
    if not hand.melds:
        return all(hand.hand_tiles34[tile] == 0 for tile in YAOCHU_TILES)
    if is_yaochupai(hand.divide_result.pair_tile):
        return False
    if any(is_yaochupai(t) or is_yaochupai(t + 2) for t in hand.all_shuntsu_first_tiles()):
        return False
    return not any(is_yaochupai(t) for t in hand.all_kotsu_tiles())


def _num_yakuhai(hand: HandInfo) -> int:
    count = 0
    for tile in hand.all_kotsu_tiles():
        if hand.is_yaku_tile(tile):
            count += 2 if hand.is_double_wind_tile(tile) else 1
    return count


def _chantai(hand: HandInfo) -> bool:
    shuntsu = hand.all_shuntsu_first_tiles()
    if not shuntsu:
        return False
    if not is_yaochupai(hand.divide_result.pair_tile):
        return False
    if not all(is_yaochupai(t) or is_yaochupai(t + 2) for t in shuntsu):
        return False
    return all(is_yaochupai(t) for t in hand.all_kotsu_tiles())


def _chanta(hand: HandInfo) -> bool:
    return hand.contain_honor() and _chantai(hand)


def _junchan(hand: HandInfo) -> bool:
    return not hand.contain_honor() and _chantai(hand)


def _honroutou(hand: HandInfo) -> bool:
    if not hand.contain_honor():
        return False
    if not hand.melds:
        return sum(hand.hand_tiles34[tile] for tile in YAOCHU_TILES) == 14
    if hand.all_shuntsu_first_tiles():
        return False
    if not is_yaochupai(hand.divide_result.pair_tile):
        return False
    return all(is_yaochupai(t) for t in hand.all_kotsu_tiles())


def _shousangen(hand: HandInfo) -> bool:
    if hand.divide_result.pair_tile < 31:
        return False
    return sum(1 for t in hand.all_kotsu_tiles() if t >= 31) == 2


def _num_suit(hand: HandInfo) -> int:
    dr = hand.divide_result
    if dr.is_chiitoi:
        tiles = [tile for tile, c in enumerate(hand.hand_tiles34[:27]) if c > 0]
    else:
        tiles = [dr.pair_tile, *hand.all_shuntsu_first_tiles(), *hand.all_kotsu_tiles()]
    suits = {tile // 9 for tile in tiles if is_man(tile) or is_pin(tile) or is_sou(tile)}
    return len(suits)


def _honitsu(hand: HandInfo) -> bool:
    return hand.contain_honor() and _num_suit(hand) == 1


def _chinitsu(hand: HandInfo) -> bool:
    return not hand.contain_honor() and _num_suit(hand) == 1


_YAKU_CHECKERS: dict[Yaku, _Checker] = {
    Yaku.DABURII: _daburii,
    Yaku.RIICHI: _riichi,
    Yaku.CHIITOI: _chiitoi,
    Yaku.TSUMO: _tsumo,
    Yaku.PINFU: _pinfu,
    Yaku.RYANPEIKOU: _ryanpeikou,
    Yaku.IIPEIKOU: _iipeikou,
    Yaku.SANSHOKU_DOUJUN: _sanshoku_doujun,
    Yaku.ITTSUU: _ittsuu,
    Yaku.TOITOI: _toitoi,
    Yaku.SAN_ANKOU: _san_ankou,
    Yaku.SANSHOKU_DOUKOU: _sanshoku_doukou,
    Yaku.SAN_KANTSU: _san_kantsu,
    Yaku.TANYAO: _tanyao,
    Yaku.CHANTA: _chanta,
    Yaku.JUNCHAN: _junchan,
    Yaku.HONROUTOU: _honroutou,
    Yaku.SHOUSANGEN: _shousangen,
    Yaku.HONITSU: _honitsu,
    Yaku.CHINITSU: _chinitsu,
}


# old yaku

def _shiiaruraotai(hand: HandInfo) -> bool:
    if len(hand.melds) < 4:
        return False
    return all(meld.meld_type != MeldType.ANKAN for meld in hand.melds)


def _suit_group(tile: int) -> int:
    if tile < 27:
        return tile // 9
    return 3 if tile < 31 else 4


def _uumensai(hand: HandInfo) -> bool:
    tiles = [hand.divide_result.pair_tile, *hand.all_shuntsu_first_tiles(), *hand.all_kotsu_tiles()]
    return len({_suit_group(tile) for tile in tiles}) == 5


def _consecutive_three(tiles: list[int], start: int) -> bool:
    first = tiles[start]
    return first < 27 and first % 9 < 7 and tiles[start + 1] == first + 1 and tiles[start + 2] == first + 2


def _sanrenkou(hand: HandInfo) -> bool:
    kotsu = hand.all_kotsu_tiles()
    if len(kotsu) < 3:
        return False
    if _consecutive_three(kotsu, 0):
        return True
    return len(kotsu) == 4 and _consecutive_three(kotsu, 1)


def _isshokusanjun(hand: HandInfo) -> bool:
    shuntsu = hand.all_shuntsu_first_tiles()
    if len(shuntsu) < 3:
        return False
    if shuntsu[0] == shuntsu[1] == shuntsu[2]:
        return True
    return len(shuntsu) == 4 and shuntsu[1] == shuntsu[2] == shuntsu[3]


_OLD_YAKU_CHECKERS: dict[Yaku, _Checker] = {
    Yaku.SHIIARURAOTAI: _shiiaruraotai,
    Yaku.UUMENSAI: _uumensai,
    Yaku.SANRENKOU: _sanrenkou,
    Yaku.ISSHOKUSANJUN: _isshokusanjun,
}


# yakuman

def _suu_ankou(hand: HandInfo) -> bool:
    if hand.win_tile == hand.divide_result.pair_tile:
        return False
    return hand.num_ankou() == 4


def _suu_ankou_tanki(hand: HandInfo) -> bool:
    if hand.win_tile != hand.divide_result.pair_tile:
        return False
    return hand.num_ankou() == 4


def _daisangen(hand: HandInfo) -> bool:
    return _count_special_kotsu(hand, 31, 33) == 3


def _shousuushii(hand: HandInfo) -> bool:
    pair = hand.divide_result.pair_tile
    return 27 <= pair <= 30 and _count_special_kotsu(hand, 27, 30) == 3


def _daisuushii(hand: HandInfo) -> bool:
    return _count_special_kotsu(hand, 27, 30) == 4


def _tsuuiisou(hand: HandInfo) -> bool:
    dr = hand.divide_result
    if dr.is_chiitoi:
        return all(c > 0 for c in hand.hand_tiles34[27:])
    if dr.pair_tile < 27:
        return False
    if hand.all_shuntsu_first_tiles():
        return False
    return all(tile >= 27 for tile in hand.all_kotsu_tiles())


def _is_terminal(tile: int) -> bool:
    return tile < 27 and tile % 9 in (0, 8)


def _chinroutou(hand: HandInfo) -> bool:
    dr = hand.divide_result
    if dr.is_chiitoi:
        return False
    if not _is_terminal(dr.pair_tile):
        return False
    if hand.all_shuntsu_first_tiles():
        return False
    return all(_is_terminal(tile) for tile in hand.all_kotsu_tiles())


def _ryuuiisou(hand: HandInfo) -> bool:
    dr = hand.divide_result
    if dr.is_chiitoi:
        return False
    # the only all-green sequence is 234s
    if any(tile != 19 for tile in hand.all_shuntsu_first_tiles()):
        return False
    if dr.pair_tile not in _RYUU_TILES:
        return False
    return all(tile in _RYUU_TILES for tile in hand.all_kotsu_tiles())


def _is_chuuren9(hand: HandInfo) -> bool:
    """Whether the winning tile is the extra tile over 1112345678999."""
    base = 9 * (hand.win_tile // 9)
    counts = hand.hand_tiles34[base:base + 9]
    if counts[0] == 4:
        return hand.win_tile == base
    for offset in range(8):
        if counts[offset] == 2:
            return hand.win_tile == base + offset
    if counts[8] == 4:
        return hand.win_tile == base + 8
    return False


def _chuuren(hand: HandInfo) -> bool:
    return hand.divide_result.is_chuuren_poutou and not _is_chuuren9(hand)


def _chuuren9(hand: HandInfo) -> bool:
    return hand.divide_result.is_chuuren_poutou and _is_chuuren9(hand)


def _suu_kantsu(hand: HandInfo) -> bool:
    return hand.num_kantsu() == 4


_YAKUMAN_CHECKERS: dict[Yaku, _Checker] = {
    Yaku.SUU_ANKOU: _suu_ankou,
    Yaku.SUU_ANKOU_TANKI: _suu_ankou_tanki,
    Yaku.DAISANGEN: _daisangen,
    Yaku.SHOUSUUSHII: _shousuushii,
    Yaku.DAISUUSHII: _daisuushii,
    Yaku.TSUUIISOU: _tsuuiisou,
    Yaku.CHINROUTOU: _chinroutou,
    Yaku.RYUUIISOU: _ryuuiisou,
    Yaku.CHUUREN: _chuuren,
    Yaku.CHUUREN9: _chuuren9,
    Yaku.SUU_KANTSU: _suu_kantsu,
}


def _all_pairs(counts: list[int]) -> bool:
    return all(c == 2 for c in counts)


_OLD_YAKUMAN_CHECKERS: dict[Yaku, _Checker] = {
    Yaku.DAISUURIN: lambda hand: _all_pairs(hand.hand_tiles34[1:8]),
    Yaku.DAISHARIN: lambda hand: _all_pairs(hand.hand_tiles34[10:17]),
    Yaku.DAICHIKURIN: lambda hand: _all_pairs(hand.hand_tiles34[19:26]),
    Yaku.DAICHISEI: lambda hand: _all_pairs(hand.hand_tiles34[27:]),
}


def _matching(hand: HandInfo, candidates: dict[Yaku, int], checkers: dict[Yaku, _Checker]) -> list[Yaku]:
    return [yaku for yaku in candidates if yaku in checkers and checkers[yaku](hand)]


def find_yakuman_types(hand: HandInfo, is_naki: bool, consider_old: bool = False) -> list[Yaku]:
    """Yakuman present in the hand, unsorted."""
    times_map = NAKI_YAKUMAN_TIMES if is_naki else YAKUMAN_TIMES
    found = _matching(hand, times_map, _YAKUMAN_CHECKERS)
    if consider_old and not is_naki:
        found.extend(_matching(hand, OLD_YAKUMAN_TIMES, _OLD_YAKUMAN_CHECKERS))
    return found


def find_normal_yaku(hand: HandInfo, is_naki: bool, consider_old: bool = False) -> list[Yaku]:
    """Non-yakuman yaku present in the hand, unsorted; each yakuhai triplet adds one entry, a double wind two."""
    han_map = NAKI_YAKU_HAN if is_naki else YAKU_HAN
    found = _matching(hand, han_map, _YAKU_CHECKERS)
    if consider_old:
        old_map = OLD_NAKI_YAKU_HAN if is_naki else OLD_YAKU_HAN
        found.extend(_matching(hand, old_map, _OLD_YAKU_CHECKERS))
    found.extend([Yaku.YAKUHAI] * _num_yakuhai(hand))
    return found


def find_yaku_types(hand: HandInfo, is_naki: bool, consider_old: bool = False) -> list[Yaku]:
    """Yakuman if there are any, otherwise the ordinary yaku; unsorted."""
    yakuman = find_yakuman_types(hand, is_naki, consider_old)
    if yakuman:
        return yakuman
    return find_normal_yaku(hand, is_naki, consider_old)