import pytest

from mjhelper.converter import str_to_tile34, str_to_tiles, str_to_tiles34
from mjhelper.tenpai import Meld, MeldType
from mjhelper.yaku import (
    DivideResult,
    HandInfo,
    find_normal_yaku,
    find_yaku_types,
    find_yakuman_types,
)
from mjhelper.yaku_data import Yaku, yaku_types_to_str


def _tile(text):
    return str_to_tile34(text)[0]


def _tiles(text):
    return str_to_tiles(text)[0] if text else []


def _div(pair="", shuntsu="", kotsu="", **flags):
    return DivideResult(
        pair_tile=_tile(pair) if pair else -1,
        shuntsu_first_tiles=_tiles(shuntsu),
        kotsu_tiles=_tiles(kotsu),
        **flags,
    )


def _chiitoi():
    return DivideResult(is_chiitoi=True)


def _meld(meld_type, text):
    return Meld(meld_type=meld_type, tiles=_tiles(text))


def _hand(human_tiles, human_win, division, is_tsumo=False, melds=()):
    return HandInfo(
        hand_tiles34=str_to_tiles34(human_tiles)[0],
        divide_result=division,
        win_tile=_tile(human_win),
        melds=list(melds),
        is_tsumo=is_tsumo,
        round_wind_tile=27,
        self_wind_tile=27,
    )


def _yaku_str(human_tiles, human_win, divisions, is_tsumo=False, melds=(), consider_old=False):
    out = []
    for division in divisions:
        hand = _hand(human_tiles, human_win, division, is_tsumo, melds)
        types = sorted(find_yaku_types(hand, hand.is_naki(), consider_old))
        out.append(yaku_types_to_str(types, consider_old))
    return " ".join(out)


CLOSED_CASES = [
    ("[七对 混老头 混一色]", "99s 112233445566z", "9s", [_chiitoi()], False),
    ("[七对 混一色]", "22m 112233445566z", "2m", [_chiitoi()], False),
    ("[平和 一杯口 三色]", "345m 345s 334455p 44z", "3m",
     [_div("4z", "3m 3s 33p", is_iipeikou=True)], False),
    ("[三色同刻]", "333m 333s 333345p 11z", "3m", [_div("1z", "3p", "3m 3s 3p")], False),
    ("[平和 一杯口 断幺] [一杯口 三色 断幺]", "22334455m 234s 234p", "3m",
     [_div("2m", "33m 2s 2p", is_iipeikou=True), _div("5m", "22m 2s 2p", is_iipeikou=True)], False),
    ("[三暗刻 役牌 役牌 小三元]", "234m 333p 55666777z", "3m",
     [_div("5z", "2m", "3p 67z")], False),
    ("[一杯口 一通 混一色]", "123445566789m 11z", "3m",
     [_div("1z", "1447m", is_iipeikou=True, is_ittsuu=True)], False),
    ("[对对 三暗刻 混一色] [一杯口 混一色]", "111222333444m 11z", "3m",
     [_div("1z", kotsu="1234m"), _div("1z", "222m", "1m", is_iipeikou=True)], False),
    ("[四暗刻] [自摸 一杯口 混一色]", "111222333444m 11z", "3m",
     [_div("1z", kotsu="1234m"), _div("1z", "222m", "1m", is_iipeikou=True)], True),
    ("[役牌 役牌 混全]", "123m 123999s 11155z", "3m", [_div("5z", "1m 1s", "9s 1z")], False),
    ("[两杯口]", "334455m 667788s 77z", "3m", [_div("7z", "33m 66s", is_ryanpeikou=True)], False),
    ("[平和 两杯口]", "334455m 667788s 44z", "3m", [_div("4z", "33m 66s", is_ryanpeikou=True)], False),
    ("[纯全]", "123m 123999s 11789p", "3m", [_div("1p", "1m 1s 7p", "9s")], False),
    # yakuman
    ("[九莲]", "11122345678999m", "3m", [_div("2m", "36m", "19m", is_chuuren_poutou=True)], False),
    ("[纯正九莲]", "11123345678999m", "3m",
     [_div("1m", "136m", "9m", is_chuuren_poutou=True)], False),
    ("[绿一色]", "22334466688s 666z", "6z", [_div("8s", "22s", "6s 6z")], False),
    ("[四暗刻]", "111999m 111p 11122z", "1z", [_div("2z", kotsu="19m 1p 1z")], True),
    ("[小四喜 字一色]", "11122233344555z", "1z", [_div("4z", kotsu="1235z")], False),
    ("[字一色]", "11223344556677z", "1z", [_chiitoi()], False),
    ("[四暗刻单骑 大四喜 字一色]", "11122233344455z", "5z", [_div("5z", kotsu="1234z")], False),
    ("[大三元]", "12333m 555666777z", "1m", [_div("3m", "1m", "567z")], False),
    ("[清老头]", "111999m 111999s 11p", "1m", [_div("1p", kotsu="19m 19s")], False),
    # concealed triplets completed by ron
    ("[三色同刻]", "333m 333p 333567s 11z", "3m", [_div("1z", "5s", "3m 3p 3s")], False),
    ("[三暗刻 三色同刻]", "333345m 333p 333s 11z", "3m", [_div("1z", "3m", "3m 3p 3s")], False),
]


@pytest.mark.parametrize("expected, tiles, win, divisions, is_tsumo", CLOSED_CASES)
def test_find_yaku_types_closed(expected, tiles, win, divisions, is_tsumo):
    assert _yaku_str(tiles, win, divisions, is_tsumo=is_tsumo) == expected


MELD_CASES = [
    ("[一通 役牌 役牌 混一色]", "123p 11177z", "3p", _div("7z", "1p", "1z"),
     [(MeldType.CHI, "456p"), (MeldType.CHI, "789p")]),
    ("[对对 役牌 役牌 混老头]", "111p 11177z", "1p", _div("7z", kotsu="1p 1z"),
     [(MeldType.PON, "999p"), (MeldType.PON, "111s")]),
    ("[对对 三杠子 混一色]", "333m 77z", "3m", _div("7z", kotsu="3m"),
     [(MeldType.MINKAN, "4444z"), (MeldType.MINKAN, "2222z"), (MeldType.MINKAN, "3333z")]),
    ("[对对 三杠子 断幺]", "333m 77s", "3m", _div("7s", kotsu="3m"),
     [(MeldType.MINKAN, "4444s"), (MeldType.MINKAN, "2222s"), (MeldType.MINKAN, "3333s")]),
    ("[四杠子]", "77z", "7z", _div("7z"),
     [(MeldType.MINKAN, "1111z"), (MeldType.ANKAN, "1111p"),
      (MeldType.KAKAN, "2222z"), (MeldType.MINKAN, "3333z")]),
    ("[四暗刻单骑 大四喜 字一色 四杠子]", "77z", "7z", _div("7z"),
     [(MeldType.ANKAN, "1111z"), (MeldType.ANKAN, "2222z"),
      (MeldType.ANKAN, "3333z"), (MeldType.ANKAN, "4444z")]),
    ("[无役]", "333m 123s 123p 77z", "3m", _div("7z", "1s 1p", "3m"),
     [(MeldType.CHI, "789p")]),
]


@pytest.mark.parametrize("expected, tiles, win, division, melds", MELD_CASES)
def test_find_yaku_types_with_melds(expected, tiles, win, division, melds):
    meld_objs = [_meld(t, s) for t, s in melds]
    assert _yaku_str(tiles, win, [division], melds=meld_objs) == expected


def _ryanpeikou_divisions(suit):
    return [
        _div("2" + suit, "3366" + suit, is_ryanpeikou=True),
        _div("5" + suit, "2266" + suit, is_ryanpeikou=True),
        _div("8" + suit, "2255" + suit, is_ryanpeikou=True),
    ]


def test_old_yaku_sanrenkou_and_isshokusanjun():
    divisions = [_div("1m", "7s", "234p"), _div("1m", "222p 7s", is_iipeikou=True)]
    assert (
        _yaku_str("222333444p 11m 789s", "9s", divisions, consider_old=True)
        == "[三暗刻 三连刻] [平和 一杯口 一色三顺]"
    )


def test_old_yaku_uumensai():
    division = _div("1z", "1p 7s", "1m 7z")
    assert _yaku_str("123p 111m 789s 11777z", "9s", [division], consider_old=True) == "[役牌 混全 五门齐]"


def test_old_yaku_shiiaruraotai():
    melds = [
        _meld(MeldType.CHI, "123m"),
        _meld(MeldType.CHI, "789p"),
        _meld(MeldType.CHI, "789s"),
        _meld(MeldType.PON, "999m"),
    ]
    result = _yaku_str("99p", "9p", [_div("9p")], is_tsumo=True, melds=melds, consider_old=True)
    assert result == "[纯全 十二落抬]"


@pytest.mark.parametrize(
    "suit, expected",
    [("m", "[大数邻] [大数邻] [大数邻]"), ("p", "[大车轮] [大车轮] [大车轮]"), ("s", "[大竹林] [大竹林] [大竹林]")],
)
def test_old_yakuman_big_wheels(suit, expected):
    tiles = "22334455667788" + suit
    assert _yaku_str(tiles, "2" + suit, _ryanpeikou_divisions(suit), consider_old=True) == expected


def test_old_yakuman_daichisei():
    assert _yaku_str("11223344556677z", "2z", [_chiitoi()], consider_old=True) == "[字一色 大七星]"


def test_big_wheel_without_old_yaku_is_ordinary():
    division = _ryanpeikou_divisions("m")[0]
    assert _yaku_str("22334455667788m", "2m", [division]) == "[两杯口 断幺 清一色]"


def test_hand_info_meld_queries():
    melds = [_meld(MeldType.CHI, "789p"), _meld(MeldType.ANKAN, "1111z"), _meld(MeldType.PON, "555s")]
    hand = _hand("123m 33p 444s", "3p", _div("3p", "1m", "4s"), melds=melds)
    assert hand.is_naki() is True
    assert hand.num_kantsu() == 1
    assert hand.all_shuntsu_first_tiles() == [0, 15]
    assert hand.all_kotsu_tiles() == [21, 22, 27]
    assert hand.contain_honor() is True


def test_hand_info_ankan_only_is_closed():
    hand = _hand("123m 33p 444s 789s", "3p", _div("3p", "1m 7s", "4s"),
                 melds=[_meld(MeldType.ANKAN, "1111p")])
    assert hand.is_naki() is False
    assert hand.contain_honor() is False


def test_yaku_and_double_wind_tiles():
    hand = HandInfo(hand_tiles34=[0] * 34, divide_result=DivideResult(), win_tile=0,
                    round_wind_tile=27, self_wind_tile=28)
    assert [hand.is_yaku_tile(t) for t in (27, 28, 29, 30, 31, 33, 5)] == [
        True, True, False, False, True, True, False,
    ]
    assert hand.is_double_wind_tile(27) is False
    same = HandInfo(hand_tiles34=[0] * 34, divide_result=DivideResult(), win_tile=0)
    assert same.is_double_wind_tile(27) is True


def test_num_ankou_ron_and_tsumo():
    division = _div("1z", kotsu="1234m")
    ron = _hand("111222333444m 11z", "3m", division)
    tsumo = _hand("111222333444m 11z", "3m", division, is_tsumo=True)
    assert ron.num_ankou() == 3
    assert tsumo.num_ankou() == 4


def test_yakuman_short_circuits_normal_yaku():
    hand = _hand("111222333444m 11z", "3m", _div("1z", kotsu="1234m"), is_tsumo=True)
    assert find_yakuman_types(hand, False) == [Yaku.SUU_ANKOU]
    normal = sorted(find_normal_yaku(hand, False))
    assert normal == [Yaku.TSUMO, Yaku.TOITOI, Yaku.HONITSU]
    assert find_yaku_types(hand, False) == [Yaku.SUU_ANKOU]


def test_double_wind_counts_twice():
    hand = _hand("123m 123999s 11155z", "3m", _div("5z", "1m 1s", "9s 1z"))
    assert find_normal_yaku(hand, False).count(Yaku.YAKUHAI) == 2


def test_no_yakuman_for_plain_hand():
    hand = _hand("123m 123999s 11789p", "3m", _div("1p", "1m 1s 7p", "9s"))
    assert find_yakuman_types(hand, False, consider_old=True) == []