# mjhelper

Building blocks for analysing Riichi mahjong hands. Everything works on
34-slot tile counts: tiles 0–8 are the characters (`1m`–`9m`), 9–17 the
circles (`1p`–`9p`), 18–26 the bamboos (`1s`–`9s`), 27–30 the winds
(east, south, west, north) and 31–33 the dragons (white, green, red).

The package has no dependencies outside the standard library.

## Modules

- `mjhelper.converter` – tile notation. `str_to_tile34`, `str_to_tiles34`
  and `str_to_tiles` parse strings such as `"3m"` or `"224m 24p"`
  (spaces optional, `0m`/`0p`/`0s` are red fives); `tiles34_to_str`,
  `tiles_to_str`, `tile34_to_str` and the `..._with_bracket` variants
  write them back. `tiles34_to_tiles` and `tiles_to_tiles34` convert
  between index lists and count tables. Malformed input, or more than
  four copies of a tile, raises `TileParseError`, a `ValueError`.
- `mjhelper.tiles` – tile name tables, `Waits` (a dict from tile index to
  copies left, with `all_count`, `available_tiles`, `indexes`,
  `tiles_zh` and `same_tiles`), terminal/honour and suit checks,
  `is_isolated_tile`, `outside_tiles`, remaining-tile tables,
  `random_add_tile`, `number_to_chinese_shanten` and small numeric
  helpers (`rate_above_one`, `in_delta`, `float_equal`).
- `mjhelper.yaku_data` – the `Yaku` enum, Chinese names, han values
  (closed and open), yakuman multipliers, and `yaku_types_to_str`,
  `yaku_types_with_dora_to_str`, `calc_yaku_han`, `calc_yakuman_times`.
  Old local yaku are counted only when `consider_old=True`.
- `mjhelper.yaku` – yaku detection for one division of a winning hand:
  `DivideResult`, `HandInfo`, `find_yakuman_types`, `find_normal_yaku`
  and `find_yaku_types` (yakuman if any, otherwise ordinary yaku).
- `mjhelper.tenpai` – `MeldType`, `Meld`, `calc_tenpai_rate` (how likely,
  from 0 to 100, an opponent without riichi is tenpai) and
  `tenpai_rate3` (three-player approximation of a four-player rate).
- `mjhelper.search` – trees of draws that advance shanten and discards
  that keep it (`SearchNode13`, `SearchNode14`, `search13`, `search14`,
  `search_shanten14`) and `calculate_shanten_and_waits13`.
- `mjhelper.colors` – `Color` (ANSI codes with `wrap`) and colour hints
  `waits_count_color`, `other_discard_alert_color`, `num_risk_color`.
- `mjhelper.webapi` – dataclasses for a web front end (`ApiData`,
  `Result`, `Human`, `Options`, `Option`, …) whose `to_dict` uses the
  JSON field names; `ApiData.write` captures text and echoes it to a
  stream, standard output by default.

## Examples

```python
from mjhelper.converter import str_to_tiles34, tiles_to_str, tiles_to_str_with_bracket
from mjhelper.tiles import number_to_chinese_shanten

tiles_to_str([0, 2, 9])                  # "13m 1p"
tiles_to_str_with_bracket([9, 11, 27])   # "[13p 1z]"
tiles34, red_fives = str_to_tiles34("0m55p")   # red_fives == [1, 0, 0]
number_to_chinese_shanten(0)             # "听牌"
```

Detecting yaku needs the hand already divided:

```python
from mjhelper.converter import str_to_tiles34
from mjhelper.yaku import DivideResult, HandInfo, find_yaku_types
from mjhelper.yaku_data import yaku_types_to_str

tiles34, _ = str_to_tiles34("22m 112233445566z")
hand = HandInfo(tiles34, DivideResult(is_chiitoi=True), win_tile=1)
yaku_types_to_str(sorted(find_yaku_types(hand, is_naki=False)))  # "[七对 混一色]"
```

Opponent tenpai rate:

```python
from mjhelper.tenpai import Meld, calc_tenpai_rate

calc_tenpai_rate([Meld()], [1, 2, 3, 4, 5], [2])   # 19.88
```

## What the package does not do

- It does not compute shanten or split a hand into melds by itself. The
  search functions take the shanten calculation as `shanten_func` (a
  callable from 34 counts to a shanten number, -1 for a complete hand),
  and yaku detection takes a ready `DivideResult`.
- It does not rank discards, estimate points or agari rates, or analyse
  calls; the search trees are the raw material for that.
- It has no command, no game client connection and no web server; the
  `webapi` module only defines the data shapes.

## Running the tests

Install the `test` extra and run `pytest` from the project directory.