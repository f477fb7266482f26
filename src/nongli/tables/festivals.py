"""
Fixed festival tables.

SOLAR_FESTIVALS: Gregorian (month, day) -> name
LUNAR_FESTIVALS: lunar (month, day) -> name (never a leap month)
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Tuple

SOLAR_FESTIVALS: Mapping[Tuple[int, int], str] = MappingProxyType({
    (1, 1): "元旦",
    (2, 14): "情人节",
    (3, 8): "妇女节",
    (3, 12): "植树节",
    (4, 1): "愚人节",
    (5, 1): "劳动节",
    (5, 4): "青年节",
    (6, 1): "儿童节",
    (7, 1): "建党节",
    (8, 1): "建军节",
    (9, 10): "教师节",
    (10, 1): "国庆节",
    (12, 24): "平安夜",
    (12, 25): "圣诞节",
})

LUNAR_FESTIVALS: Mapping[Tuple[int, int], str] = MappingProxyType({
    (1, 1): "春节",
    (1, 15): "元宵节",
    (2, 2): "龙抬头",
    (5, 5): "端午节",
    (7, 7): "七夕节",
    (7, 15): "中元节",
    (8, 15): "中秋节",
    (9, 9): "重阳节",
    (10, 1): "寒衣节",
    (10, 15): "下元节",
    (12, 8): "腊八节",
    (12, 23): "小年",
})
