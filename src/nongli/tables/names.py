"""
nongli.tables.names
-------------------
Fixed name tables: heavenly stems, earthly branches, zodiac animals,
lunar month/day labels and the 24 solar terms.
"""

from __future__ import annotations

from typing import Tuple

STEMS: Tuple[str, ...] = ("甲", "乙", "丙", "丁", "戊", "己", "庚", "辛", "壬", "癸")

BRANCHES: Tuple[str, ...] = ("子", "丑", "寅", "卯", "辰", "巳", "午", "未", "申", "酉", "戌", "亥")

ZODIAC: Tuple[str, ...] = ("鼠", "牛", "虎", "兔", "龙", "蛇", "马", "羊", "猴", "鸡", "狗", "猪")

ZODIAC_EN: Tuple[str, ...] = (
    "rat", "ox", "tiger", "rabbit", "dragon", "snake",
    "horse", "goat", "monkey", "rooster", "dog", "pig",
)

# 正月 .. 腊月 (without the trailing 月)
LUNAR_MONTH_NAMES: Tuple[str, ...] = (
    "正", "二", "三", "四", "五", "六", "七", "八", "九", "十", "冬", "腊",
)

LUNAR_DAY_NAMES: Tuple[str, ...] = (
    "初一", "初二", "初三", "初四", "初五", "初六", "初七", "初八", "初九", "初十",
    "十一", "十二", "十三", "十四", "十五", "十六", "十七", "十八", "十九", "二十",
    "廿一", "廿二", "廿三", "廿四", "廿五", "廿六", "廿七", "廿八", "廿九", "三十",
)

# Index 0 sits at ecliptic longitude 285 deg; each step adds 15 deg.
SOLAR_TERM_BASE_DEG = 285.0
SOLAR_TERM_STEP_DEG = 15.0

SOLAR_TERM_NAMES: Tuple[str, ...] = (
    "小寒", "大寒", "立春", "雨水", "惊蛰", "春分",
    "清明", "谷雨", "立夏", "小满", "芒种", "夏至",
    "小暑", "大暑", "立秋", "处暑", "白露", "秋分",
    "寒露", "霜降", "立冬", "小雪", "大雪", "冬至",
)


def solar_term_angle(index: int) -> float:
    """Ecliptic longitude (deg, [0,360)) of term index 0..23."""
    return (SOLAR_TERM_BASE_DEG + SOLAR_TERM_STEP_DEG * index) % 360.0


def ganzhi(stem: int, branch: int) -> str:
    return f"{STEMS[stem % 10]}{BRANCHES[branch % 12]}"
