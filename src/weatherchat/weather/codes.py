"""WMO weather code labels used by Open-Meteo."""

from types import MappingProxyType

UNKNOWN_WEATHER = "不明"

WEATHER_CODES = MappingProxyType({
    0: "快晴",
    1: "晴れ",
    2: "時々曇り",
    3: "曇り",
    45: "霧",
    48: "霧氷",
    51: "小雨",
    53: "雨",
    55: "強い雨",
    61: "小雨",
    63: "雨",
    65: "激しい雨",
    71: "小雪",
    73: "雪",
    75: "激しい雪",
    80: "にわか雨",
    81: "雨",
    82: "激しいにわか雨",
    95: "雷雨",
})


def describe_code(code: int) -> str:
    """Return the label for a weather code ("不明" when unmapped)."""
    return WEATHER_CODES.get(code, UNKNOWN_WEATHER)
