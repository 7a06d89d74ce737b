"""Current weather lookup with Chinese condition names."""

from __future__ import annotations

import json
import urllib.error
import urllib.parse
import urllib.request
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional, Union

API_BASE_URL = "http://api.openweathermap.org/data/2.5/weather?"
ICON_BASE_URL = "https://openweathermap.org/img/wn/"
UNSET_KEY_MARKER = "YOUR_OPENWEATHERMAP_API_KEY"
DEFAULT_CITY = "Tokyo"

CONDITION_TRANSLATIONS: Mapping[str, str] = {
    "clear sky": "晴空",
    "few clouds": "少云",
    "scattered clouds": "多云",
    "broken clouds": "碎云",
    "overcast clouds": "阴天",
    "shower rain": "阵雨",
    "rain": "雨",
    "light rain": "小雨",
    "moderate rain": "中雨",
    "heavy intensity rain": "大雨",
    "thunderstorm": "雷暴",
    "snow": "雪",
    "light snow": "小雪",
    "mist": "薄雾",
    "fog": "雾",
    "haze": "霾",
    "sleet": "雨夹雪",
    "light intensity drizzle": "毛毛雨",
    "drizzle": "毛毛雨",
    "heavy intensity drizzle": "大毛毛雨",
    "drizzle rain": "毛毛雨",
    "heavy intensity drizzle rain": "大毛毛雨",
    "light intensity shower rain": "小阵雨",
    "heavy intensity shower rain": "大阵雨",
    "ragged shower rain": "零星阵雨",
    "heavy snow": "大雪",
    "light shower sleet": "小阵雨夹雪",
    "shower sleet": "阵雨夹雪",
    "light rain and snow": "小雨夹雪",
    "rain and snow": "雨夹雪",
    "light shower snow": "小阵雪",
    "shower snow": "阵雪",
    "heavy shower snow": "大阵雪",
    "squalls": "飑",
    "tornado": "龙卷风",
    "dust whirls": "尘卷风",
    "sand/dust whirls": "沙尘暴",
    "volcanic ash": "火山灰",
    "smoke": "烟",
    "hail": "冰雹",
    "freezing rain": "冻雨",
}

JsonInput = Union[str, bytes, bytearray]
Opener = Callable[[str], Union[bytes, str]]


class WeatherError(Exception):
    """Raised when weather data cannot be fetched or understood."""


def translate_condition(english: str) -> str:
    """Chinese name of a condition; unknown conditions come back unchanged."""
    return CONDITION_TRANSLATIONS.get(english.lower(), english)


def format_temperature(temperature: float) -> str:
    """Temperature with one decimal and the Celsius sign."""
    return f"{temperature:.1f}°C"


def weather_url(city: str, api_key: str) -> str:
    """Request URL for the current metric weather of a city."""
    return (
        f"{API_BASE_URL}q={urllib.parse.quote(city)}"
        f"&units=metric&appid={urllib.parse.quote(api_key)}&lang=en"
    )


def icon_url(icon_code: str) -> Optional[str]:
    """URL of the double-size icon, or None when there is no icon code."""
    if not icon_code:
        return None
    return f"{ICON_BASE_URL}{icon_code}@2x.png"


@dataclass(frozen=True)
class WeatherReport:
    """Current weather of one city."""

    city: str
    temperature: float
    condition: str
    icon_code: str = ""

    @property
    def temperature_text(self) -> str:
        return format_temperature(self.temperature)

    @property
    def condition_zh(self) -> str:
        return translate_condition(self.condition)

    @property
    def icon_url(self) -> Optional[str]:
        return icon_url(self.icon_code)


def _text(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _number(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0.0
    return float(value)


def parse_weather_response(data: Union[JsonInput, Mapping[str, Any]]) -> WeatherReport:
    """Read a weather API response. Raises WeatherError when required fields are missing."""
    if isinstance(data, Mapping):
        root: Any = data
    else:
        text = bytes(data).decode("utf-8") if isinstance(data, (bytes, bytearray)) else data
        try:
            root = json.loads(text)
        except (json.JSONDecodeError, ValueError):
            root = None
    if not isinstance(root, Mapping) or not all(k in root for k in ("main", "weather", "name")):
        raise WeatherError("无法解析天气数据。")

    main = root["main"] if isinstance(root["main"], Mapping) else {}
    weather = root["weather"] if isinstance(root["weather"], list) else []
    first = weather[0] if weather and isinstance(weather[0], Mapping) else {}
    return WeatherReport(
        city=_text(root["name"]),
        temperature=_number(main.get("temp")),
        condition=_text(first.get("description")),
        icon_code=_text(first.get("icon")),
    )


def _urlopen(url: str) -> bytes:
    with urllib.request.urlopen(url, timeout=10) as response:
        return response.read()


def fetch_weather(city: str, api_key: str, opener: Optional[Opener] = None) -> WeatherReport:
    """Fetch and parse the current weather of a city.

    Raises ValueError for an empty city, WeatherError when the key is unset,
    the request fails or the answer cannot be read.
    """
    city = city.strip()
    if not city:
        raise ValueError("请输入一个城市名称。")
    if not api_key or api_key == UNSET_KEY_MARKER:
        raise WeatherError("API Key 未设置！")
    fetch = opener or _urlopen
    try:
        body = fetch(weather_url(city, api_key))
    except (OSError, urllib.error.URLError) as exc:
        raise WeatherError(f"无法获取天气：{exc}") from exc
    return parse_weather_response(body)