"""Async client for the geocoding and forecast services.

Place name -> coordinates via Nominatim, coordinates -> two-day forecast
via Open-Meteo. The HTTP client is created lazily and can be injected.
"""

from typing import Any

import httpx

from ..config import (
    DEFAULT_USER_AGENT,
    FORECAST_DAILY_FIELDS,
    FORECAST_TIMEZONE,
    FORECAST_URL,
    GEOCODING_URL,
    LOCATION_NOT_FOUND_ERROR,
    WEATHER_FETCH_ERROR,
)
from .codes import describe_code
from .models import (
    Coordinates,
    DailyForecast,
    DayForecast,
    WeatherError,
    WeatherQueryResult,
    WeatherReport,
)


class WeatherClient:
    """Fetches the weather for a place name.

    Hidden design decisions:
    - Which geocoding and forecast services are used
    - Query parameters and identifying headers
    - Reading today/tomorrow out of the daily series
    """

    def __init__(
        self,
        geocoding_url: str = GEOCODING_URL,
        forecast_url: str = FORECAST_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timezone: str = FORECAST_TIMEZONE,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the weather client.

        Args:
            geocoding_url: Nominatim search endpoint
            forecast_url: Open-Meteo forecast endpoint
            user_agent: Identifying User-Agent sent to the geocoder
            timezone: Timezone for the daily series
            http_client: Optional pre-built client (closed by the caller)
        """
        self._geocoding_url = geocoding_url
        self._forecast_url = forecast_url
        self._user_agent = user_agent
        self._timezone = timezone
        self._client = http_client
        self._owns_client = http_client is None
        self._debug_callback: Any | None = None

    def set_debug_callback(self, callback: Any) -> None:
        """Set debug callback for logging.

        Args:
            callback: Callable(level: str, component: str, message: str)
        """
        self._debug_callback = callback

    def _debug(self, level: str, component: str, message: str) -> None:
        if self._debug_callback:
            self._debug_callback(level, component, message)

    def _ensure_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient()
            self._owns_client = True
        return self._client

    async def close(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "WeatherClient":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()

    async def geocode(self, place_name: str) -> Coordinates | None:
        """Look up the coordinates of a place.

        Args:
            place_name: Free-form place name (e.g. "東京")

        Returns:
            Coordinates of the first match, or None when nothing matched

        Raises:
            httpx.HTTPError: On transport errors or non-2xx status
        """
        client = self._ensure_client()
        response = await client.get(
            self._geocoding_url,
            params={"q": place_name, "format": "json", "limit": 1},
            headers={"User-Agent": self._user_agent},
        )
        response.raise_for_status()
        results = response.json()

        if not results:
            self._debug("info", "Geocode", f"No match for '{place_name}'")
            return None

        first = results[0]
        coords = Coordinates(lat=first["lat"], lon=first["lon"])
        self._debug("debug", "Geocode", f"'{place_name}' -> {coords.lat}, {coords.lon}")
        return coords

    async def forecast(self, coords: Coordinates) -> DailyForecast:
        """Fetch today's and tomorrow's forecast for a position.

        Raises:
            httpx.HTTPError: On transport errors or non-2xx status
            KeyError, IndexError: If the response lacks the daily series
        """
        client = self._ensure_client()
        response = await client.get(
            self._forecast_url,
            params={
                "latitude": coords.lat,
                "longitude": coords.lon,
                "daily": FORECAST_DAILY_FIELDS,
                "timezone": self._timezone,
            },
        )
        response.raise_for_status()
        daily = response.json()["daily"]

        def _day(index: int) -> DayForecast:
            return DayForecast(
                weather=describe_code(daily["weathercode"][index]),
                max_temp=daily["temperature_2m_max"][index],
                min_temp=daily["temperature_2m_min"][index],
            )

        return DailyForecast(today=_day(0), tomorrow=_day(1))

    async def fetch_weather(self, location: str) -> WeatherQueryResult:
        """Geocode a place, then fetch its two-day forecast.

        Never raises: a place without matches and any failure of either
        request are returned as WeatherError.

        Args:
            location: Place name requested by the model

        Returns:
            WeatherReport or WeatherError
        """
        try:
            coords = await self.geocode(location)
            if coords is None:
                return WeatherError(error=LOCATION_NOT_FOUND_ERROR)

            daily = await self.forecast(coords)
            self._debug(
                "info", "Weather",
                f"{location}: today {daily.today.weather}, tomorrow {daily.tomorrow.weather}"
            )
            return WeatherReport(
                location=location,
                today=daily.today,
                tomorrow=daily.tomorrow,
            )
        except Exception as e:
            self._debug("error", "Weather", f"Fetch failed for '{location}': {e}")
            return WeatherError(error=WEATHER_FETCH_ERROR)
