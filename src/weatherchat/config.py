"""Configuration constants.

Centralizes endpoints, model defaults and the fixed user-facing strings.
"""

from . import __version__

# Model
DEFAULT_MODEL = "gemini-2.5-flash"
API_KEY_ENV = "GEMINI_API_KEY"
MODEL_ENV = "GEMINI_MODEL"

# External weather services
GEOCODING_URL = "https://nominatim.openstreetmap.org/search"
FORECAST_URL = "https://api.open-meteo.com/v1/forecast"
FORECAST_DAILY_FIELDS = "weathercode,temperature_2m_max,temperature_2m_min"
FORECAST_TIMEZONE = "Asia/Tokyo"

# Nominatim's usage policy requires an identifying User-Agent
USER_AGENT_ENV = "WEATHERCHAT_USER_AGENT"
DEFAULT_USER_AGENT = f"weatherchat/{__version__}"

# Input validation (shown in the echo and response regions respectively)
EMPTY_INPUT_MESSAGE = "メッセージが入力されていません"
EMPTY_INPUT_RESPONSE = "処理できません"

# Response region states
THINKING_MESSAGE = "考え中..."
MODEL_ERROR_MESSAGE = "エラーが発生しました。"
NO_ANSWER_MESSAGE = "回答を生成できませんでした。"
BUSY_MESSAGE = "前のメッセージを処理中です。"

# Echo region labels
ECHO_LABEL = "入力したメッセージ"

# Tool results
LOCATION_NOT_FOUND_ERROR = "場所が見つかりませんでした。"
WEATHER_FETCH_ERROR = "天気データの取得中にエラーが発生しました。"

# Chat modes
MODE_SIMPLE = "simple"  # Stateless single generation per message
MODE_FUNCTIONS = "functions"  # Chat session with fetchWeather tool
