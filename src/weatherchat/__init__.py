"""
Weatherchat: terminal chat front-ends for the Gemini API.

Two modes share one shape:
- simple: each message is a single stateless generation call
- functions: a persistent chat session where the model may call
  ``fetchWeather`` (Nominatim geocoding + Open-Meteo forecast)
"""

__version__ = "0.1.0"

from .chat import (
    FunctionCallingResponder,
    FunctionDispatcher,
    InputHandler,
    ModelClient,
    SimpleResponder,
)
from .weather import WeatherClient, describe_code

__all__ = [
    "FunctionCallingResponder",
    "FunctionDispatcher",
    "InputHandler",
    "ModelClient",
    "SimpleResponder",
    "WeatherClient",
    "describe_code",
]
