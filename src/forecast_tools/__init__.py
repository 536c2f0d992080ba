from .nws import WeatherClient, WeatherError, NetworkError, DecodeError
from .weather import register_weather

__all__ = ["WeatherClient", "WeatherError", "NetworkError", "DecodeError", "register_weather"]
