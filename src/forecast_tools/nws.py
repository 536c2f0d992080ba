import os
import sys
import requests

DEFAULT_BASE_URL = "https://api.weather.gov"
DEFAULT_USER_AGENT = "weather-forecast-mcp"
DEFAULT_TIMEOUT = 10


class WeatherError(Exception):
    """Base class for failures talking to the weather API."""


class NetworkError(WeatherError):
    """The request never produced a response (DNS, refused connection, timeout, bad URL)."""


class DecodeError(WeatherError):
    """The response body was not valid JSON."""


class WeatherClient:
    """
    Client for the National Weather Service (api.weather.gov).

    A forecast lookup is two chained GETs: the points endpoint tells us which
    forecast URL covers the coordinates, and that URL returns the forecast itself.
    The forecast document is returned exactly as decoded; its schema belongs to NWS.
    """

    def __init__(self, base_url=None, user_agent=None, timeout=None, session=None):
        self.base_url = (base_url or os.environ.get("WEATHER_API_BASE_URL") or DEFAULT_BASE_URL).rstrip("/")
        self.user_agent = user_agent or os.environ.get("WEATHER_USER_AGENT") or DEFAULT_USER_AGENT
        if timeout is None:
            timeout = float(os.environ.get("WEATHER_HTTP_TIMEOUT", DEFAULT_TIMEOUT))
        self.timeout = timeout
        self.session = session or requests.Session()

    def get_headers(self):
        # NWS rejects requests without an identifying User-Agent
        return {"User-Agent": self.user_agent}

    def _get_json(self, url: str):
        try:
            response = self.session.get(url, headers=self.get_headers(), timeout=self.timeout)
        except requests.RequestException as e:
            raise NetworkError(str(e)) from e

        with response:
            print(f"DEBUG: GET {url} -> {response.status_code}", file=sys.stderr)
            try:
                return response.json()
            except requests.JSONDecodeError as e:
                raise DecodeError(str(e)) from e

    def resolve_forecast_url(self, lat: str, lon: str) -> str:
        """
        Look up the forecast URL for a point.

        Coordinates are interpolated as given; NWS validates them and answers
        malformed ones with its own error document. Any body without a string
        `properties.forecast` resolves to an empty URL.
        """
        data = self._get_json(f"{self.base_url}/points/{lat},{lon}")

        properties = data.get("properties") if isinstance(data, dict) else None
        if not isinstance(properties, dict):
            return ""
        forecast = properties.get("forecast")
        return forecast if isinstance(forecast, str) else ""

    def fetch_document(self, url: str):
        return self._get_json(url)

    def get_forecast(self, lat: str, lon: str):
        """
        Resolve the forecast URL for (lat, lon) and fetch the forecast document.

        An empty forecast URL is passed straight to the second request, where
        requests refuses it and the lookup fails with NetworkError.
        """
        url = self.resolve_forecast_url(lat, lon)
        if not url:
            print(f"WARNING: no forecast URL for point {lat},{lon}", file=sys.stderr)
        return self.fetch_document(url)
