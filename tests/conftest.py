from __future__ import annotations

import json

import pytest
import requests
from requests.adapters import BaseAdapter

from forecast_tools import WeatherClient

POINTS_URL = "https://api.weather.gov/points/38.8894,-77.0352"
FORECAST_URL = "https://stub/forecast"
POINTS_BODY = {"properties": {"forecast": FORECAST_URL}}
FORECAST_BODY = {"periods": [{"name": "Tonight", "temperature": 60}]}


class StubAdapter(BaseAdapter):
    """Transport adapter answering from a URL -> response table instead of the network."""

    def __init__(self):
        super().__init__()
        self.routes = {}
        self.requests = []
        self.timeouts = []

    def add(self, url, body=None, status=200, error=None):
        if isinstance(body, (dict, list)):
            body = json.dumps(body).encode()
        elif isinstance(body, str):
            body = body.encode()
        self.routes[url] = (status, body or b"", error)

    def send(self, request, stream=False, timeout=None, verify=True, cert=None, proxies=None):
        self.requests.append(request)
        self.timeouts.append(timeout)

        if request.url not in self.routes:
            raise requests.ConnectionError(f"Connection refused: {request.url}")

        status, body, error = self.routes[request.url]
        if error is not None:
            raise error

        response = requests.Response()
        response.status_code = status
        response.url = request.url
        response.request = request
        response.headers["Content-Type"] = "application/geo+json"
        response._content = body
        response._content_consumed = True
        return response

    def close(self):
        pass


@pytest.fixture
def upstream():
    return StubAdapter()


@pytest.fixture
def session(upstream):
    session = requests.Session()
    session.mount("https://", upstream)
    session.mount("http://", upstream)
    return session


@pytest.fixture
def client(session):
    return WeatherClient(session=session)
