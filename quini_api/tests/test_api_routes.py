import os
import unittest
from unittest import mock

import requests

from quini_api.app import create_app
from quini_api.config import AppSettings, ServerSettings, load_settings
from quini_scraper.config import ScraperSettings
from quini_scraper.datasource import SelectorScanSource
from quini_scraper.datasource.base import ResultSource
from quini_scraper.errors import NetworkError
from quini_scraper.fallback import EXAMPLE_NOTE
from quini_scraper.types import ResultSet


class StaticFetcher:
    def __init__(self, html: str) -> None:
        self._html = html

    def fetch(self, url: str) -> str:
        return self._html


class FailingSource(ResultSource):
    def __init__(self, name: str) -> None:
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    async def fetch_results(self) -> ResultSet:
        raise NetworkError("connection refused", source=self._name)


def _settings() -> AppSettings:
    return AppSettings(server=ServerSettings(), scraper=ScraperSettings())


def _balls(values) -> str:
    return "".join(f'<span class="ball">{v}</span>' for v in values)


class ResultRoutesTests(unittest.TestCase):
    def _client(self, sources=None):
        app = create_app(_settings(), sources=sources)
        return app.test_client()

    def test_all_sources_down_returns_example_data(self) -> None:
        client = self._client([FailingSource("a"), FailingSource("b"), FailingSource("c")])

        response = client.get("/v1/q6r/todoslosnumeros")

        self.assertEqual(response.status_code, 200)
        payload = response.get_json()
        self.assertEqual(payload["tradicional"][0]["numeros"], [5, 12, 23, 34, 41, 45])
        self.assertEqual(payload["siempreSale"][0]["numeros"], [7, 14, 21, 28, 35, 44])
        self.assertEqual(payload["tradicional"][0]["sorteo"], "Demo")
        self.assertEqual(payload["nota"], EXAMPLE_NOTE)

    def test_network_failures_on_default_sources_degrade_to_example_data(self) -> None:
        client = self._client()

        with mock.patch(
            "quini_scraper.fetcher.requests.get", side_effect=requests.ConnectionError("offline")
        ) as get:
            response = client.get("/v1/q6r/todoslosnumeros")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(get.call_count, 3)
        payload = response.get_json()
        self.assertEqual(payload["tradicional"][0]["numeros"], [5, 12, 23, 34, 41, 45])
        self.assertIn("nota", payload)

    def test_first_source_with_24_numbers_wins(self) -> None:
        source = SelectorScanSource("LotoFacil", "http://loto.test", StaticFetcher(_balls(range(24))))
        client = self._client([source, FailingSource("never")])

        payload = client.get("/v1/q6r/todoslosnumeros").get_json()

        self.assertEqual(payload["tradicional"][0]["numeros"], [0, 1, 2, 3, 4, 5])
        self.assertEqual(payload["segunda"][0]["numeros"], [6, 7, 8, 9, 10, 11])
        self.assertEqual(payload["revancha"][0]["numeros"], [12, 13, 14, 15, 16, 17])
        self.assertEqual(payload["siempreSale"][0]["numeros"], [18, 19, 20, 21, 22, 23])
        self.assertNotIn("nota", payload)

    def test_partial_source_leaves_later_categories_empty(self) -> None:
        source = SelectorScanSource("LotoFacil", "http://loto.test", StaticFetcher(_balls(range(8))))
        client = self._client([source])

        payload = client.get("/v1/q6r/todoslosnumeros").get_json()

        self.assertEqual(payload["tradicional"][0]["numeros"], [0, 1, 2, 3, 4, 5])
        self.assertEqual(payload["segunda"], [])
        self.assertEqual(payload["revancha"], [])
        self.assertEqual(payload["siempreSale"], [])

    def test_unexpected_collection_error_still_answers_200(self) -> None:
        client = self._client([FailingSource("a")])

        with mock.patch(
            "quini_api.routes.results.FallbackOrchestrator.collect", side_effect=RuntimeError("boom")
        ):
            response = client.get("/v1/q6r/todoslosnumeros")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_json()["nota"], EXAMPLE_NOTE)

    def test_draws_endpoint_uses_first_source(self) -> None:
        source = SelectorScanSource("LotoFacil", "http://loto.test", StaticFetcher(_balls(range(6))))
        client = self._client([source])

        payload = client.get("/v1/q6r/sorteos").get_json()

        self.assertEqual(len(payload["sorteos"]), 1)
        self.assertEqual(payload["sorteos"][0]["numero"], "Último")

    def test_draws_endpoint_placeholders(self) -> None:
        empty = SelectorScanSource("LotoFacil", "http://loto.test", StaticFetcher("<p></p>"))
        payload = self._client([empty]).get("/v1/q6r/sorteos").get_json()
        self.assertEqual(payload["sorteos"][0], {"numero": "N/A", "fecha": "N/A"})

        payload = self._client([FailingSource("a")]).get("/v1/q6r/sorteos").get_json()
        self.assertEqual(payload["sorteos"][0]["numero"], "Demo")


class HealthRoutesTests(unittest.TestCase):
    def setUp(self) -> None:
        self.client = create_app(_settings(), sources=[]).test_client()

    def test_index(self) -> None:
        response = self.client.get("/")
        self.assertEqual(response.status_code, 200)
        payload = response.get_json()
        self.assertEqual(payload["version"], "2.0")
        self.assertIn("message", payload)
        self.assertEqual(payload["endpoints"]["todosLosnumeros"], "/v1/q6r/todoslosnumeros")

    def test_health(self) -> None:
        response = self.client.get("/health")
        payload = response.get_json()
        self.assertEqual(payload["status"], "OK")
        self.assertTrue(payload["timestamp"].endswith("Z"))

    def test_cors_headers(self) -> None:
        response = self.client.get("/health")
        self.assertEqual(response.headers["Access-Control-Allow-Origin"], "*")

    def test_unknown_route_is_json_404(self) -> None:
        response = self.client.get("/nope")
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.get_json()["error"], "Not Found")


class SettingsTests(unittest.TestCase):
    def setUp(self) -> None:
        load_settings.cache_clear()

    def tearDown(self) -> None:
        load_settings.cache_clear()

    def test_port_defaults_to_5000(self) -> None:
        with mock.patch.dict(os.environ, {}, clear=True):
            settings = load_settings()
        self.assertEqual(settings.server.port, 5000)

    def test_port_from_environment(self) -> None:
        with mock.patch.dict(os.environ, {"PORT": "8080"}, clear=True):
            settings = load_settings()
        self.assertEqual(settings.server.port, 8080)
        self.assertEqual(settings.scraper.timeout_seconds, 10)


if __name__ == "__main__":
    unittest.main()
