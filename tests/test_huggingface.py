"""Tests for llmcheck.sources.huggingface -- remote catalog client."""

from __future__ import annotations

import json
import time

import httpx
import pytest

from llmcheck.sources.huggingface import (
    CACHE_FILE,
    HuggingFaceCatalog,
    estimate_vram_gb,
    extract_family,
    extract_parameter_count,
    to_model_definition,
)

_RECORDS = [
    {"id": "meta-llama/Meta-Llama-3-8B-Instruct", "tags": ["text-generation"], "downloads": 10},
    {"id": "Qwen/Qwen2.5-0.5B-Instruct", "tags": ["text-generation"], "downloads": 9},
    {"id": "HuggingFaceTB/SmolLM-360M", "tags": [], "downloads": 8},
]


class _FakeResponse:
    def __init__(self, status_code: int, json_data=None) -> None:
        self.status_code = status_code
        self._json_data = json_data

    def json(self):
        if isinstance(self._json_data, Exception):
            raise self._json_data
        return self._json_data


class _FakeHttpxClient:
    """Fake httpx.Client recording GET params."""

    def __init__(self, response: _FakeResponse | None = None, error: Exception | None = None):
        self._response = response
        self._error = error
        self.requests: list[tuple[str, dict]] = []

    def get(self, url, params=None, headers=None):
        self.requests.append((url, dict(params or {})))
        if self._error is not None:
            raise self._error
        return self._response


# ---------------------------------------------------------------------------
# Conversion helpers
# ---------------------------------------------------------------------------


class TestConversion:
    @pytest.mark.parametrize(
        "model_id, expected",
        [
            ("meta-llama/Meta-Llama-3-8B-Instruct", 8.0),
            ("mistralai/Mixtral-8x7B-v0.1", 7.0),
            ("Qwen/Qwen2.5-0.5B-Instruct", 0.5),
            ("microsoft/phi-2", 7.0),
            ("HuggingFaceTB/SmolLM-360M", 0.36),
            ("tiiuae/falcon-40b", 40.0),
        ],
    )
    def test_parameter_count(self, model_id: str, expected: float) -> None:
        assert extract_parameter_count(model_id) == expected

    def test_parameter_count_from_tags(self) -> None:
        assert extract_parameter_count("org/mystery", ["size:13b"]) == 13.0

    def test_family(self) -> None:
        assert extract_family("meta-llama/Llama-2-7b") == "llama"
        assert extract_family("google/gemma-2b") == "gemma"
        assert extract_family("bigscience/bloom-560m") == "other"

    def test_vram_estimate(self) -> None:
        assert estimate_vram_gb(7.0) == 17
        assert estimate_vram_gb(0.5) == 2

    def test_to_model_definition(self) -> None:
        model = to_model_definition(_RECORDS[0])
        assert model.name == "Meta-Llama-3-8B-Instruct"
        assert model.family == "llama"
        assert model.model_id == "meta-llama-meta-llama-3-8b-instruct"
        assert model.source == "huggingface"
        q4, fp16 = model.quantization_options
        assert (q4.format, q4.vram_gb, q4.ram_gb) == ("Q4_K_M", 10.0, 20)
        assert (fp16.format, fp16.vram_gb, fp16.ram_gb) == ("FP16", 20, 40)
        assert model.url == "https://huggingface.co/meta-llama/Meta-Llama-3-8B-Instruct"

    def test_record_without_id(self) -> None:
        with pytest.raises(ValueError):
            to_model_definition({"tags": []})


# ---------------------------------------------------------------------------
# Fetching and caching
# ---------------------------------------------------------------------------


class TestFetch:
    def test_fetch_models_and_query_params(self) -> None:
        client = _FakeHttpxClient(_FakeResponse(200, _RECORDS))
        catalog = HuggingFaceCatalog(client=client)
        models = catalog.fetch_models(limit=3)
        assert [m.name for m in models] == [
            "Meta-Llama-3-8B-Instruct",
            "Qwen2.5-0.5B-Instruct",
            "SmolLM-360M",
        ]
        _, params = client.requests[0]
        assert params == {
            "limit": 3,
            "filter": "text-generation",
            "sort": "downloads",
            "direction": -1,
        }

    def test_memory_cache_avoids_second_request(self) -> None:
        client = _FakeHttpxClient(_FakeResponse(200, _RECORDS))
        catalog = HuggingFaceCatalog(client=client)
        catalog.fetch_records()
        catalog.fetch_records()
        assert len(client.requests) == 1

    def test_expired_cache_refetches(self) -> None:
        client = _FakeHttpxClient(_FakeResponse(200, _RECORDS))
        catalog = HuggingFaceCatalog(client=client, cache_ttl=0.0)
        catalog.fetch_records()
        catalog.fetch_records()
        assert len(client.requests) == 2

    def test_disk_cache_round_trip(self, tmp_path) -> None:
        first = HuggingFaceCatalog(
            cache_dir=tmp_path, client=_FakeHttpxClient(_FakeResponse(200, _RECORDS))
        )
        first.fetch_records()
        assert (tmp_path / CACHE_FILE).exists()

        offline = _FakeHttpxClient(error=httpx.ConnectError("offline"))
        second = HuggingFaceCatalog(cache_dir=tmp_path, client=offline)
        assert len(second.fetch_records()) == 3
        assert offline.requests == []

    def test_stale_disk_cache_served_on_failure(self, tmp_path) -> None:
        payload = {"fetched_at": time.time() - 10 * 24 * 3600, "models": _RECORDS[:1]}
        (tmp_path / CACHE_FILE).write_text(json.dumps(payload))
        client = _FakeHttpxClient(error=httpx.ConnectError("offline"))
        catalog = HuggingFaceCatalog(cache_dir=tmp_path, client=client)
        assert len(catalog.fetch_records()) == 1
        assert len(client.requests) == 1

    def test_corrupt_disk_cache_ignored(self, tmp_path) -> None:
        (tmp_path / CACHE_FILE).write_text("{not json")
        catalog = HuggingFaceCatalog(
            cache_dir=tmp_path, client=_FakeHttpxClient(_FakeResponse(200, _RECORDS))
        )
        assert len(catalog.fetch_records()) == 3

    @pytest.mark.parametrize(
        "client",
        [
            _FakeHttpxClient(_FakeResponse(503, None)),
            _FakeHttpxClient(_FakeResponse(200, ValueError("bad json"))),
            _FakeHttpxClient(_FakeResponse(200, {"error": "unexpected shape"})),
            _FakeHttpxClient(error=httpx.ReadTimeout("slow")),
        ],
    )
    def test_failures_return_empty(self, client) -> None:
        assert HuggingFaceCatalog(client=client).fetch_models() == []

    def test_bad_record_is_skipped(self) -> None:
        records = [{"tags": []}, _RECORDS[0]]
        catalog = HuggingFaceCatalog(client=_FakeHttpxClient(_FakeResponse(200, records)))
        assert [m.name for m in catalog.fetch_models()] == ["Meta-Llama-3-8B-Instruct"]

    def test_default_client_uses_httpx(self, monkeypatch) -> None:
        fake = _FakeHttpxClient(_FakeResponse(200, _RECORDS))

        class _Ctx:
            def __init__(self, timeout=None):
                self.timeout = timeout

            def __enter__(self):
                return fake

            def __exit__(self, *exc):
                return False

        monkeypatch.setattr("llmcheck.sources.huggingface.httpx.Client", _Ctx)
        assert len(HuggingFaceCatalog().fetch_records()) == 3
