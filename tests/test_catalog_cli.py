import importlib.util
import json
from pathlib import Path

import httpx
import pytest

from pyapi_catalog.integrations.clients.real_http.catalog_api import CatalogAPIClient

_CLI_PATH = Path(__file__).parent.parent / "scripts" / "catalog_cli.py"


@pytest.fixture
def cli(monkeypatch, http_client, tmp_path):
    module_spec = importlib.util.spec_from_file_location("catalog_cli", _CLI_PATH)
    module = importlib.util.module_from_spec(module_spec)
    module_spec.loader.exec_module(module)

    monkeypatch.setenv("CATALOG_API_URL", "http://x/")
    monkeypatch.setenv("CATALOG_API_KEY", "k123")
    monkeypatch.setattr(
        module, "CatalogAPIClient", lambda config: CatalogAPIClient(config, http_client=http_client)
    )
    return module


def test_list_prints_json(cli, fake_api, capsys, tmp_path):
    fake_api.products = [{"id": 1, "name": "Lamp", "price_eur": 5}, {"id": 2, "name": "Desk", "price_eur": 80}]

    code = cli.main(["--config", str(tmp_path / "none.yml"), "list", "--json", "--limit", "1"])

    assert code == 0
    out = json.loads(capsys.readouterr().out)
    assert [p["name"] for p in out["products"]] == ["Lamp"]


def test_list_reports_upstream_error(cli, fake_api, capsys, tmp_path):
    fake_api.list_response = httpx.Response(403, json={"detail": "Bad token"})

    code = cli.main(["--config", str(tmp_path / "none.yml"), "list"])

    assert code == 1
    assert "Error fetching products: Bad token" in capsys.readouterr().err


def test_add_prints_identifier(cli, fake_api, capsys, tmp_path):
    code = cli.main(["--config", str(tmp_path / "none.yml"), "add", "--name", "Lamp", "--price", "12.5", "--out-of-stock"])

    assert code == 0
    assert "Product added successfully! ID: 100" in capsys.readouterr().out
    body = json.loads(fake_api.requests[0].content)
    assert body["in_stock"] is False
    assert body["price_eur"] == 12.5


def test_invalid_config_reports_error(cli, monkeypatch, capsys, tmp_path):
    monkeypatch.setenv("CATALOG_CACHE_TTL", "abc")

    code = cli.main(["--config", str(tmp_path / "none.yml"), "list"])

    assert code == 1
    assert "Configuration error: invalid catalog configuration: cache_ttl_seconds" in capsys.readouterr().err
