"""End-to-end test of scripts/generate_report.py on a file-backed SQLite store."""

from __future__ import annotations

import importlib.util
import json
from pathlib import Path

import pytest

from reporting_kernel.db.engine import (
    create_tables,
    init_engine_from_url,
    reset_engine,
    session_scope,
)
from reporting_kernel.domain.item import Direction
from reporting_kernel.services.reporting_item_store import ReportingItemStore

SCRIPT = Path(__file__).resolve().parents[2] / "scripts" / "generate_report.py"


@pytest.fixture(scope="module")
def generate_report():
    module_spec = importlib.util.spec_from_file_location("generate_report", SCRIPT)
    module = importlib.util.module_from_spec(module_spec)
    module_spec.loader.exec_module(module)
    return module


@pytest.fixture
def store_url(tmp_path, make_item):
    url = f"sqlite:///{tmp_path / 'items.db'}"
    init_engine_from_url(url)
    create_tables()
    with session_scope() as session:
        store = ReportingItemStore(session)
        store.store_all(
            [make_item(end_user_country_code="FI"), make_item(end_user_country_code="DE")],
            service_provider_id="POP000001",
        )
        store.store(
            make_item(direction=Direction.RECEIVING, end_user_country_code="FI"),
            service_provider_id="POP000002",
        )
    yield url
    reset_engine()


@pytest.fixture
def config_file(tmp_path, store_url):
    path = tmp_path / "reporting.yaml"
    path.write_text(
        f"reporter:\n  id: POP000001\nstorage:\n  database_url: {store_url}\n",
        encoding="utf-8",
    )
    return path


def test_tsr_to_file(generate_report, config_file, tmp_path):
    out = tmp_path / "tsr.json"
    code = generate_report.main(
        ["--config", str(config_file), "--month", "2023-06", "--out", str(out)]
    )
    assert code == 0
    report = json.loads(out.read_text(encoding="utf-8"))
    assert report["total"] == {"incoming": 1, "outgoing": 2}
    assert report["header"]["period"] == {"start": "2023-06-01", "end": "2023-06-30"}


def test_eusr_for_one_provider(generate_report, config_file, capsys):
    code = generate_report.main(
        [
            "--config", str(config_file),
            "--report", "eusr",
            "--month", "2023-06",
            "--service-provider", "POP000001",
        ]
    )
    assert code == 0
    report = json.loads(capsys.readouterr().out)
    assert [s["keys"][0]["value"] for s in report["subsets"]] == ["DE", "FI"]
    assert report["full_set"]["outgoing"] == 2


def test_bad_month_rejected(generate_report, config_file):
    with pytest.raises(SystemExit):
        generate_report.main(["--config", str(config_file), "--month", "June"])
