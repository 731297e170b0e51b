"""
Unit tests for the JSON exporter.
"""

import json

from adapters.json_exporter import dumps, export_json
from core.domain.models import Money, PersonRecord
from core.services.temperature import classify_many


def test_export_creates_parent_dirs(tmp_path):
    target = tmp_path / "nested" / "dir" / "results.json"

    written = export_json(payload=classify_many([4, 23]), output_path=target)

    assert written == target
    text = target.read_text(encoding="utf-8")
    assert text.endswith("\n")
    assert json.loads(text) == [
        {"color": "blue", "degrees": 4, "label": "cold"},
        {"color": "red", "degrees": 23, "label": "hot"},
    ]


def test_single_model_dumps_to_object():
    data = json.loads(dumps(PersonRecord("Zoë", 19)))

    assert data == {"age": 19, "name": "Zoë"}


def test_non_ascii_is_kept_and_keys_sorted():
    text = dumps(PersonRecord("Zoë", 19))

    assert "Zoë" in text
    assert text.index('"age"') < text.index('"name"')


def test_decimal_amounts_dump_as_strings():
    data = json.loads(dumps(Money.usd("10.50")))

    assert data == {"amount": "10.50", "currency": "USD"}
