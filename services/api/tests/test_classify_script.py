from __future__ import annotations

import json

import pytest
from scripts.classify_message import main


def test_prints_ranked_matches(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["refund order #1042", "--top", "2"]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith("1. action_refund_order -> shop/orders/refund score=8")
    assert lines[0].endswith("(action)")
    assert '"order_id": 1042' in lines[1]
    assert lines[2].startswith("2. order_get -> shop/orders/get")


def test_json_output_respects_scope(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["cancel my subscription", "--caller-context", "customer", "--json"]) == 0

    matches = json.loads(capsys.readouterr().out)
    assert matches[0]["ability_id"] == "shop/customer/cancel-subscription"
    assert all(m["scope"] != "admin" for m in matches)


def test_no_match_exits_nonzero(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["what's the weather like", "--integrations", "none"]) == 1
    assert capsys.readouterr().out.strip() == "No matching intents."
