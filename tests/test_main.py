import sys

import pytest

import main


def test_missing_sheet_id_exits_with_status_1(monkeypatch, log_messages):
    monkeypatch.setattr(sys, "argv", ["main.py"])
    monkeypatch.delenv("GOOGLE_SHEET_ID", raising=False)

    with pytest.raises(SystemExit) as exc:
        main.main()

    assert exc.value.code == 1
    assert any(r["level"].name == "CRITICAL" and "GOOGLE_SHEET_ID" in r["message"] for r in log_messages)


def test_unknown_action_rejected(monkeypatch):
    monkeypatch.setattr(sys, "argv", ["main.py", "forever"])
    with pytest.raises(SystemExit) as exc:
        main.main()
    assert exc.value.code == 2
