"""Tests for the mealgrid command line."""

import json

from mealgrid.cli import main


def _write_availability(tmp_path):
    path = tmp_path / "availability.yaml"
    path.write_text(
        "- weekday: MON\n"
        "  timeSlot: NIGHT\n"
        "  status: AVAILABLE\n"
        "- weekday: XXX\n"
        "  timeSlot: DAY\n"
        "  status: AVAILABLE\n",
        encoding="utf-8",
    )
    return path


def test_grid_command(tmp_path, capsys):
    assert main(["grid", str(_write_availability(tmp_path))]) == 0
    out = capsys.readouterr().out
    assert "Available slots: 1/14" in out


def test_payload_command_sends_full_grid(tmp_path, capsys):
    assert main(["payload", str(_write_availability(tmp_path))]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert len(payload) == 14
    assert payload[1] == {"weekday": "MON", "timeSlot": "NIGHT", "status": "AVAILABLE"}


def test_payload_available_only(tmp_path, capsys):
    assert main(["payload", str(_write_availability(tmp_path)), "--available-only"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload == [{"weekday": "MON", "timeSlot": "NIGHT", "status": "AVAILABLE"}]


def test_pair_command(tmp_path, capsys):
    path = tmp_path / "overlap.json"
    path.write_text(
        json.dumps({"slots": [{"weekday": "TUE", "timeSlot": "DAY", "selfAvailable": True, "partnerAvailable": True}]}),
        encoding="utf-8",
    )
    assert main(["pair", str(path), "--today", "2026-10-19"]) == 0
    out = capsys.readouterr().out
    assert "=== Pair Schedule ===" in out
    assert "Joint slots: 1" in out


def test_template_command(tmp_path, capsys):
    output = tmp_path / "template.yaml"
    assert main(["template", str(output)]) == 0
    assert output.exists()
    assert main(["grid", str(output)]) == 0
    assert "Available slots: 0/14" in capsys.readouterr().out


def test_missing_file(tmp_path, capsys):
    assert main(["grid", str(tmp_path / "missing.yaml")]) == 1
    assert "File not found" in capsys.readouterr().err


def test_invalid_yaml(tmp_path, capsys):
    path = tmp_path / "broken.yaml"
    path.write_text("- weekday: [unclosed\n", encoding="utf-8")
    assert main(["payload", str(path)]) == 1
    assert "Error parsing" in capsys.readouterr().err


def test_band_command(capsys):
    assert main(["band", "night"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "NIGHT (夜) -> DINNER"
    assert out[1] == "Default meeting time: 19:00"
    assert out[2].startswith("Meeting times: 18:00, 18:30")
    assert out[2].endswith("23:00")


def test_pair_command_lists_joint_slots_with_band(tmp_path, capsys):
    path = tmp_path / "overlap.yaml"
    path.write_text(
        "- weekday: WED\n"
        "  timeSlot: DAY\n"
        "  selfAvailable: true\n"
        "  partnerAvailable: true\n"
        "- weekday: WED\n"
        "  timeSlot: NIGHT\n"
        '  selfAvailable: "false"\n'
        "  partnerAvailable: true\n",
        encoding="utf-8",
    )
    assert main(["pair", str(path), "--today", "2026-10-19"]) == 0
    out = capsys.readouterr().out
    assert "Joint slots: 1" in out
    assert "  2026-10-21 (水) LUNCH 12:00" in out
    assert "DINNER" not in out
