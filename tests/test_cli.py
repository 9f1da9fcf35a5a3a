"""
End-to-end runs of the command line entry point.
"""

import io
import json

import pytest

from main import main, parse_args


@pytest.fixture
def rankings(tmp_path, payload):
    path = tmp_path / "rankings.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def _write(tmp_path, name, lines):
    path = tmp_path / name
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


def test_parse_args_defaults():
    args = parse_args(["--input", "results.txt"])
    assert args.format == "author-line"
    assert args.data is None
    assert args.mla is False
    assert args.top is None


def test_parse_args_rejects_unknown_format():
    with pytest.raises(SystemExit):
        parse_args(["--input", "results.txt", "--format", "bibtex"])


def test_export(tmp_path, rankings):
    source = _write(tmp_path, "results.txt", [
        "J Smith - Proceedings of the ACM/IEEE 16th International Conference on Cyber-Physical, 2020 - acm.org",
        "J Doe - Quantum Basket Weaving Society, 2020 - example.org",
    ])
    out = tmp_path / "out.json"

    main(["--input", str(source), "--data", str(rankings), "--export", str(out)])

    data = json.loads(out.read_text(encoding="utf-8"))
    assert [r["status"] for r in data["results"]] == ["Accepted", "NotRanked"]
    assert data["results"][0]["ranking"]["key"] == "iccps"
    assert data["distribution"]["A"] == 1
    assert data["distribution"]["Unranked"] == 1
    assert data["distribution"]["total"] == 2


def test_profile_rows_with_mla(tmp_path, rankings):
    source = _write(tmp_path, "profile.txt", [
        "Quantum Basket Weaving Society 3 (2), 1-9, 2020\t<i>Artificial Intelligence</i> 12 (2020).",
        "Proceedings of the ACM/IEEE 16th International Conference on Cyber-Physical …, 2025",
    ])
    out = tmp_path / "out.json"

    main(["-i", str(source), "-d", str(rankings), "-f", "profile-row", "--mla", "-t", "1", "-e", str(out)])

    data = json.loads(out.read_text(encoding="utf-8"))
    assert [r["ranking"]["key"] for r in data["results"]] == ["aij", "iccps"]
    assert data["results"][1]["truncated"] is True


def test_stdin(tmp_path, rankings, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("J Doe - International Conference on Software Engineering, 2019 - ieee.org\n"))
    out = tmp_path / "out.json"

    main(["--input", "-", "--data", str(rankings), "--export", str(out), "--verbose"])

    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["results"][0]["tier"] == "exact"


def test_bundled_rankings(tmp_path, monkeypatch):
    monkeypatch.delenv("VENUERANK_DATA", raising=False)
    source = _write(tmp_path, "results.txt", [
        "A Author - International Conference on Machine Learning, 2021 - proceedings.mlr.press",
    ])
    out = tmp_path / "out.json"

    main(["--input", str(source), "--export", str(out)])

    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["results"][0]["ranking"]["key"] == "icml"


def test_missing_rankings_reports_not_ranked(tmp_path):
    source = _write(tmp_path, "results.txt", ["J Doe - Computer Networks, 2020 - Elsevier"])
    out = tmp_path / "out.json"

    main(["--input", str(source), "--data", str(tmp_path / "nope.json"), "--export", str(out)])

    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["results"][0]["status"] == "NotRanked"


def test_missing_input(tmp_path, rankings):
    with pytest.raises(SystemExit) as exc:
        main(["--input", str(tmp_path / "missing.txt"), "--data", str(rankings)])
    assert exc.value.code == 1


def test_empty_input(tmp_path, rankings):
    source = _write(tmp_path, "empty.txt", ["", "   "])
    with pytest.raises(SystemExit) as exc:
        main(["--input", str(source), "--data", str(rankings)])
    assert exc.value.code == 1
