# tests/test_cli.py - CLI smoke checks

import json

import pytest

from word_frequency.cli import main, parse_args


@pytest.fixture
def sample(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    p = tmp_path / "sample.txt"
    p.write_text("The cat sat. The dog sat! Of course.", encoding="utf-8")
    return p


def test_parse_args_defaults():
    args = parse_args(["book.txt"])
    assert args.path == "book.txt"
    assert args.chunk_size is None
    assert args.on_whitespace is None
    assert args.top == 20


def test_run_prints_table(sample, capsys):
    assert main([str(sample), "--chunk-size", "8", "--whitespace-boundaries", "--lookup", "sat", "of"]) == 0
    out = capsys.readouterr().out
    assert "Word frequencies" in out
    assert "sat" in out
    assert "Lookups" in out


def test_config_file_is_used(sample, tmp_path):
    cfg = tmp_path / "cfg.json"
    cfg.write_text(json.dumps({"chunk_size": 0}))
    # chunk_size 0 from the config is rejected
    assert main([str(sample), "--config", str(cfg)]) == 1
    # flag overrides the config
    assert main([str(sample), "--config", str(cfg), "--chunk-size", "50"]) == 0


def test_missing_file(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main([str(tmp_path / "nope.txt")]) == 1
    assert "error" in capsys.readouterr().out


@pytest.mark.parametrize("content", ["[1, 2]", '{"punctuation": null}', "not json"])
def test_bad_config_exits_with_error(sample, tmp_path, capsys, content):
    cfg = tmp_path / "cfg.json"
    cfg.write_text(content)
    assert main([str(sample), "--config", str(cfg)]) == 1
    assert "error" in capsys.readouterr().out


def test_negative_top_rejected(sample):
    assert main([str(sample), "--top", "-1"]) == 1
