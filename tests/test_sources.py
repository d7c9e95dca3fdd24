"""
Unit tests for rule file loading.
"""
import pytest

from urlshort.sources import read_file_bytes


def test_reads_raw_bytes(rule_file):
    path = rule_file("rules.yml", "- path: /a\n  url: b\n")
    assert read_file_bytes(path) == b"- path: /a\n  url: b\n"


@pytest.mark.parametrize("path", [None, ""])
def test_no_path_yields_none(path):
    assert read_file_bytes(path) is None


def test_missing_file_yields_none(tmp_path):
    assert read_file_bytes(str(tmp_path / "missing.yml")) is None


def test_directory_yields_none(tmp_path):
    assert read_file_bytes(str(tmp_path)) is None


def test_empty_file_yields_empty_bytes(rule_file):
    assert read_file_bytes(rule_file("empty.json", "")) == b""
