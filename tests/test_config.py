"""Tests for suite config loading and validation."""

import textwrap
from pathlib import Path

import pytest
from pydantic import ValidationError

from dietest.config import SuiteConfig, UnexpectedErrorPolicy, load_config


@pytest.fixture()
def tmp_yaml(tmp_path):
    """Helper that writes YAML content to a temp file and returns its path."""

    def _write(content: str) -> Path:
        p = tmp_path / "suite.yaml"
        p.write_text(textwrap.dedent(content))
        return p

    return _write


def test_load_minimal_config(tmp_yaml):
    path = tmp_yaml("""\
        name: hello kitty
    """)
    cfg = load_config(path)
    assert cfg.name == "hello kitty"
    assert cfg.purpose == ""
    assert cfg.unexpected_errors is UnexpectedErrorPolicy.RAISE


def test_load_full_config(tmp_yaml):
    path = tmp_yaml("""\
        name: hello kitty
        purpose: Testing the powers of Hello Kitty!
        unexpected_errors: fail
    """)
    cfg = load_config(path)
    assert cfg.purpose == "Testing the powers of Hello Kitty!"
    assert cfg.unexpected_errors is UnexpectedErrorPolicy.FAIL


def test_unknown_policy_rejected(tmp_yaml):
    path = tmp_yaml("""\
        name: hello kitty
        unexpected_errors: ignore
    """)
    with pytest.raises(ValidationError):
        load_config(path)


def test_extra_keys_rejected(tmp_yaml):
    path = tmp_yaml("""\
        name: hello kitty
        parallel: 4
    """)
    with pytest.raises(ValidationError, match="parallel"):
        load_config(path)


def test_missing_name_rejected(tmp_yaml):
    path = tmp_yaml("""\
        purpose: nameless
    """)
    with pytest.raises(ValidationError, match="name"):
        load_config(path)


def test_blank_name_rejected():
    with pytest.raises(ValidationError, match="must not be blank"):
        SuiteConfig(name="   ")


def test_empty_file_reports_missing_name(tmp_yaml):
    path = tmp_yaml("")
    with pytest.raises(ValidationError):
        load_config(path)


def test_non_mapping_rejected(tmp_yaml):
    path = tmp_yaml("""\
        - name: hello kitty
    """)
    with pytest.raises(ValueError, match="must be a mapping"):
        load_config(path)


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yaml")
