"""Shared test fixtures."""

import os
import sys

# Ensure project root is on sys.path so the 'scilla' package is importable
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest


@pytest.fixture
def config_path(tmp_path, monkeypatch):
    """Point the config commands at a scilla.toml inside a temporary directory."""
    path = tmp_path / "config" / "scilla.toml"
    monkeypatch.setattr("scilla.commands.config.get_config_path", lambda: path)
    return path


@pytest.fixture
def answers(monkeypatch):
    """Feed canned answers to input(), in order."""

    def feed(*values):
        it = iter(values)
        monkeypatch.setattr("builtins.input", lambda prompt="": next(it))

    return feed
