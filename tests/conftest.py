"""
Pytest configuration and shared fixtures for DOTTY tests.

This module provides common fixtures for the conversion engine, the
morse skill and the CLI.
"""
import io
import sys
import importlib.util
from pathlib import Path

import pytest

ROOT = Path(__file__).parent.parent
SKILLS_DIR = ROOT / "skills"

# The repo root *is* the Dotty package (see setup.py). Without an install,
# load it from the root directory under its package name.
try:
    import Dotty  # noqa: F401
except ImportError:
    _spec = importlib.util.spec_from_file_location(
        "Dotty", ROOT / "__init__.py", submodule_search_locations=[str(ROOT)]
    )
    _module = importlib.util.module_from_spec(_spec)
    sys.modules["Dotty"] = _module
    _spec.loader.exec_module(_module)

from rich.console import Console

from Dotty.core.morse import MORSE_ENTRIES, SymbolTable
from Dotty.cli.repl.session import ConverterSession


# =============================================================================
# Engine Fixtures
# =============================================================================

@pytest.fixture
def symbol_table():
    """Provide a freshly built symbol table."""
    return SymbolTable(MORSE_ENTRIES)


@pytest.fixture
def session():
    """Provide a converter session in encode mode."""
    return ConverterSession()


# =============================================================================
# Skill Fixtures
# =============================================================================

def load_skill_tools(skill_name: str):
    """Import skills/<skill_name>/tools.py as a module."""
    tools_file = SKILLS_DIR / skill_name / "tools.py"
    module_name = f"dotty_skill_{skill_name.replace('-', '_')}"
    spec = importlib.util.spec_from_file_location(module_name, tools_file)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture(scope="session")
def morse_skill():
    """Provide the morse-code-translator skill module."""
    return load_skill_tools("morse-code-translator")


# =============================================================================
# CLI Fixtures
# =============================================================================

class FakeClipboard:
    """Clipboard writer that records copies instead of running commands."""

    def __init__(self, ok: bool = True, settle: bool = True):
        self.ok = ok
        self.settle = settle
        self.copied = []
        self.pending = []

    def copy(self, text, callback=None):
        self.copied.append(text)
        message = "Copied to clipboard" if self.ok else "No clipboard tool found"
        if callback is None:
            return "worker"
        if self.settle:
            callback(self.ok, message)
        else:
            self.pending.append((callback, self.ok, message))
        return "worker"


@pytest.fixture
def fake_clipboard():
    return FakeClipboard()


@pytest.fixture
def home_dir(tmp_path, monkeypatch):
    """Point ~ at a temp directory so no real config or history is touched."""
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("USERPROFILE", str(tmp_path))
    return tmp_path


@pytest.fixture
def console_output():
    return io.StringIO()


@pytest.fixture
def make_cli(home_dir, console_output, fake_clipboard):
    """Factory for DottyCLI instances rendering into console_output."""
    from Dotty.cli.app import DottyCLI

    def _make(config_path=None, **kwargs):
        console = Console(file=console_output, width=100, no_color=True, force_terminal=False)
        return DottyCLI(
            config_path=config_path,
            no_color=True,
            console=console,
            clipboard=fake_clipboard,
            **kwargs
        )

    return _make
