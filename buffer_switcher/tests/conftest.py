"""Shared test fixtures for Buffer Switcher."""

import pytest
from pathlib import Path

from buffer_switcher.models.buffer import Buffer
from buffer_switcher.services.buffer_list import BufferList
from buffer_switcher.services.config import ConfigManager
from buffer_switcher.services.switcher import SwitcherState


def make_buffers(*labels: str) -> BufferList:
    """Snapshot with ids 1..n, labels used as-is."""
    return BufferList(
        Buffer.from_entry([i, label, {"n": i}]) for i, label in enumerate(labels, start=1)
    )


@pytest.fixture
def config_manager(tmp_path: Path) -> ConfigManager:
    """Create a ConfigManager with temp directory."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    return ConfigManager(config_dir=config_dir)


@pytest.fixture
def sample_buffers() -> BufferList:
    """Small snapshot covering suffix, substring, fuzzy and no-match cases."""
    return make_buffers(
        "src/main.ext",
        "README.doc",
        "src/lib.ext",
        "docs/extending.md",
        "tests/e_x_t.py",
    )


@pytest.fixture
def switcher_state() -> SwitcherState:
    """State loaded with one buffer list per tab."""
    state = SwitcherState()
    state.update(
        current_tab=[
            [1, "/work/proj/src/app.py", {"tab": 1}],
            [2, "/work/proj/README.md", {"tab": 1}],
        ],
        other_tabs=[
            [7, "/home/me/notes/app.txt", {"tab": 2}],
            [8, "/etc/hosts", None],
        ],
        cwd="/work/proj",
        home="/home/me",
    )
    return state
