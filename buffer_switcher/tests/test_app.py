"""Tests for the picker application."""

import asyncio
from pathlib import Path

import pytest

from buffer_switcher.app import BufferSwitcherApp, Services, main
from buffer_switcher.screens.picker import BufferPicker


def test_app_import():
    """App module imports without errors."""
    assert BufferSwitcherApp is not None


@pytest.fixture
def services(tmp_path: Path) -> Services:
    """Services rooted at tmp_path with two files loaded."""
    services = Services.create(working_dir=tmp_path, config_dir=tmp_path / "config")
    services.load_paths([
        str(tmp_path / "src" / "main.py"),
        str(tmp_path / "README.md"),
    ])
    return services


def run_app(app: BufferSwitcherApp, *keys: str):
    """Run the app headless, press keys, return its exit value."""

    async def _run():
        async with app.run_test() as pilot:
            await pilot.pause()
            if keys:
                await pilot.press(*keys)
            await pilot.pause()
        return app.return_value

    return asyncio.run(_run())


class TestServices:
    """Tests for the service container."""

    def test_load_paths_shortens_labels(self, services: Services):
        labels = [b.label for b in services.state.current_tab]
        assert labels == ["./src/main.py", "./README.md"]

    def test_uses_config_dir(self, services: Services, tmp_path: Path):
        assert services.config.config_file == tmp_path / "config" / "config.json"


class TestPicker:
    """Drive the picker through the app."""

    def test_initial_query_selects_best(self, services: Services):
        result = run_app(BufferSwitcherApp(services, query="readme"), "enter")
        assert result.label == "./README.md"
        assert result.matched == [(2, 8)]

    def test_typing_reranks(self, services: Services):
        result = run_app(BufferSwitcherApp(services), "m", "a", "i", "n", "enter")
        assert result.label == "./src/main.py"

    def test_move_down(self, services: Services):
        # Browse mode orders by length: README first, main.py second
        result = run_app(BufferSwitcherApp(services), "down", "enter")
        assert result.label == "./src/main.py"

    def test_escape_cancels(self, services: Services):
        assert run_app(BufferSwitcherApp(services), "escape") is None

    def test_mounted_picker_lists_ranked_items(self, services: Services):
        app = BufferSwitcherApp(services, query="py")

        async def _run():
            async with app.run_test() as pilot:
                await pilot.pause()
                picker = app.screen
                assert isinstance(picker, BufferPicker)
                return [(item.label, item.matched) for item in picker.items]

        assert asyncio.run(_run()) == [
            ("./src/main.py", [(11, 13)]),
            ("./README.md", []),
        ]


class TestMain:
    """Tests for the console entry point."""

    def test_prints_selected_path(self, tmp_path: Path, monkeypatch, capsys):
        paths_file = tmp_path / "paths.txt"
        paths_file.write_text("/srv/a.txt\n/srv/b.txt\n")

        def fake_run(self):
            current, _ = self.services.state.rank("b.txt")
            return current.suffix[0]

        monkeypatch.setattr(BufferSwitcherApp, "run", fake_run)
        assert main([str(tmp_path), "--paths-from", str(paths_file)]) == 0
        assert capsys.readouterr().out.strip() == "/srv/b.txt"

    def test_cancel_returns_error_status(self, tmp_path: Path, monkeypatch):
        monkeypatch.setattr(BufferSwitcherApp, "run", lambda self: None)
        assert main([str(tmp_path)]) == 1

    def test_missing_paths_file_is_usage_error(self, tmp_path: Path, monkeypatch, capsys):
        monkeypatch.setattr(BufferSwitcherApp, "run", lambda self: pytest.fail("app should not start"))
        missing = tmp_path / "missing.txt"

        with pytest.raises(SystemExit) as exc_info:
            main([str(tmp_path), "--paths-from", str(missing)])

        assert exc_info.value.code == 2
        assert f"cannot read {missing}" in capsys.readouterr().err
