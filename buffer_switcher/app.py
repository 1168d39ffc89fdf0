"""Buffer Switcher: jump to a file by typing part of its path.

Standalone Textual application around the ranking core.
"""

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path

from textual.app import App
from textual.binding import Binding

from buffer_switcher.screens.picker import BufferPicker
from buffer_switcher.services.config import ConfigManager
from buffer_switcher.services.discovery import CandidateDiscovery
from buffer_switcher.services.rank import Item
from buffer_switcher.services.switcher import SwitcherState
from buffer_switcher.styles import BASE_CSS


@dataclass
class Services:
    """Application service container for dependency injection."""

    config: ConfigManager
    discovery: CandidateDiscovery
    state: SwitcherState

    @classmethod
    def create(cls, working_dir: Path | None = None, config_dir: Path | None = None) -> "Services":
        """Wire up all services.

        Args:
            working_dir: Directory to offer files from (defaults to cwd)
            config_dir: Config directory override (defaults to ~/.config/buffer-switcher)
        """
        working_dir = working_dir or Path.cwd()
        config = ConfigManager(config_dir=config_dir)
        discovery = CandidateDiscovery(working_dir, config.config.discovery)
        state = SwitcherState(config.config.labels)
        return cls(config=config, discovery=discovery, state=state)

    def load_paths(self, paths: list[str]) -> None:
        """Make paths the current tab snapshot."""
        entries = self.discovery.as_entries(paths)
        self.state.update(entries, [], str(self.discovery.root))


class BufferSwitcherApp(App):
    """Picker application; exits with the selected Item or None."""

    TITLE = "Buffer Switcher"
    CSS = BASE_CSS + """
    Screen {
        background: $background;
    }
    """

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit", show=False),
    ]

    def __init__(self, services: Services, query: str = "", **kwargs):
        """Initialize the app with injected services.

        Args:
            services: Service container with a loaded snapshot
            query: Initial query text
            **kwargs: Additional Textual app arguments
        """
        super().__init__(**kwargs)
        self.services = services
        self._query = query

    def on_mount(self) -> None:
        picker = BufferPicker(
            self.services.state,
            self.services.config.config.picker,
            query=self._query,
        )
        self.push_screen(picker, self._on_picked)

    def _on_picked(self, item: Item | None) -> None:
        self.exit(item)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="buffer-switcher",
        description="Jump to a file by typing part of its path.",
    )
    parser.add_argument("root", nargs="?", type=Path, default=None, help="directory to list (default: cwd)")
    parser.add_argument("-q", "--query", default="", help="initial query")
    parser.add_argument("--paths-from", type=Path, default=None, help="read candidate paths from a file, one per line")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the picker and print the chosen path."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    root = (args.root or Path.cwd()).resolve()
    services = Services.create(working_dir=root)

    if args.paths_from is not None:
        try:
            with args.paths_from.open() as stream:
                paths = services.discovery.read_lines(stream)
        except OSError as e:
            parser.error(f"cannot read {args.paths_from}: {e.strerror or e}")
    else:
        paths = services.discovery.walk()
    services.load_paths(paths)

    result = BufferSwitcherApp(services, query=args.query).run()
    if isinstance(result, Item):
        path = result.metadata.get("path", result.label) if isinstance(result.metadata, dict) else result.label
        print(path)
        return 0
    return 1


if __name__ == "__main__":
    sys.exit(main())
