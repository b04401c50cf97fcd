"""Pytest fixtures for File Finder tests."""

import io
import tempfile
from pathlib import Path
from typing import Callable, Generator, Tuple

import pytest
from rich.console import Console

from filefinder.ui import FinderTUI

MB = 1024 * 1024
KB = 1024


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: fast tests of pure functions and models")
    config.addinivalue_line("markers", "integration: end-to-end workflow tests")


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for isolated test environments.

    Yields:
        Path to the temporary directory.
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def search_root(temp_dir: Path) -> Path:
    """Create the directory that tests search and delete under.

    A sentinel file next to it keeps ``temp_dir`` non-empty, so directory
    pruning never climbs out of the temporary directory.

    Returns:
        Path to ``temp_dir/root``.
    """
    (temp_dir / "sentinel.txt").write_text("keep")
    root = temp_dir / "root"
    root.mkdir()
    return root


@pytest.fixture
def make_file() -> Callable[[Path, int], Path]:
    """Return a helper that writes a file of an exact size, creating parents."""

    def _make_file(path: Path, size: int = 0) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(b"x" * size)
        return path

    return _make_file


@pytest.fixture
def media_tree(search_root: Path, make_file: Callable[[Path, int], Path]) -> Path:
    """Create the two-file tree used by the end-to-end scenarios.

    Creates:
        root/
        └── a/
            ├── video1.mp4  (2 MB)
            └── doc1.pdf    (10 KB)

    Returns:
        Path to the root directory.
    """
    make_file(search_root / "a" / "video1.mp4", 2 * MB)
    make_file(search_root / "a" / "doc1.pdf", 10 * KB)
    return search_root


@pytest.fixture
def nested_tree(search_root: Path, make_file: Callable[[Path, int], Path]) -> Path:
    """Create a nested tree with mixed file types.

    Creates:
        root/
        ├── top.txt                    (100 B)
        ├── notes                      (50 B, no extension)
        ├── movies/
        │   ├── film.mkv               (1000 B)
        │   └── series/
        │       ├── ep1.mp4            (2000 B)
        │       └── EP2.MP4            (3000 B)
        ├── photos/
        │   ├── holiday.jpg            (500 B)
        │   └── raw/
        │       └── shot.RAW           (4000 B)
        └── archives/
            └── backup.tar.gz          (6000 B)

    Returns:
        Path to the root directory.
    """
    make_file(search_root / "top.txt", 100)
    make_file(search_root / "notes", 50)
    make_file(search_root / "movies" / "film.mkv", 1000)
    make_file(search_root / "movies" / "series" / "ep1.mp4", 2000)
    make_file(search_root / "movies" / "series" / "EP2.MP4", 3000)
    make_file(search_root / "photos" / "holiday.jpg", 500)
    make_file(search_root / "photos" / "raw" / "shot.RAW", 4000)
    make_file(search_root / "archives" / "backup.tar.gz", 6000)
    return search_root


@pytest.fixture
def captured_console() -> Tuple[Console, io.StringIO]:
    """Create a wide, non-terminal Rich Console writing to a StringIO.

    Returns:
        Tuple of (Console, StringIO for reading output).
    """
    output = io.StringIO()
    console = Console(file=output, force_terminal=False, width=200)
    return console, output


@pytest.fixture
def tui_with_output(captured_console: Tuple[Console, io.StringIO]) -> Tuple[FinderTUI, io.StringIO]:
    """Create a FinderTUI with captured output.

    Returns:
        Tuple of (FinderTUI instance, StringIO for reading output).
    """
    console, output = captured_console
    return FinderTUI(console=console), output
