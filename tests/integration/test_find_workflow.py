"""
Integration tests for the end-to-end find and delete workflow.

Tests cover:
- Search, summarize and delete on a realistic media library
- Grouped and detailed results agreeing on totals
- Repeated runs after deletion finding nothing
- Deletion leaving unmatched content and its directories intact
"""

from pathlib import Path

import pytest

from filefinder.models import FileType, OperatorType, SearchCriteria
from filefinder.operations import DeletionPlanner
from filefinder.orchestration import FinderOrchestrator
from filefinder.scanning import ResultAggregator, TraversalEngine
from filefinder.ui import FinderTUI

KB = 1024
MB = 1024 * 1024


@pytest.fixture
def media_library(search_root: Path, make_file) -> Path:
    """Build a small media library.

    Creates:
        root/
        ├── Movies/
        │   ├── Action/
        │   │   ├── heist.mp4          (700 MB, sparse)
        │   │   └── heist.srt          (40 KB)
        │   └── Drama/
        │       └── letters.mkv        (690 MB, sparse)
        ├── Downloads/
        │   ├── sample.mp4             (5 MB)
        │   └── trailer.MOV            (720 MB, sparse)
        └── Photos/
            └── 2024/
                └── beach.jpg          (3 MB)
    """
    make_file(search_root / "Movies" / "Action" / "heist.srt", 40 * KB)
    make_file(search_root / "Downloads" / "sample.mp4", 5 * MB)
    make_file(search_root / "Photos" / "2024" / "beach.jpg", 3 * MB)
    for relative, size in [
        ("Movies/Action/heist.mp4", 700 * MB),
        ("Movies/Drama/letters.mkv", 690 * MB),
        ("Downloads/trailer.MOV", 720 * MB),
    ]:
        path = search_root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "wb") as handle:
            handle.truncate(size)
    return search_root


@pytest.mark.integration
class TestSearchWorkflow:
    """Search and summarize across the library."""

    def test_movie_sized_videos(self, media_library: Path):
        criteria = SearchCriteria(
            root_directory=media_library,
            file_type=FileType.VIDEO,
            size_filter=700 * MB,
            operator=OperatorType.EQUAL_TO,
            tolerance=0.05,
        )

        grouped = TraversalEngine(max_workers=2).search(criteria)
        summaries = ResultAggregator.sorted_summaries(grouped)

        assert grouped.total_count == 3
        assert grouped.total_bytes == (700 + 690 + 720) * MB
        assert [(s.directory.relative_to(media_library).as_posix(), s.count) for s in summaries] == [
            ("Downloads", 1),
            ("Movies/Action", 1),
            ("Movies/Drama", 1),
        ]

    def test_grouped_and_detailed_agree(self, media_library: Path):
        engine = TraversalEngine()
        grouped = engine.search(SearchCriteria(root_directory=media_library))
        detailed = engine.search(SearchCriteria(root_directory=media_library, detailed=True))

        assert grouped.total_count == detailed.total_count == 6
        assert grouped.total_bytes == detailed.total_bytes
        assert sorted(grouped.file_paths()) == sorted(detailed.file_paths())

    def test_small_files_with_less_than(self, media_library: Path):
        criteria = SearchCriteria(
            root_directory=media_library,
            size_filter=4 * MB,
            operator=OperatorType.LESS_THAN,
            tolerance=0.0,
            detailed=True,
        )

        detailed = TraversalEngine().search(criteria)

        assert sorted(e.file_name for e in detailed.entries) == ["beach.jpg", "heist.srt"]


@pytest.mark.integration
class TestDeleteWorkflow:
    """Search followed by deletion."""

    def test_delete_videos_then_search_again(self, media_library: Path):
        engine = TraversalEngine()
        criteria = SearchCriteria(root_directory=media_library, file_type=FileType.VIDEO)

        result = DeletionPlanner().delete(engine.search(criteria))

        assert result.files_deleted == 4
        assert result.errors == []
        # Drama held only a video; Action keeps its subtitle file
        assert not (media_library / "Movies" / "Drama").exists()
        assert (media_library / "Movies" / "Action" / "heist.srt").exists()
        assert not (media_library / "Downloads").exists()
        assert (media_library / "Photos" / "2024" / "beach.jpg").exists()
        assert result.directories_deleted == 2

        assert engine.search(criteria).total_count == 0
        remaining = engine.search(SearchCriteria(root_directory=media_library))
        assert remaining.total_count == 2

    def test_orchestrated_run_with_log(self, media_library: Path, temp_dir: Path,
                                       captured_console):
        console, output = captured_console
        log_path = temp_dir / "run.log"
        orchestrator = FinderOrchestrator(
            criteria=SearchCriteria(
                root_directory=media_library,
                file_type=FileType.IMAGE,
                detailed=True,
            ),
            remove_files=True,
            assume_yes=True,
            max_workers=3,
            log_file_path=log_path,
            tui=FinderTUI(console=console),
        )

        summary = orchestrator.run()

        assert summary.total_count == 1
        assert summary.files_deleted == 1
        assert summary.directories_deleted == 2  # 2024 and Photos
        assert not (media_library / "Photos").exists()
        assert "beach.jpg" in output.getvalue()
        content = log_path.read_text(encoding="utf-8")
        assert "Files deleted: 1" in content
        assert "Empty directories removed: 2" in content
