"""Tests for the FinderOrchestrator class."""

import io
import os
from pathlib import Path
from typing import Tuple
from unittest.mock import patch

import pytest

from filefinder.exceptions import DirectoryUnreadableError
from filefinder.models import FileType, SearchCriteria
from filefinder.orchestration import FinderOrchestrator
from filefinder.ui import FinderTUI


class TestSearchOnly:
    """Runs without deletion."""

    def test_grouped_run(
        self, media_tree: Path, tui_with_output: Tuple[FinderTUI, io.StringIO]
    ) -> None:
        tui, output = tui_with_output
        orchestrator = FinderOrchestrator(
            criteria=SearchCriteria(root_directory=media_tree, file_type=FileType.VIDEO),
            tui=tui,
        )

        summary = orchestrator.run()

        assert summary.total_count == 1
        assert summary.total_bytes == 2 * 1024 * 1024
        assert summary.files_deleted == 0
        assert summary.errors == []
        assert summary.duration_seconds >= 0
        assert str(media_tree / "a") in output.getvalue()
        assert (media_tree / "a" / "video1.mp4").exists()

    def test_detailed_run(
        self, media_tree: Path, tui_with_output: Tuple[FinderTUI, io.StringIO]
    ) -> None:
        tui, output = tui_with_output
        orchestrator = FinderOrchestrator(
            criteria=SearchCriteria(root_directory=media_tree, detailed=True),
            tui=tui,
        )

        summary = orchestrator.run()

        assert summary.total_count == 2
        result = output.getvalue()
        assert "video1.mp4" in result
        assert "doc1.pdf" in result

    def test_no_matches_skips_deletion_prompt(
        self, media_tree: Path, tui_with_output: Tuple[FinderTUI, io.StringIO]
    ) -> None:
        tui, output = tui_with_output
        orchestrator = FinderOrchestrator(
            criteria=SearchCriteria(root_directory=media_tree, name_filter="nothing"),
            remove_files=True,
            tui=tui,
        )

        with patch.object(tui, "confirm_deletion") as mock_confirm:
            summary = orchestrator.run()

        mock_confirm.assert_not_called()
        assert summary.total_count == 0
        assert "0 results found" in output.getvalue()

    def test_unreadable_root_propagates(
        self, temp_dir: Path, tui_with_output: Tuple[FinderTUI, io.StringIO]
    ) -> None:
        tui, _ = tui_with_output
        orchestrator = FinderOrchestrator(
            criteria=SearchCriteria(root_directory=temp_dir / "missing"),
            tui=tui,
        )

        with pytest.raises(DirectoryUnreadableError):
            orchestrator.run()

    def test_verbose_shows_search_warnings(
        self, nested_tree: Path, tui_with_output: Tuple[FinderTUI, io.StringIO], monkeypatch
    ) -> None:
        tui, output = tui_with_output
        real_scandir = os.scandir

        def guarded_scandir(path):
            if Path(path).name == "photos":
                raise PermissionError(13, "Permission denied", str(path))
            return real_scandir(path)

        monkeypatch.setattr("filefinder.scanning.traversal_engine.os.scandir", guarded_scandir)
        orchestrator = FinderOrchestrator(
            criteria=SearchCriteria(root_directory=nested_tree),
            verbose=True,
            tui=tui,
        )

        summary = orchestrator.run()

        assert summary.total_count == 6
        result = output.getvalue()
        assert "Search warnings:" in result
        assert "Skipping unreadable directory" in result


class TestDeletion:
    """Runs with remove_files."""

    def test_assume_yes_deletes_without_prompt(
        self, media_tree: Path, tui_with_output: Tuple[FinderTUI, io.StringIO]
    ) -> None:
        tui, output = tui_with_output
        orchestrator = FinderOrchestrator(
            criteria=SearchCriteria(root_directory=media_tree, file_type=FileType.VIDEO),
            remove_files=True,
            assume_yes=True,
            tui=tui,
        )

        with patch.object(tui, "confirm_deletion") as mock_confirm:
            summary = orchestrator.run()

        mock_confirm.assert_not_called()
        assert summary.files_deleted == 1
        assert summary.directories_deleted == 0
        assert not (media_tree / "a" / "video1.mp4").exists()
        assert (media_tree / "a" / "doc1.pdf").exists()
        assert "SUCCESS: Deleted 1 files and 0 directories." in output.getvalue()

    def test_confirmed_deletion_prunes_directories(
        self, media_tree: Path, tui_with_output: Tuple[FinderTUI, io.StringIO]
    ) -> None:
        tui, _ = tui_with_output
        (media_tree / "other.txt").write_text("x")
        orchestrator = FinderOrchestrator(
            criteria=SearchCriteria(root_directory=media_tree / "a"),
            remove_files=True,
            tui=tui,
        )

        with patch.object(tui, "confirm_deletion", return_value=True) as mock_confirm:
            summary = orchestrator.run()

        mock_confirm.assert_called_once_with(2)
        assert summary.files_deleted == 2
        assert summary.directories_deleted == 1
        assert not (media_tree / "a").exists()
        assert media_tree.is_dir()

    def test_declined_deletion(
        self, media_tree: Path, tui_with_output: Tuple[FinderTUI, io.StringIO]
    ) -> None:
        tui, output = tui_with_output
        orchestrator = FinderOrchestrator(
            criteria=SearchCriteria(root_directory=media_tree),
            remove_files=True,
            tui=tui,
        )

        with patch.object(tui, "confirm_deletion", return_value=False):
            summary = orchestrator.run()

        assert summary.cancelled is True
        assert summary.files_deleted == 0
        assert (media_tree / "a" / "video1.mp4").exists()
        assert "Deletion cancelled." in output.getvalue()

    def test_deletion_errors_reach_summary(
        self, media_tree: Path, tui_with_output: Tuple[FinderTUI, io.StringIO]
    ) -> None:
        tui, _ = tui_with_output
        orchestrator = FinderOrchestrator(
            criteria=SearchCriteria(root_directory=media_tree, file_type=FileType.VIDEO),
            remove_files=True,
            assume_yes=True,
            tui=tui,
        )

        with patch.object(Path, "unlink", side_effect=PermissionError("denied")):
            summary = orchestrator.run()

        assert summary.files_deleted == 0
        assert len(summary.errors) == 1
        assert "Error deleting" in summary.errors[0]


class TestRunLog:
    """Run log output."""

    def test_log_written_when_path_given(
        self, media_tree: Path, temp_dir: Path, tui_with_output: Tuple[FinderTUI, io.StringIO]
    ) -> None:
        tui, _ = tui_with_output
        log_path = temp_dir / "run.log"
        orchestrator = FinderOrchestrator(
            criteria=SearchCriteria(root_directory=media_tree, file_type=FileType.DOCUMENTS),
            remove_files=True,
            assume_yes=True,
            log_file_path=log_path,
            tui=tui,
        )

        orchestrator.run()

        content = log_path.read_text(encoding="utf-8")
        assert "Mode: REMOVE FILES" in content
        assert "Files matched: 1" in content
        assert "DELETION PHASE" in content
        assert "Files deleted: 1" in content

    def test_no_log_without_path(
        self, media_tree: Path, temp_dir: Path, tui_with_output: Tuple[FinderTUI, io.StringIO],
        monkeypatch
    ) -> None:
        tui, _ = tui_with_output
        monkeypatch.chdir(temp_dir)

        FinderOrchestrator(criteria=SearchCriteria(root_directory=media_tree), tui=tui).run()

        assert list(temp_dir.glob("*.log")) == []

    def test_unwritable_log_is_not_fatal(
        self, media_tree: Path, temp_dir: Path, tui_with_output: Tuple[FinderTUI, io.StringIO],
        capsys
    ) -> None:
        tui, _ = tui_with_output
        orchestrator = FinderOrchestrator(
            criteria=SearchCriteria(root_directory=media_tree),
            log_file_path=temp_dir / "missing" / "run.log",
            tui=tui,
        )

        summary = orchestrator.run()

        assert summary.total_count == 2
        assert "Could not create log file" in capsys.readouterr().err
