"""File Finder CLI.

A command-line interface for finding files by type, name and size, and
optionally removing them.

This module re-exports the CLI app from filefinder.cli for `python file_finder.py`
usage.

Usage examples:
    # Per-directory counts of video files
    python file_finder.py /path/to/media -t video

    # Detailed listing of files around 700 MB
    python file_finder.py /path/to/media -s "700 MB" -d

    # Remove matching files after confirmation
    python file_finder.py /path/to/media -t video -s "700 MB" -d -r
"""

from filefinder.cli import app

if __name__ == "__main__":
    app()
