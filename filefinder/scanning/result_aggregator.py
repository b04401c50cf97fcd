"""Per-directory summaries of grouped search results."""

from typing import List

from filefinder.models import DirectorySummary, GroupedResult


class ResultAggregator:
    """Converts a GroupedResult into DirectorySummary rows."""

    @staticmethod
    def summarize(grouped: GroupedResult) -> List[DirectorySummary]:
        """Build one DirectorySummary per directory in ``grouped``.

        Rows follow the iteration order of the grouping, which depends on
        how sibling subtrees finished. Use sorted_summaries() when a stable
        order is needed.

        Args:
            grouped: Grouped search result.

        Returns:
            List of DirectorySummary with ``count`` equal to the number of
            matched files in that directory.
        """
        return [
            DirectorySummary(directory=directory, count=len(files))
            for directory, files in grouped.files.items()
        ]

    @classmethod
    def sorted_summaries(cls, grouped: GroupedResult) -> List[DirectorySummary]:
        """Same as summarize(), sorted by directory path."""
        return sorted(cls.summarize(grouped), key=lambda summary: str(summary.directory))
