"""Bar charts of word-list counts."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import matplotlib as mpl

mpl.use("Agg")  # Render to files only
import matplotlib.pyplot as plt

if TYPE_CHECKING:
    from collections.abc import Mapping

    from matplotlib.figure import Figure

_logger = logging.getLogger(__name__)


def create_word_list_chart(
    reports: Mapping[str, Mapping[str, int | None]],
    *,
    title: str | None = None,
) -> Figure:
    """Create a bar chart with one colored group of bars per word list.

    Args:
        reports: Word list name -> (word -> count or None).
        title: Optional chart title.

    Returns:
        A matplotlib Figure object.
    """
    fig, ax = plt.subplots(figsize=(10, 5))

    position = 0
    ticks: list[int] = []
    labels: list[str] = []
    for name, report in reports.items():
        words = list(report)
        xs = list(range(position, position + len(words)))
        heights = [report[word] or 0 for word in words]
        bars = ax.bar(xs, heights, label=name)
        for bar, word in zip(bars, words):
            if report[word] is None:
                ax.annotate(
                    "absent",
                    (bar.get_x() + bar.get_width() / 2, 0),
                    ha="center",
                    va="bottom",
                    fontsize=7,
                    rotation=90,
                )
        ticks.extend(xs)
        labels.extend(words)
        position += len(words) + 1  # gap between lists

    ax.set_xticks(ticks)
    ax.set_xticklabels(labels, rotation=45, ha="right")
    ax.set_ylabel("Count")
    if reports:
        ax.legend()
    if title:
        ax.set_title(title)
    fig.tight_layout()

    return fig


def save_chart(fig: Figure, filepath: str | Path) -> Path:
    """Save a chart as PNG and close it.

    Returns:
        Path the image was written to.
    """
    path = Path(filepath)
    fig.savefig(path, format="png", bbox_inches="tight", dpi=150)
    plt.close(fig)
    _logger.info("Saved chart to %s", path)
    return path
