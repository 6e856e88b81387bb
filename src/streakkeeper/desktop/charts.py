"""Chart helpers for the desktop view and the CLI."""

from __future__ import annotations

from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Iterable

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt
import matplotlib.ticker as mticker

from ..services.view_model import ChartBar


def _save(fig, output: Path | None) -> Path:
    if output is None:
        with NamedTemporaryFile(delete=False, suffix=".png") as tmp:
            output = Path(tmp.name)
    fig.savefig(output, bbox_inches="tight", dpi=100)
    plt.close(fig)
    return output


def weekly_completion_png(bars: Iterable[ChartBar], *, output: Path | None = None) -> Path:
    """Render the 7-day completion-count bar chart and return the PNG path."""

    data = list(bars)
    fig, ax = plt.subplots(figsize=(7, 4))

    if not data or not any(bar.count for bar in data):
        ax.text(0.5, 0.5, "No completions this week\nMark a habit done to see it here",
                ha="center", va="center", fontsize=12, color="#999")
        ax.axis("off")
        return _save(fig, output)

    x_positions = list(range(len(data)))
    counts = [bar.count for bar in data]
    colors = ["#22C55E" if count else "#CBD5E1" for count in counts]
    ax.bar(x_positions, counts, color=colors, width=0.6)

    for x, count in zip(x_positions, counts):
        if count:
            ax.annotate(str(count), (x, count), textcoords="offset points", xytext=(0, 4),
                        ha="center", fontsize=9, fontweight="bold")

    ax.set_xticks(x_positions)
    ax.set_xticklabels([bar.label for bar in data])
    ax.yaxis.set_major_locator(mticker.MaxNLocator(integer=True))
    ax.set_ylim(0, max(counts) + 1)
    ax.set_title("Completions, last 7 days", fontsize=13, fontweight="bold", pad=12)
    ax.grid(True, axis="y", linestyle="--", alpha=0.3)
    ax.set_axisbelow(True)

    plt.tight_layout()
    return _save(fig, output)


__all__ = ["weekly_completion_png"]
