"""
GitHub-flavored markdown for before/after comparisons.
"""

from typing import Iterable

from prepost.schemas import ComparisonTarget


def generate_markdown(
    before_src: str,
    after_src: str,
    before_label: str = "Before",
    after_label: str = "After",
) -> str:
    """
    Two-column markdown table with the before and after images.

    Args:
        before_src: Image path or URL for the before state
        after_src: Image path or URL for the after state
        before_label: Column header and alt text for the before image
        after_label: Column header and alt text for the after image
    """
    return "\n".join([
        f"| {before_label} | {after_label} |",
        "|:------:|:-----:|",
        f"| ![{before_label}]({before_src}) | ![{after_label}]({after_src}) |",
    ])


def generate_plan_markdown(targets: Iterable[ComparisonTarget]) -> str:
    """One headed table per comparison target, separated by blank lines."""
    sections = []
    for target in targets:
        heading = f"### `{target.route}`"
        if target.preset:
            heading += f" ({target.preset})"
        sections.append(heading + "\n\n" + generate_markdown(target.before_file, target.after_file))
    return "\n\n".join(sections)
