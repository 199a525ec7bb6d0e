"""Read milestone metadata from a milestone meta markdown document.

A milestone document looks like:

    # M07 Atlassian Integration - Milestone Meta

    ## Overview
    Integrate Simone with Atlassian Jira and Confluence.

    ## Success Criteria
    - [x] Jira project created
    - [ ] Confluence space created

Key and title come from the heading, the description from the first
paragraph(s) of "Overview", and the status from the checklist under
"Success Criteria".
"""

import os

from models import MilestoneMeta, MilestoneStatus
from patterns import Patterns
from utils import MILESTONE_META_FILE

DEFAULT_KEY = "M07"
DEFAULT_TITLE = "Atlassian Integration"
NO_DESCRIPTION = "No description provided"

DEFAULT_MILESTONE = MilestoneMeta(
    key=DEFAULT_KEY,
    title=DEFAULT_TITLE,
    description="Integrate Simone with Atlassian Jira and Confluence",
    status=MilestoneStatus(completed=0, total=9, percentage=0),
)


def find_section(content: str, heading: str, skip_blank: bool = False) -> str | None:
    """Return the body of the first `## <heading>` section, or None if absent.

    The body runs up to the next line starting with "##" or the end of the
    document.
    """
    match = Patterns.section(heading, skip_blank=skip_blank).search(content)
    if match is None:
        return None
    return match.group(1)


def extract_title(content: str) -> tuple[str, str]:
    """Get (key, title) from the milestone heading, or the defaults."""
    match = Patterns.MILESTONE_HEADING.search(content)
    if match is None:
        return DEFAULT_KEY, DEFAULT_TITLE
    return match.group(1), match.group(2)


def extract_description(content: str) -> str:
    """Get the trimmed text under "## Overview"."""
    overview = find_section(content, "Overview", skip_blank=True)
    if overview is None:
        return NO_DESCRIPTION
    return overview.strip()


def extract_status(content: str) -> MilestoneStatus:
    """Count checked and total checklist items under "## Success Criteria".

    Only lines starting with "- [" count; continuation lines of a
    multi-line item are ignored.
    """
    criteria = find_section(content, "Success Criteria")
    if criteria is None:
        return MilestoneStatus(completed=0, total=0, percentage=0)

    items = [line for line in criteria.split("\n") if line.strip().startswith(Patterns.CHECKLIST_PREFIX)]
    completed = sum(1 for line in items if Patterns.CHECKED_MARKER in line)
    return MilestoneStatus.from_counts(completed, len(items))


def parse_milestone_meta(content: str) -> MilestoneMeta:
    """Parse a milestone meta document."""
    key, title = extract_title(content)
    return MilestoneMeta(
        key=key,
        title=title,
        description=extract_description(content),
        status=extract_status(content),
    )


def read_milestone_meta(milestone_path: str | os.PathLike) -> MilestoneMeta:
    """Read the milestone meta document inside milestone_path.

    Returns the default milestone if the document does not exist. Other
    filesystem errors (e.g. permission denied) propagate.
    """
    meta_path = os.path.join(milestone_path, MILESTONE_META_FILE)
    if not os.path.exists(meta_path):
        print(f"ℹ️  {meta_path} not found, using default milestone {DEFAULT_KEY}")
        return DEFAULT_MILESTONE

    # Undecodable bytes become U+FFFD rather than failing the sync
    with open(meta_path, encoding="utf-8", errors="replace") as f:
        content = f.read()
    return parse_milestone_meta(content)
