"""Centralized regex patterns for milestone metadata documents."""

import re


class Patterns:
    """Regex patterns used when reading milestone documents."""

    # Title line: "# M07 Atlassian Integration - Milestone Meta"
    MILESTONE_HEADING = re.compile(r"^#\s*(M\d+)\s+(.+?)\s*-\s*Milestone Meta", re.MULTILINE)

    # Section boundary: any line starting with "##" (also matches "###")
    SECTION_END = r"(?=\n##|\Z)"

    # Checklist item prefix, checked against the stripped line
    CHECKLIST_PREFIX = "- ["

    # Checked item marker, anywhere in the line
    CHECKED_MARKER = "- [x]"

    @staticmethod
    def section(heading: str, skip_blank: bool = False) -> re.Pattern:
        """Build the pattern for the body of a `## <heading>` section.

        With skip_blank, leading whitespace is skipped and the body must be
        non-empty.
        """
        body = r"\s*(.+?)" if skip_blank else r"(.*?)"
        return re.compile(
            rf"## {re.escape(heading)}\s*\n{body}{Patterns.SECTION_END}", re.DOTALL
        )
