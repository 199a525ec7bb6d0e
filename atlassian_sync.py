"""
Preview Simone milestone sync to Atlassian (Jira + Confluence).

Reads .simone/config/atlassian.json and a milestone meta document, then
prints the requests that would be sent. Nothing is sent.

Usage:
    # Show configuration and available commands
    python atlassian_sync.py

    # Show configured endpoints for Jira and Confluence
    python atlassian_sync.py test

    # Preview project / space creation
    python atlassian_sync.py create-project
    python atlassian_sync.py create-space

    # Preview epic + page for a milestone directory
    python atlassian_sync.py sync .simone/02_REQUIREMENTS/M07_Atlassian_Integration
"""

import argparse
import asyncio
import json
import sys
from collections.abc import Callable

import requests

from clients import ConfluenceClient, JiraClient
from milestone import read_milestone_meta
from payloads import (
    build_epic_payload,
    build_page_payload,
    build_project_payload,
    build_space_payload,
    request_body,
)
from utils import (
    CONFIG_FILE,
    DEFAULT_MILESTONE_PATH,
    find_placeholder_tokens,
    load_config_safe,
    resolve_config_path,
)

COMMANDS = {
    "test": "Test Atlassian connection",
    "create-project": "Create Jira project",
    "create-space": "Create Confluence space",
    "sync [path]": "Sync milestone to Atlassian",
}


def dump(payload: dict) -> str:
    """Format a payload for the console."""
    return json.dumps(payload, indent=2, ensure_ascii=False)


def request_line(prepare: Callable[[], requests.PreparedRequest]) -> str:
    """Describe a prepared request as 'METHOD URL'."""
    try:
        prepared = prepare()
    except requests.exceptions.RequestException as e:
        return f"(invalid URL: {e})"
    return f"{prepared.method} {prepared.url}"


class AtlassianSync:
    """Builds and prints Jira/Confluence requests from Simone metadata."""

    def __init__(self, config_path: str = CONFIG_FILE):
        self.config_path = config_path
        self.config = load_config_safe(resolve_config_path(config_path))
        self.jira = JiraClient(self.config)
        self.confluence = ConfluenceClient(self.config)

    def test_connection(self) -> dict[str, bool]:
        """Show what a connection test would hit. Nothing is contacted."""
        print("🔗 Testing Atlassian connection...")
        print("📋 Your Configuration:")
        print(f"   Jira: {self.config['jira']['baseUrl']}")
        print(f"   Confluence: {self.config['confluence']['baseUrl']}")
        print(f"   Email: {self.config['credentials']['email']}")
        print(f"   Cloud ID: {self.config['credentials']['cloudId']}")

        print("🎯 Testing Jira project access...")
        print(f"   Testing Jira project: {self.jira.project_key}")
        print(f"   Request: {request_line(self.jira.project_lookup)}")
        print(f"   Auth: {self.jira.email} (token configured)")
        print("   ✅ Jira connection configured")

        print("📄 Testing Confluence space access...")
        print(f"   Testing Confluence space: {self.confluence.space_key}")
        print(f"   Request: {request_line(self.confluence.space_lookup)}")
        print(f"   Auth: {self.confluence.email} (token configured)")
        print("   ✅ Confluence connection configured")

        for warning in find_placeholder_tokens(self.config):
            print(f"⚠️  {warning}")

        print("✅ Connection test completed!")
        return {"jira": True, "confluence": True}

    def create_jira_project(self) -> dict:
        """Build the Jira project creation record."""
        print("🎯 Creating Jira project with configuration...")
        project = build_project_payload(self.config)

        print("📋 Jira Project Configuration:")
        print(f"   Key: {project['key']}")
        print(f"   Name: {project['name']}")
        print(f"   Type: {project['projectTypeKey']}")
        print(f"   Lead: {project['lead']}")
        print(f"   URL: {project['url']}")
        print(f"   Auth: {project['auth']['email']} (token configured)")
        print(f"   Request: {request_line(lambda: self.jira.create_project(request_body(project)))}")
        print(dump(request_body(project)))
        return project

    def create_confluence_space(self) -> dict:
        """Build the Confluence space creation record."""
        print("📄 Creating Confluence space with configuration...")
        space = build_space_payload(self.config)

        print("📋 Confluence Space Configuration:")
        print(f"   Key: {space['key']}")
        print(f"   Name: {space['name']}")
        print(f"   Description: {space['description']['plain']['value']}")
        print(f"   URL: {space['url']}")
        print(f"   Auth: {space['auth']['email']} (token configured)")
        print(f"   Request: {request_line(lambda: self.confluence.create_space(request_body(space)))}")
        print(dump(request_body(space)))
        return space

    def sync_milestone(self, milestone_path: str) -> dict:
        """Build the epic and page for a milestone directory."""
        print("🔄 Syncing milestone to Atlassian...")
        try:
            meta = read_milestone_meta(milestone_path)

            epic = build_epic_payload(self.config, meta)
            print(f"📋 Epic data ({request_line(lambda: self.jira.create_issue(epic))}):")
            print(dump(epic))

            page = build_page_payload(self.config, meta)
            print(f"📄 Page data ({request_line(lambda: self.confluence.create_page(page))}):")
            print(dump(page))
        except Exception as e:
            print(f"❌ Error syncing milestone: {e}")
            raise

        print("✅ Milestone sync configured")
        return {"epic": epic, "page": page}

    def usage(self) -> None:
        """Print configuration summary and available commands."""
        print("🎯 Simone Atlassian Integration Tool")
        print()
        print(f"✅ Configuration loaded from: {self.config_path}")
        print(f"   Jira: {self.config['jira']['baseUrl']}")
        print(f"   Confluence: {self.config['confluence']['baseUrl']}")
        print(f"   Email: {self.config['credentials']['email']}")
        print()
        print("Usage:")
        for command, description in COMMANDS.items():
            print(f"  atlassian-sync {command:<16} - {description}")


async def run_command(sync: AtlassianSync, command: str | None, path: str | None = None):
    """Route a command to the matching preview; unknown commands print usage."""
    if command == "test":
        return sync.test_connection()
    if command == "create-project":
        return sync.create_jira_project()
    if command == "create-space":
        return sync.create_confluence_space()
    if command == "sync":
        return sync.sync_milestone(path or DEFAULT_MILESTONE_PATH)
    sync.usage()
    return None


# ============================================================================
# CLI
# ============================================================================


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Preview Simone milestone sync to Jira and Confluence",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    python atlassian_sync.py test
    python atlassian_sync.py create-project
    python atlassian_sync.py sync .simone/02_REQUIREMENTS/M07_Atlassian_Integration
        """,
    )
    parser.add_argument("command", nargs="?", default=None, help="test, create-project, create-space or sync")
    parser.add_argument("path", nargs="?", default=None, help="Milestone directory for sync")

    if argv is None:
        argv = sys.argv[1:]

    # Extra arguments are ignored; there are no flags besides -h
    args, _ = parser.parse_known_args(argv)
    command = args.command
    if argv and argv[0].startswith("-"):
        command = argv[0]

    try:
        sync = AtlassianSync()
        asyncio.run(run_command(sync, command, args.path))
    except Exception as e:
        print(f"❌ Error: {e}")
        return 1
    return 0


if __name__ == "__main__":
    exit(main())
