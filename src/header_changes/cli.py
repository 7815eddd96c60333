"""
Command line interface for the header_changes tool.

This module defines the ``main`` function which is used as the entry
point when executing the ``header-changes`` command. It locates the Git
repository, loads the configuration, runs the change detection pipeline
and reports which files need a header review together with the years
their header should mention.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict
from pathlib import Path
from typing import List, Optional

import click

from header_changes import __version__
from header_changes.config.loader import ConfigError, find_config, load_config
from header_changes.vcs.git_client import GitClient, GitError
from header_changes.versioning.augmenter import get_vcs_changes
from header_changes.versioning.model import FileChange, VersioningError

logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------
EXIT_SUCCESS = 0
EXIT_GENERIC_ERROR = 1
EXIT_NO_REPO = 3
EXIT_NO_CHANGES = 4
EXIT_CONFIG_ERROR = 5
EXIT_VCS_FAILURE = 6


# ---------------------------------------------------------------------------
# Display utilities
# ---------------------------------------------------------------------------

def print_info(message: str, indent: int = 0):
    """Print an info message."""
    prefix = "  " * indent
    click.echo(f"{prefix}ℹ {message}", err=True)


def print_success(message: str, indent: int = 0):
    """Print a success message."""
    prefix = "  " * indent
    click.echo(f"{prefix}✓ {message}", err=True)


def print_warning(message: str, indent: int = 0):
    """Print a warning message."""
    prefix = "  " * indent
    click.echo(f"{prefix}⚠ {message}", err=True)


def print_error(message: str, indent: int = 0):
    """Print an error message."""
    prefix = "  " * indent
    click.echo(f"{prefix}✗ {message}", err=True)


def format_years(change: FileChange) -> str:
    """Return the year range a header should mention for ``change``."""
    if change.creation_year == change.last_edition_year:
        return str(change.creation_year)
    return f"{change.creation_year}-{change.last_edition_year}"


def print_changes(changes: List[FileChange], as_json: bool) -> None:
    """Print the changes on stdout, one line per file or as a JSON list."""
    if as_json:
        click.echo(json.dumps([asdict(change) for change in changes], indent=2))
        return
    for change in sorted(changes, key=lambda c: c.path):
        suffix = ""
        if change.reference_content:
            suffix = " (reference content available)"
        click.echo(f"{change.path} {format_years(change)}{suffix}")


@click.command()
@click.option("--remote", help="Remote holding the reference branch (default: origin).")
@click.option("--branch", help="Reference branch (default: master).")
@click.option(
    "--reference-content",
    is_flag=True,
    help="Fetch each file's content at the reference branch.",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    help="Path of the JSON configuration file.",
)
@click.option("--json", "as_json", is_flag=True, help="Print the changes as JSON.")
@click.option("--verbose", is_flag=True, help="Enable verbose (debug) output.")
@click.version_option(version=__version__, prog_name="header-changes")
def main(
    remote: Optional[str],
    branch: Optional[str],
    reference_content: bool,
    config_path: Optional[Path],
    as_json: bool,
    verbose: bool,
) -> None:
    """List the files whose license header needs a review.

    Changes are computed between the working tree and the reference
    branch, and each file is reported with its creation and last edition
    years.
    """
    # Use force=True to ensure handlers are reconfigured on subsequent
    # invocations (important for tests).
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
        force=True,
    )

    try:
        repo_root = GitClient.find_repo_root(Path.cwd())
        if repo_root is None:
            print_error("Current directory is not inside a Git repository.")
            raise click.exceptions.Exit(EXIT_NO_REPO)
        logger.debug("Repository root: %s", repo_root)

        try:
            config = load_config(config_path or find_config(repo_root))
        except ConfigError as exc:
            print_error(f"Configuration error: {exc}")
            raise click.exceptions.Exit(EXIT_CONFIG_ERROR)

        remote = remote or config["remote"]
        branch = branch or config["branch"]
        reference_content = reference_content or config["reference_content"]

        print_info(f"Comparing working tree against {remote}/{branch}")
        try:
            changes = get_vcs_changes(GitClient(repo_root), remote, branch, reference_content)
        except (GitError, VersioningError) as exc:
            print_error(f"VCS error: {exc}")
            raise click.exceptions.Exit(EXIT_VCS_FAILURE)

        if not changes:
            print_warning("No changed files found.")
            raise click.exceptions.Exit(EXIT_NO_CHANGES)

        print_changes(changes, as_json)
        print_success(f"Found {len(changes)} changed file{'s' if len(changes) != 1 else ''}")
        raise click.exceptions.Exit(EXIT_SUCCESS)

    except click.exceptions.Exit:
        # Click uses its own Exit exception; re-raise to let Click handle it
        raise
    except Exception as exc:
        logging.exception("Unhandled error: %s", exc)
        print_error(f"Unexpected error: {exc}")
        raise click.exceptions.Exit(EXIT_GENERIC_ERROR)
