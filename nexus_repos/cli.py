"""CLI interface for managing Nexus repositories."""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import ValidationError

from .common.config import DEFAULT_CONFIG_PATH, load_typed_config
from .common.logger import setup_logger
from .repos.client import RepositoryClient
from .repos.errors import NexusError
from .repos.models import Repository
from .repos.transport import HttpxTransport


def load_definition(path: str) -> Repository:
    """Load a repository definition from a YAML or JSON file.

    JSON is a subset of YAML, so both are read with the YAML loader.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file does not describe a repository
    """
    definition_file = Path(path)
    if not definition_file.exists():
        raise FileNotFoundError(f"Repository definition not found: {path}")

    with definition_file.open("r") as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Repository definition must be a mapping: {path}")

    try:
        repo = Repository.from_payload(data)
    except ValidationError as e:
        raise ValueError(f"Invalid repository definition {path}: {e}") from e

    if not repo.format or not repo.type:
        raise ValueError(f"Repository definition needs 'format' and 'type': {path}")
    return repo


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nexus-repos", description="Manage Nexus repositories"
    )
    parser.add_argument(
        "-c",
        "--config",
        default=DEFAULT_CONFIG_PATH,
        help=f"Configuration file (default: {DEFAULT_CONFIG_PATH})",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    subparsers.add_parser("list", help="List all repositories")

    get_parser = subparsers.add_parser("get", help="Show a repository as JSON")
    get_parser.add_argument("name", help="Repository name")

    create_parser = subparsers.add_parser("create", help="Create a repository")
    create_parser.add_argument("file", help="YAML or JSON repository definition")

    update_parser = subparsers.add_parser("update", help="Update a repository")
    update_parser.add_argument("name", help="Repository name")
    update_parser.add_argument("file", help="YAML or JSON repository definition")

    delete_parser = subparsers.add_parser("delete", help="Delete a repository")
    delete_parser.add_argument("name", help="Repository name")

    return parser


def run(args: argparse.Namespace, client: RepositoryClient) -> int:
    """Execute a parsed command against a client."""
    if args.command == "list":
        for repo in client.list():
            print(f"{repo.name} {repo.format} {repo.type}")
        return 0

    if args.command == "get":
        repo = client.read(args.name)
        if repo is None:
            print(f"Repository not found: {args.name}", file=sys.stderr)
            return 1
        print(json.dumps(repo.to_payload(), indent=2))
        return 0

    if args.command == "create":
        repo = load_definition(args.file)
        client.create(repo, repo.format, repo.type)
        print(f"Created repository {repo.name}")
        return 0

    if args.command == "update":
        repo = load_definition(args.file)
        client.update(args.name, repo, repo.format, repo.type)
        print(f"Updated repository {args.name}")
        return 0

    if args.command == "delete":
        client.delete(args.name)
        print(f"Deleted repository {args.name}")
        return 0

    return 1


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the nexus-repos CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        config = load_typed_config(args.config)
    except (FileNotFoundError, TypeError, ValueError, yaml.YAMLError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    setup_logger(
        log_dir=config.logging.log_dir,
        level=config.logging.level,
        file_logging=config.logging.file_logging,
        console_logging=config.logging.console_logging,
    )

    with HttpxTransport.from_config(config.nexus) as transport:
        try:
            return run(args, RepositoryClient(transport))
        except (NexusError, FileNotFoundError, ValueError, yaml.YAMLError) as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1


if __name__ == "__main__":
    sys.exit(main())
