import argparse
import logging
import sys
from dataclasses import replace

from gh_repo_list.config import Config
from gh_repo_list.readme import END_MARK, START_MARK, update_section
from gh_repo_list.render import render_list
from gh_repo_list.repos import list_repos

logger = logging.getLogger(__name__)


def update_repo_list(config, dry_run=False):
    logger.info("Generating repository list for %s...", config.owner)
    repos = list_repos(config)
    body = render_list(repos)
    result = update_section(config.readme_path, body, START_MARK, END_MARK, dry_run=dry_run)
    logger.info("README updated." if result == "changed" else "No changes to README.")
    return result


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="gh-repo-list",
        description="Write a GitHub user's repository list into a README section.",
    )
    parser.add_argument("--readme", help="markdown file to update (default: $README_PATH or README.md)")
    parser.add_argument("--dry-run", action="store_true", help="report the outcome without writing")
    parser.add_argument("-v", "--verbose", action="store_true", help="log every page request")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    try:
        config = Config.from_env()
        if args.readme:
            config = replace(config, readme_path=args.readme)
        update_repo_list(config, dry_run=args.dry_run)
        return 0
    except Exception as e:
        logger.error("Repository list update failed: %s", e, exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
