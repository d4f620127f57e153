#!/usr/bin/env python3
"""
Example: query the CircleCI API for one project.

Reads the API token from CIRCLE_TOKEN (environment or .env) and prints the
current user, followed projects, recent builds and the details of one build.

Usage:
    python scripts/example.py segmentio analytics-android --branch pull/346 --build 345 [--retry]
"""

import logging
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from circleci_client import CircleCIClient, CircleCIError, RecentBuildsOptions

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def run_example(username: str, project: str, branch: str, build_num: int, retry: bool = False) -> int:
    with CircleCIClient.from_settings() as circle:
        try:
            me = circle.me()
            logger.info(f"Authenticated as {me.login} ({me.name})")

            for followed in circle.projects():
                logger.info(f"Following {followed.vcs_url}")

            for summary in circle.recent_builds()[:5]:
                logger.info(f"Recent: {summary.reponame} #{summary.build_num} {summary.status}")

            for summary in circle.recent_builds_for_project(username, project)[:5]:
                logger.info(f"{project} #{summary.build_num} on {summary.branch}: {summary.outcome}")

            options = RecentBuildsOptions(limit=2, offset=1, filter="completed")
            for summary in circle.recent_builds_for_project_branch(username, project, branch, options):
                logger.info(f"{branch} #{summary.build_num}: {summary.status}")

            detail = circle.build_summary(username, project, build_num)
            logger.info(f"Build #{detail.build_num} {detail.lifecycle}/{detail.outcome}")
            for step in detail.steps or []:
                logger.info(f"  step {step.name}: {len(step.actions or [])} action(s)")

            for artifact in circle.artifacts(username, project, build_num):
                logger.info(f"  artifact {artifact.pretty_path} -> {artifact.url}")

            if retry:
                new_build = circle.retry(username, project, build_num)
                logger.info(f"Retried as #{new_build.build_num} ({new_build.status})")
        except CircleCIError as e:
            logger.error(f"CircleCI request failed: {e}")
            return 1
    return 0


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Query the CircleCI API for one project")
    parser.add_argument("username", help="Account owning the repository")
    parser.add_argument("project", help="Repository name")
    parser.add_argument("--branch", default="master", help="Branch for the branch-scoped query")
    parser.add_argument("--build", type=int, required=True, help="Build number to inspect")
    parser.add_argument("--retry", action="store_true", help="Retry the inspected build (starts a new build)")

    args = parser.parse_args()

    try:
        sys.exit(run_example(args.username, args.project, args.branch, args.build, retry=args.retry))
    except ValueError as e:
        logger.error(str(e))
        sys.exit(2)
