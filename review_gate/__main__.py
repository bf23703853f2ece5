"""Command-line entry point for the review gate.

Usage (CI): the action passes INPUT_* variables; locally, pass flags:
  review-gate --owner octo --repo app --pull-request-number 42 \
      --target-login "copilot-pull-request-reviewer[bot]"
"""

import argparse
import asyncio
import sys

from review_gate.gate import run_gate
from review_gate.utils.logging import setup_observability


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="review-gate",
        description=(
            "Fail if a reviewer has unresolved review comments or a pending "
            "review on a pull request."
        ),
    )
    parser.add_argument("--token", help="GitHub token (default: INPUT_TOKEN or GITHUB_TOKEN)")
    parser.add_argument("--owner", help="Repository owner (default: from GITHUB_REPOSITORY)")
    parser.add_argument("--repo", help="Repository name (default: from GITHUB_REPOSITORY)")
    parser.add_argument(
        "--pull-request-number",
        help="Pull request number (default: from the event payload)",
    )
    parser.add_argument("--target-login", help="Login of the reviewer to check")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_observability()

    overrides = {
        "token": args.token,
        "owner": args.owner,
        "repo": args.repo,
        "pull_request_number": args.pull_request_number,
        "target_login": args.target_login,
    }
    return asyncio.run(run_gate(overrides=overrides))


if __name__ == "__main__":
    sys.exit(main())
