"""Command-line entry point for matching a profile against a jobs file."""

import argparse
import json
import os
import sys
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv
from pydantic import ValidationError

from job_matcher.exceptions import ConfigurationError, JobMatcherError, JobSourceError
from job_matcher.logging_config import get_structured_logger, setup_logging
from job_matcher.match_service import JobMatchService, MatchOptions
from job_matcher.models import Job
from job_matcher.profile.loader import ProfileLoader
from job_matcher.settings import MatchSettings, get_match_settings
from job_matcher.storage.job_source import FileJobSource


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="job-matcher",
        description="Score job postings against a user profile",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to matching config file (default: $JOB_MATCHER_CONFIG or config/matching.yaml)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level (default: WARNING, LOG_LEVEL overrides)",
    )
    parser.add_argument(
        "--no-env",
        action="store_true",
        help="Skip loading .env file",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    def add_common(sub: argparse.ArgumentParser) -> None:
        sub.add_argument("--profile", required=True, help="Path to profile JSON file")
        sub.add_argument("--jobs", required=True, help="Path to jobs JSON or YAML file")
        sub.add_argument("--output", help="Write the JSON result to this file instead of stdout")

    match_parser = subparsers.add_parser("match", help="Rank suitable jobs for the profile")
    add_common(match_parser)
    match_parser.add_argument("--min-score", type=int, help="Minimum score to keep (0-100)")
    match_parser.add_argument("--max-results", type=int, help="Maximum jobs to return")
    match_parser.add_argument(
        "--sort-by", choices=["score", "date"], help="Sort by score or posted date"
    )
    match_parser.add_argument("--workers", type=int, help="Thread pool size for scoring")

    score_parser = subparsers.add_parser("score", help="Explain the score of a single job")
    add_common(score_parser)
    selector = score_parser.add_mutually_exclusive_group(required=True)
    selector.add_argument("--job-id", help="Id of the job to score")
    selector.add_argument("--index", type=int, help="Position of the job in the file")

    stats_parser = subparsers.add_parser("stats", help="Score distribution across all jobs")
    add_common(stats_parser)
    stats_parser.add_argument("--workers", type=int, help="Thread pool size for scoring")

    return parser


def _build_options(args: argparse.Namespace, settings: MatchSettings) -> MatchOptions:
    try:
        return MatchOptions(
            min_score=settings.min_score if args.min_score is None else args.min_score,
            max_results=settings.max_results if args.max_results is None else args.max_results,
            sort_by=args.sort_by or settings.sort_by,
        )
    except ValidationError as e:
        raise ConfigurationError(f"Invalid match option: {str(e)}") from e


def _select_job(jobs: List[Job], job_id: Optional[str], index: Optional[int]) -> Job:
    if job_id is not None:
        for job in jobs:
            if job.id == job_id:
                return job
        raise JobSourceError(f"No job with id '{job_id}'")
    if index is None or not 0 <= index < len(jobs):
        raise JobSourceError(f"Job index {index} out of range (0-{len(jobs) - 1})")
    return jobs[index]


def _emit(payload: Dict[str, Any], output: Optional[str]) -> None:
    text = json.dumps(payload, indent=2, ensure_ascii=False)
    if output:
        with open(output, "w", encoding="utf-8") as f:
            f.write(text + "\n")
    else:
        print(text)


def run(args: argparse.Namespace) -> Dict[str, Any]:
    """Execute a parsed command and return its JSON payload."""
    settings = get_match_settings(args.config)
    workers = getattr(args, "workers", None) or settings.max_workers

    profile = ProfileLoader.load_from_json(args.profile)
    service = JobMatchService(FileJobSource(args.jobs), max_workers=workers)

    if args.command == "match":
        return service.match(profile, _build_options(args, settings)).to_dict()

    if args.command == "score":
        jobs = list(service.source.get_all_jobs())
        job = _select_job(jobs, args.job_id, args.index)
        payload = service.score(profile, job).to_dict()
        payload["job"] = job.to_dict()
        return payload

    return service.statistics(profile).to_dict()


def main(argv: Optional[List[str]] = None) -> int:
    """Run the job matcher with command-line configuration."""
    parser = build_parser()
    args = parser.parse_args(argv)

    # Load environment variables (unless --no-env)
    if not args.no_env:
        load_dotenv()

    os.environ.setdefault("ENVIRONMENT", "development")
    setup_logging(log_level=args.log_level)
    slogger = get_structured_logger(__name__)

    try:
        payload = run(args)
    except JobMatcherError as e:
        slogger.service_status("failed", {"command": args.command, "error": str(e)})
        print(f"Error: {e}", file=sys.stderr)
        return 1

    _emit(payload, args.output)
    slogger.service_status("finished", {"command": args.command})
    return 0


if __name__ == "__main__":
    sys.exit(main())
