from __future__ import annotations
import argparse
import json
import sys

from jobflow.ats import resolve_all_jobs, resolve_job
from jobflow.core.config import settings
from jobflow.core.logging import setup_logging


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Resolve a job board URL to normalized job data.")
    parser.add_argument("url")
    parser.add_argument("--all", action="store_true", help="list every posting on the board")
    args = parser.parse_args(argv)

    setup_logging(settings.log_level)

    if args.all:
        result = resolve_all_jobs(args.url)
        payload = [job.to_dict() for job in result.value] if result.ok else None
    else:
        result = resolve_job(args.url)
        payload = result.value.to_dict() if result.ok else None

    if payload is None:
        print(f"{result.failure.value}: {result.detail}", file=sys.stderr)
        return 1
    print(json.dumps(payload, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
