from __future__ import annotations

import argparse
import json
from pathlib import Path

from resume_ats.ai.factory import get_scorer
from resume_ats.core.log import configure_logging, get_logger
from resume_ats.services.resume_service import build_candidate_record, process_resume

logger = get_logger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Parse a resume file and print its candidate record as JSON.")
    parser.add_argument("path", help="Resume file (.pdf, .docx or .txt)")
    parser.add_argument(
        "--scorer",
        choices=("deterministic", "ai"),
        default=None,
        help="Scoring mode; defaults to ATS_SCORER.",
    )
    parser.add_argument("--log-level", default=None, help="Overrides LOG_LEVEL.")
    args = parser.parse_args(argv)

    configure_logging(args.log_level)

    path = Path(args.path)
    if not path.is_file():
        logger.error("resume_file_missing path=%s", path)
        return 2

    result = process_resume(path.read_bytes(), filename=path.name, scorer=get_scorer(args.scorer))
    print(json.dumps(build_candidate_record(result), indent=2, ensure_ascii=False))
    return 1 if result.partial else 0


if __name__ == "__main__":
    raise SystemExit(main())
