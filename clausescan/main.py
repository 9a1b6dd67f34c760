import argparse
import asyncio
import json
import sys
from dataclasses import asdict
from pathlib import Path

from clausescan.analysis.exceptions import AnalysisError
from clausescan.config.settings import Settings
from clausescan.documents.exceptions import DocumentError
from clausescan.logging.logger import Log
from clausescan.processor.processor import build_processor


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="clausescan",
        description="Extract contract text and analyze it for risky clauses.",
    )
    parser.add_argument("path", type=Path, help="contract file (pdf, docx, txt, image)")
    parser.add_argument("--contract-type", default="other")
    parser.add_argument("--user-role", default="other")
    parser.add_argument("--jurisdiction", default="")
    parser.add_argument("--mime-type", default=None)
    parser.add_argument(
        "--extract-only",
        action="store_true",
        help="print the extracted text and skip analysis",
    )
    return parser.parse_args(argv)


async def run(args: argparse.Namespace, settings: Settings) -> dict[str, object]:
    processor = build_processor(settings)
    if args.extract_only:
        result = await processor.extract(args.path, mime_type=args.mime_type)
    else:
        result = await processor.process(
            args.path,
            contract_type=args.contract_type,
            user_role=args.user_role,
            jurisdiction=args.jurisdiction,
            mime_type=args.mime_type,
        )
    return asdict(result)


def main(argv: list[str] | None = None) -> int:
    """Entry point: settings -> logging -> processor -> JSON on stdout."""
    settings = Settings()
    Log.configure(settings.log_level, stream=sys.stderr)
    args = parse_args(argv)

    try:
        payload = asyncio.run(run(args, settings))
    except (FileNotFoundError, DocumentError, AnalysisError) as exc:
        Log.error(f"Processing failed: {exc}")
        return 1

    json.dump(payload, sys.stdout, indent=2, ensure_ascii=False)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
