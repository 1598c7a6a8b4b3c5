"""
Batch quiz normalizer.

Reads quiz payloads (.json, .yaml, .yml) from a file or directory, normalizes
each into the canonical bilingual structure and writes the result as JSON.

Usage:
    python scripts/normalize_quizzes.py quizzes/ --out normalized/ \
        --subject-id physics --topic-id motion --sub-topic-id velocity --strict
"""

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from tqdm import tqdm

sys.path.append(os.getcwd())

from quiz_i18n.core.config import get_settings
from quiz_i18n.core.exceptions import PayloadParseError, QuizValidationError
from quiz_i18n.core.logging_config import setup_logging
from quiz_i18n.services.i18n_service import extract_content, is_supported
from quiz_i18n.services.quiz_normalizer import normalize_incoming_quiz
from quiz_i18n.services.quiz_validator import validate_normalized_quiz

logger = logging.getLogger(__name__)

QUIZ_EXTENSIONS = (".json", ".yaml", ".yml")


def find_quiz_files(source: Path) -> List[Path]:
    """List quiz files under `source` (or `source` itself), sorted by path."""
    if source.is_file():
        return [source]
    if not source.exists():
        raise FileNotFoundError(f"Quiz source not found: {source}")
    return sorted(p for p in source.rglob("*") if p.is_file() and p.suffix.lower() in QUIZ_EXTENSIONS)


def load_payload(path: Path) -> Any:
    """Load a raw quiz payload from JSON or YAML."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            if path.suffix.lower() in (".yaml", ".yml"):
                return yaml.safe_load(f)
            return json.load(f)
    except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
        raise PayloadParseError(f"Could not read quiz payload: {e}", source=str(path)) from e


def normalize_file(
    path: Path,
    out_dir: Path,
    subject_id: Optional[str] = None,
    topic_id: Optional[str] = None,
    sub_topic_id: Optional[str] = None,
    strict: bool = False,
    preview_language: Optional[str] = None,
) -> Path:
    """
    Normalize one file and write `<stem>.json` into `out_dir`.

    With `preview_language`, also writes `<stem>.<lang>.json` holding the quiz
    resolved to that single language.
    """
    quiz = normalize_incoming_quiz(load_payload(path), subject_id, topic_id, sub_topic_id)
    if strict:
        validate_normalized_quiz(quiz)

    out_dir.mkdir(parents=True, exist_ok=True)
    target = out_dir / f"{path.stem}.json"
    target.write_text(json.dumps(quiz.model_dump(mode="json"), ensure_ascii=False, indent=2), encoding="utf-8")

    if preview_language:
        preview = extract_content(quiz, preview_language)
        preview_target = out_dir / f"{path.stem}.{preview_language}.json"
        preview_target.write_text(json.dumps(preview, ensure_ascii=False, indent=2), encoding="utf-8")

    logger.debug(
        f"Normalized {path.name}: {len(quiz.questions)} questions, languages={quiz.availableLanguages}",
        extra={"source_file": str(path)},
    )
    return target


def run(args: argparse.Namespace) -> Dict[str, int]:
    files = find_quiz_files(Path(args.source))
    logger.info(f"📄 Found {len(files)} quiz files")

    stats = {"normalized": 0, "failed": 0}
    for path in tqdm(files, desc="Normalizing quizzes"):
        try:
            normalize_file(
                path,
                Path(args.out),
                subject_id=args.subject_id,
                topic_id=args.topic_id,
                sub_topic_id=args.sub_topic_id,
                strict=args.strict,
                preview_language=args.lang,
            )
            stats["normalized"] += 1
        except QuizValidationError as e:
            stats["failed"] += 1
            logger.error(f"❌ {path}: {len(e.problems)} validation problem(s)")
            for problem in e.problems:
                logger.error(f"   - {problem}")
        except PayloadParseError as e:
            stats["failed"] += 1
            logger.error(f"❌ {e.source}: {e}")

    logger.info(f"✅ Normalized {stats['normalized']} quizzes, {stats['failed']} failed")
    return stats


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Normalize quiz files into the canonical bilingual format")
    parser.add_argument("source", help="Quiz file or directory of .json/.yaml files")
    parser.add_argument("--out", default="normalized", help="Output directory (default: normalized)")
    parser.add_argument("--subject-id", default=None, help="Subject id stamped on every quiz")
    parser.add_argument("--topic-id", default=None, help="Topic id stamped on every quiz")
    parser.add_argument("--sub-topic-id", default=None, help="Sub-topic id stamped on every quiz")
    parser.add_argument("--strict", action="store_true", help="Fail quizzes that do not pass validation")
    parser.add_argument("--lang", default=None, help="Also write a preview resolved to this language")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = get_settings()
    setup_logging(settings.ENVIRONMENT, settings.LOG_LEVEL, settings.LOG_DIR)

    if args.lang and not is_supported(args.lang):
        parser.error(f"Unsupported language: {args.lang}")

    try:
        stats = run(args)
    except FileNotFoundError as e:
        logger.error(f"❌ {e}")
        return 1

    return 1 if stats["failed"] else 0


if __name__ == "__main__":
    sys.exit(main())
