"""
Score questionnaire answers from a JSON file and print the results as JSON.

The answers file holds either a list of objects
    [{"question_number": 13, "value": 2}, ...]       ("response_value" also accepted)
or an object mapping question numbers to values
    {"13": 2, "14": 3, "15": 1}

Usage:
    python -m brs_scoring.scripts.score_answers score intralaboral_a answers.json
    python -m brs_scoring.scripts.score_answers score intralaboral_a answers.json --totals
    python -m brs_scoring.scripts.score_answers summary
    python -m brs_scoring.scripts.score_answers table intralaboral_a dimension demandas_cuantitativas
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import structlog
from pydantic import ValidationError

from brs_scoring.core.exceptions import ScoringException
from brs_scoring.core.logging import configure_logging
from brs_scoring.models.enumerations import QuestionnaireVariant, TableScope
from brs_scoring.scoring.normative_tables import get_normative_repository
from brs_scoring.scoring.orchestrator import calculate_results
from brs_scoring.scoring.totals import calculate_intralaboral_total

logger = structlog.get_logger(__name__)


def load_answers(path: str) -> List[Dict[str, Any]]:
    """
    Read answers from a file path, or stdin when path is '-'.

    Raises:
        ValueError: the JSON is neither a list nor an object, or an object
            key is not a question number.
    """
    text = sys.stdin.read() if path == "-" else Path(path).read_text(encoding="utf-8")
    data = json.loads(text)
    if isinstance(data, dict):
        try:
            return [{"question_number": int(k), "value": v} for k, v in data.items()]
        except ValueError as e:
            raise ValueError(f"Answer keys must be question numbers: {e}") from e
    if not isinstance(data, list):
        raise ValueError(
            f"Answers must be a JSON list or object, got {type(data).__name__}"
        )
    return data


def _print_json(payload: Any) -> None:
    print(json.dumps(payload, ensure_ascii=False, indent=2))


def cmd_score(args: argparse.Namespace) -> int:
    variant = QuestionnaireVariant.from_identifier(args.variant)
    if args.totals and not variant.has_domains:
        logger.error(
            "totals_unavailable",
            variant=variant.value,
            reason="the intralaboral total applies to intralaboral_a and intralaboral_b only",
        )
        return 1

    answers = load_answers(args.answers)
    results = calculate_results(variant, answers)
    payload: Dict[str, Any] = {
        "questionnaire_type": variant.value,
        "total_results": len(results),
        "results": [r.to_dict() for r in results],
    }
    if args.totals:
        payload["intralaboral_total"] = calculate_intralaboral_total(results).to_dict()
    _print_json(payload)
    return 0


def cmd_summary(args: argparse.Namespace) -> int:
    summary = get_normative_repository().summary()
    _print_json({
        "baremos": summary,
        "risk_levels": ["sin_riesgo", "riesgo_bajo", "riesgo_medio", "riesgo_alto", "riesgo_muy_alto"],
    })
    return 0


def cmd_table(args: argparse.Namespace) -> int:
    variant = QuestionnaireVariant.from_identifier(args.variant)
    table = get_normative_repository().lookup(variant, TableScope(args.scope), args.key)
    _print_json({
        "questionnaire_type": variant.value,
        "scope": args.scope,
        "key": args.key,
        "provenance": table.provenance.value,
        "levels": table.describe(),
    })
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Score Batería de Riesgo Psicosocial answers")
    sub = parser.add_subparsers(dest="command", required=True)

    score = sub.add_parser("score", help="Score an answers file")
    score.add_argument("variant", help="intralaboral_a, intralaboral_b, extralaboral or stress")
    score.add_argument("answers", help="Path to a JSON answers file, or '-' for stdin")
    score.add_argument("--totals", action="store_true", help="Include the intralaboral total")
    score.set_defaults(func=cmd_score)

    summary = sub.add_parser("summary", help="List the available normative tables")
    summary.set_defaults(func=cmd_summary)

    table = sub.add_parser("table", help="Show one normative table")
    table.add_argument("variant")
    table.add_argument("scope", choices=[s.value for s in TableScope])
    table.add_argument("key")
    table.set_defaults(func=cmd_table)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    configure_logging()
    args = build_parser().parse_args(argv)
    try:
        return args.func(args)
    except (ScoringException, ValidationError) as e:
        logger.error("scoring_failed", command=args.command, error=str(e))
        return 1
    except (OSError, ValueError) as e:  # includes json.JSONDecodeError
        logger.error("answers_unreadable", error=str(e))
        return 2


if __name__ == "__main__":
    sys.exit(main())
