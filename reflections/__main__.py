"""Command-line entrypoint for offline scoring runs.

Reads a JSON file of articles (a plain list of article objects, or a raw
NewsAPI response with an ``articles`` array) and prints the selected
sections, the filtered list, or per-article verdicts as JSON.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, List

from dotenv import load_dotenv

from .analysis import categorized_to_dict, filter_and_categorize_news, filter_news, get_best_articles_by_category
from .models import DEFAULT_CONFIG, Article, ScoringConfig
from .processors import SuitabilityScorer, batch_normalize
from .utils.config_loader import load_scoring_config
from .utils.logging import configure_logging, get_logger
from .utils.pipeline_config import PipelineConfig


def parse_args(argv: List[str] | None = None) -> argparse.Namespace:
    cfg = PipelineConfig()
    parser = argparse.ArgumentParser(
        prog="reflections",
        description="Score news articles for spiritual reflection and assemble landing-page sections",
    )
    parser.add_argument("input", help="Path to a JSON file with articles ('-' for stdin)")
    parser.add_argument(
        "--mode",
        default="categorize",
        choices=["categorize", "filter", "best", "score"],
        help="categorize: sections + all; filter: single ranked list; best: per-category rankings; score: verdict per article",
    )
    parser.add_argument(
        "--config",
        default=cfg.scoring_config_path if cfg.has_scoring_config else None,
        help="Optional scoring YAML overriding the built-in keyword tables and categories",
    )
    parser.add_argument("--best-per-category", type=int, default=cfg.best_per_category)
    parser.add_argument("--max-all", type=int, default=cfg.max_all)
    parser.add_argument("--limit", type=int, default=cfg.filter_limit, help="Size of the list in filter mode")
    parser.add_argument(
        "--normalize",
        action="store_true",
        help="Strip HTML and normalize punctuation in article text before scoring",
    )
    parser.add_argument("--output", default=None, help="Write JSON here instead of stdout")
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging verbosity (defaults to LOG_LEVEL, then INFO)",
    )
    return parser.parse_args(argv)


def load_articles(raw: Any) -> List[Article]:
    if isinstance(raw, dict) and isinstance(raw.get("articles"), list):
        return [Article.from_newsapi(item, index=i) for i, item in enumerate(raw["articles"])]
    if isinstance(raw, list):
        return [Article.from_mapping(item) for item in raw]
    raise ValueError("Input must be a list of articles or an object with an 'articles' list")


def run(args: argparse.Namespace, config: ScoringConfig) -> Any:
    text = sys.stdin.read() if args.input == "-" else Path(args.input).read_text(encoding="utf-8")
    articles = load_articles(json.loads(text))
    if args.normalize:
        articles = batch_normalize(articles)

    if args.mode == "categorize":
        sections = filter_and_categorize_news(
            articles, best_per_category=args.best_per_category, max_all=args.max_all, config=config
        )
        return categorized_to_dict(sections)
    if args.mode == "filter":
        return [it.to_dict() for it in filter_news(articles, args.limit, config=config)]
    if args.mode == "best":
        rankings = get_best_articles_by_category(articles, config=config)
        return {cid: ranking.to_dict() for cid, ranking in rankings.items()}

    scorer = SuitabilityScorer(config)
    rows = []
    for art in articles:
        verdict = scorer.score(art)
        rows.append({"id": art.id, "title": art.title, **verdict.to_dict(), "explanation": scorer.describe(verdict)})
    return rows


def main(argv: List[str] | None = None) -> int:
    load_dotenv(override=False)
    args = parse_args(argv)
    configure_logging(level=args.log_level)
    logger = get_logger("reflections.cli")

    try:
        config = load_scoring_config(args.config) if args.config else DEFAULT_CONFIG
        if args.config:
            logger.info("Loaded scoring configuration from %s", args.config)
        result = run(args, config)
    except Exception as exc:  # noqa: BLE001 - top-level entrypoint guard
        logger.exception("Scoring run failed: %s", exc)
        return 1

    payload = json.dumps(result, ensure_ascii=False, indent=2)
    if args.output:
        Path(args.output).write_text(payload + "\n", encoding="utf-8")
        logger.info("Wrote results to %s", args.output)
    else:
        sys.stdout.write(payload + "\n")
    return 0


if __name__ == "__main__":  # pragma: no cover - script entrypoint
    raise SystemExit(main())
