from __future__ import annotations

from conftest import make_article

from reflections.models import DEFAULT_CONFIG
from reflections.processors import SuitabilityScorer, describe_suitability, keyword_in_text, score_article


def test_ocean_conservation_breakthrough_is_recommended() -> None:
    verdict = score_article({"title": "Scientists discover breakthrough in ocean conservation", "description": "", "content": ""})

    # ocean, scientist, breakthrough (science and health), conservation
    assert verdict.positive_score == 5
    assert verdict.negative_score == 0
    assert verdict.score == 5
    assert verdict.is_recommended is True
    assert verdict.reasons == ("nature", "science", "environment")


def test_violent_headline_is_rejected() -> None:
    verdict = score_article(make_article("v", "Terrorist attack kills dozens in bombing"))

    # attack, terrorist, bomb
    assert verdict.negative_score == 9
    assert verdict.score == -9
    assert verdict.is_recommended is False


def test_empty_article_scores_zero() -> None:
    verdict = score_article({"title": "", "description": "", "content": ""})

    assert verdict.score == 0
    assert verdict.is_recommended is False
    assert verdict.reasons == ()


def test_missing_text_fields_default_to_empty() -> None:
    verdict = score_article({"title": "A beautiful forest"})

    assert verdict.positive_score == 2
    assert verdict.is_recommended is True


def test_single_negative_keyword_blocks_recommendation() -> None:
    verdict = score_article(
        make_article("n", "Amazing remarkable wildlife discovery in the forest ends in tragedy")
    )

    assert verdict.score > 0
    assert verdict.negative_score == 3
    assert verdict.is_recommended is False


def test_reasons_capped_at_three_in_table_order() -> None:
    verdict = score_article(make_article("r", "nature research space climate health innovation community wisdom amazing"))

    assert verdict.reasons == ("nature", "science", "space")
    assert verdict.positive_score > 3


def test_each_keyword_counts_once_regardless_of_repeats() -> None:
    once = score_article(make_article("1", "forest"))
    thrice = score_article(make_article("2", "forest forest forest"))

    assert once.positive_score == thrice.positive_score == 1


def test_scoring_is_deterministic(sample_articles) -> None:
    scorer = SuitabilityScorer()
    for art in sample_articles:
        assert scorer.score(art) == scorer.score(art)


def test_substring_matching_hits_word_fragments() -> None:
    verdict = score_article(make_article("s", "Attacker caught"))

    assert verdict.negative_score == 3


def test_word_mode_requires_whole_words() -> None:
    config = DEFAULT_CONFIG.replace(match_mode="word")

    assert score_article(make_article("w", "Attacker caught"), config=config).negative_score == 0
    assert score_article(make_article("w", "An attack on the city"), config=config).negative_score == 3
    assert keyword_in_text("movie star", "a movie star arrives", "word")
    assert not keyword_in_text("star", "starting today", "word")


def test_describe_suitability_joins_reason_descriptions() -> None:
    verdict = score_article(make_article("d", "forest research"))

    assert describe_suitability(verdict) == (
        "reflects on God's creation in nature, scientific discovery reveals divine wisdom"
    )
    assert describe_suitability(score_article(make_article("e", ""))) == "suitable for spiritual reflection"


def test_injected_config_replaces_keyword_tables(tiny_config) -> None:
    verdict = SuitabilityScorer(tiny_config).score(make_article("t", "good news about a forest"))

    assert verdict.positive_score == 1
    assert verdict.reasons == ("good",)
