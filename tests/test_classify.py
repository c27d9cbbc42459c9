from __future__ import annotations

from conftest import make_article

from reflections.models import CategoryDefinition, KeywordTiers, ScoringConfig
from reflections.processors import CategoryMatcher, detect_quality, score_category_article
from reflections.processors.classify import utf16_length


def test_unknown_category_returns_degenerate_verdict() -> None:
    verdict = score_category_article(make_article("u", "Anything at all"), "sports")

    assert verdict.score == 0
    assert verdict.category_match is False
    assert verdict.to_dict() == {"score": 0, "categoryMatch": False, "reason": "Unknown category"}


def test_tier_points_and_totals_with_injected_config() -> None:
    config = ScoringConfig(
        positive_keywords={"good": ("good",)},
        negative_keywords={"bad": ("bad",)},
        categories={
            "demo": CategoryDefinition(
                id="demo", name="Demo", keywords=KeywordTiers(high=("ALPHA",), medium=("beta",), low=("gamma",))
            )
        },
    )

    verdict = CategoryMatcher(config).score(make_article("d", "alpha beta gamma good"), "demo")

    assert verdict.category_score == 17
    assert verdict.quality_score == 0
    assert verdict.spiritual_bonus == 10
    assert verdict.negative_penalty == 0
    assert verdict.score == 27
    assert verdict.matched_keywords == ("ALPHA", "beta", "gamma")
    assert verdict.category_match is True
    assert verdict.is_best_candidate is True


def test_negative_content_is_penalized_twice_over() -> None:
    config = ScoringConfig(
        positive_keywords={"good": ("good",)},
        negative_keywords={"bad": ("bad",)},
        categories={"demo": CategoryDefinition(id="demo", name="Demo", keywords=KeywordTiers(high=("alpha",)))},
    )

    verdict = CategoryMatcher(config).score(make_article("d", "alpha good bad"), "demo")

    # suitability: +1 -3 => -2, no bonus; penalty is negative score * 3
    assert verdict.spiritual_bonus == 0
    assert verdict.negative_penalty == 9
    assert verdict.score == 10 - 9
    assert verdict.category_match is True
    assert verdict.is_best_candidate is False


def test_inspiration_story_is_best_candidate() -> None:
    verdict = score_category_article(
        make_article("i", "Community volunteers help family overcome flood with courage"), "inspiration"
    )

    assert verdict.category_score == 20
    assert verdict.matched_keywords == ("overcome", "courage")
    assert verdict.quality_indicators.has_personal_story
    assert verdict.quality_indicators.has_positive_outcome
    assert verdict.quality_score == 8
    assert verdict.spiritual_bonus == 10
    assert verdict.score == 38
    assert verdict.is_best_candidate is True


def test_sample_comeback_story_matches_inspiration(sample_articles) -> None:
    teen = next(a for a in sample_articles if a.id == "sample-11")

    verdict = score_category_article(teen, "inspiration")

    assert verdict.category_match is True
    assert verdict.category_score >= 40


def test_reported_keywords_capped_but_all_scored() -> None:
    config = ScoringConfig(
        positive_keywords={},
        negative_keywords={},
        categories={
            "demo": CategoryDefinition(
                id="demo", name="Demo", keywords=KeywordTiers(low=("k1", "k2", "k3", "k4", "k5", "k6", "k7"))
            )
        },
    )

    verdict = CategoryMatcher(config).score(make_article("k", "k1 k2 k3 k4 k5 k6 k7"), "demo")

    assert verdict.category_score == 14
    assert len(verdict.matched_keywords) == 5


def test_adding_high_tier_keyword_never_lowers_category_score() -> None:
    base = make_article("m", "Researchers publish findings")
    boosted = make_article("m", "Researchers publish findings on a new species")

    before = score_category_article(base, "science").category_score
    after = score_category_article(boosted, "science").category_score

    assert after >= before + 10


def test_quality_indicators() -> None:
    text = ('"we did it," she said after 3 attempts over 12 months and 2 failures. ' * 4).lower()

    indicators = detect_quality(text)

    assert indicators.has_quotes
    assert indicators.has_numbers
    assert indicators.has_proper_length
    assert indicators.has_personal_story
    assert not indicators.has_emotional_words
    assert indicators.bonus() == 3 + 2 + 5 + 4


def test_short_plain_text_has_no_quality_bonus() -> None:
    indicators = detect_quality("a short note")

    assert indicators.bonus() == 0


def test_category_scoring_is_deterministic(sample_articles) -> None:
    matcher = CategoryMatcher()
    for art in sample_articles:
        for category_id in matcher.config.category_ids():
            assert matcher.score(art, category_id) == matcher.score(art, category_id)


def test_only_ascii_digits_count_as_numbers() -> None:
    assert not detect_quality("\u0661\u0662 \u0663 \u0664\u0665").has_numbers
    assert detect_quality("12 3 45").has_numbers


def test_length_is_measured_in_utf16_units() -> None:
    assert utf16_length("\U0001F600a") == 3
    assert not detect_quality("\U0001F600" * 100).has_proper_length
    assert detect_quality("\U0001F600" * 101).has_proper_length
