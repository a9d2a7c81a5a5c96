from dishmatch.recommendations.models import TasteProfile
from dishmatch.recommendations.profile import (
    load_session_profile,
    normalize_profile,
    save_session_profile,
)


def test_normalize_keeps_disjoint_profile():
    profile = TasteProfile(like={"a"}, dislike={"b"}, avoid={"c"})
    normalized, conflicts = normalize_profile(profile)
    assert normalized is profile
    assert conflicts == []


def test_normalize_avoid_wins_over_like_and_dislike():
    profile = TasteProfile(like={"a", "x"}, dislike={"b"}, avoid={"a", "b"})
    normalized, conflicts = normalize_profile(profile)
    assert normalized.avoid == {"a", "b"}
    assert normalized.like == {"x"}
    assert normalized.dislike == set()
    assert conflicts == ["a", "b"]


def test_normalize_dislike_wins_over_like():
    profile = TasteProfile(like={"a", "b"}, dislike={"a"})
    normalized, conflicts = normalize_profile(profile)
    assert normalized.like == {"b"}
    assert normalized.dislike == {"a"}
    assert conflicts == ["a"]


def test_session_round_trip():
    session: dict = {}
    profile = TasteProfile(like={"b", "a"}, avoid={"c"})
    save_session_profile(session, profile)
    assert session["taste_profile"]["like"] == ["a", "b"]
    assert load_session_profile(session) == profile


def test_session_missing_or_corrupt_profile():
    assert load_session_profile({}) is None
    assert load_session_profile({"taste_profile": {"like": 3}}) is None
