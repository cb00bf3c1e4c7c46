"""Interest filtering, attraction fallback and rating order."""

from __future__ import annotations

from tripgen.domain.enums import PoiType
from tripgen.domain.models import Destination, PointOfInterest
from tripgen.domain.planning.selection import (
    filter_by_interest,
    rank_by_rating,
    select_candidates,
    selection_cap,
)


def _poi(pid: str, *, rating: float, category: list[str], poi_type: PoiType = PoiType.ATTRACTION) -> PointOfInterest:
    return PointOfInterest(id=pid, name=pid.title(), type=poi_type, category=category, rating=rating, duration=1)


def test_filter_matches_case_insensitive_substring():
    pois = [
        _poi("fort", rating=4.0, category=["History", "Architecture"]),
        _poi("beach", rating=4.2, category=["Nature", "Beach"]),
        _poi("gallery", rating=3.9, category=["Art"]),
    ]

    assert [p.id for p in filter_by_interest(pois, "history")] == ["fort"]
    assert [p.id for p in filter_by_interest(pois, "ARCH")] == ["fort"]
    assert [p.id for p in filter_by_interest(pois, "ea")] == ["beach"]


def test_filter_with_empty_text_keeps_only_tagged_pois():
    pois = [
        _poi("tagged", rating=4.0, category=["Culture"]),
        _poi("untagged", rating=5.0, category=[]),
    ]

    assert [p.id for p in filter_by_interest(pois, "")] == ["tagged"]


def test_rank_by_rating_is_stable_for_ties():
    pois = [
        _poi("a", rating=4.2, category=[]),
        _poi("b", rating=4.7, category=[]),
        _poi("c", rating=4.2, category=[]),
        _poi("d", rating=3.0, category=[]),
    ]

    assert [p.id for p in rank_by_rating(pois)] == ["b", "a", "c", "d"]
    assert [p.id for p in pois] == ["a", "b", "c", "d"]


def test_select_candidates_caps_at_three_per_day():
    destination = Destination(
        id="demo",
        name="Demo",
        locations=[_poi(f"p{i}", rating=5 - i * 0.1, category=["History"]) for i in range(10)],
    )

    selected, used_fallback = select_candidates(destination, "History", total_days=2)

    assert used_fallback is False
    assert len(selected) == selection_cap(2) == 6
    assert [p.id for p in selected] == ["p0", "p1", "p2", "p3", "p4", "p5"]


def test_select_candidates_falls_back_to_attractions_only():
    destination = Destination(
        id="demo",
        name="Demo",
        locations=[
            _poi("museum", rating=4.1, category=["History"]),
            _poi("diner", rating=4.9, category=["Food"], poi_type=PoiType.RESTAURANT),
            _poi("zipline", rating=4.8, category=["Adventure"], poi_type=PoiType.ACTIVITY),
            _poi("park", rating=4.5, category=["Nature"]),
        ],
    )

    selected, used_fallback = select_candidates(destination, "Nonexistent Tag", total_days=2)

    assert used_fallback is True
    assert [p.id for p in selected] == ["park", "museum"]
    assert all(p.type == PoiType.ATTRACTION for p in selected)
