import pytest
from pydantic import ValidationError

from wanderlust.config import PLACEHOLDER_IMAGE_URL
from wanderlust.schemas.destination import (
    Destination,
    DestinationCreate,
    DestinationDetail,
    DestinationFilters,
    DestinationUpdate,
)


def stored(**overrides):
    data = {
        "id": 9,
        "name": "Rara Lake",
        "country": "Nepal",
        "description": "The largest lake in Nepal.",
        "price": 999,
        "duration": "9 days",
        "rating": 4.4,
        "created_at": "2024-05-01T00:00:00+00:00",
    }
    data.update(overrides)
    return Destination(**data)


def test_optional_fields_default_to_none_and_lists_to_empty():
    destination = stored()

    assert destination.region is None
    assert destination.difficulty_level is None
    assert destination.latitude is None
    assert destination.highlights == []
    assert destination.special_attractions == []


@pytest.mark.parametrize("image_url", [None, ""])
def test_missing_image_uses_placeholder(image_url):
    assert stored(image_url=image_url).image_url == PLACEHOLDER_IMAGE_URL


def test_detail_without_coordinates_has_no_map_or_directions():
    detail = DestinationDetail.from_destination(stored(latitude=29.5))

    assert detail.has_location is False
    assert detail.map is None
    assert detail.directions_url is None
    assert detail.season_badge is None


def test_detail_with_coordinates_and_season():
    detail = DestinationDetail.from_destination(
        stored(latitude=29.52, longitude=82.08, best_season="Autumn")
    )

    assert detail.has_location is True
    assert detail.map.lat == 29.52
    assert detail.map.markers[0].title == "Rara Lake"
    assert detail.directions_url == "https://www.google.com/maps/dir/?api=1&destination=29.52,82.08"
    assert detail.season_badge == "Autumn"


def test_create_rejects_out_of_range_values():
    base = dict(name="X", country="Nepal", description="x", duration="1 day")

    with pytest.raises(ValidationError):
        DestinationCreate(price=-1, **base)
    with pytest.raises(ValidationError):
        DestinationCreate(price=10, rating=5.5, **base)
    with pytest.raises(ValidationError):
        DestinationCreate(price=10, description=None, **{k: v for k, v in base.items() if k != "description"})


def test_comma_separated_lists_are_split():
    payload = DestinationCreate(
        name="X", country="Nepal", description="x", duration="1 day", price=10,
        highlights="Views, , Culture ,", special_attractions=["Stupa"],
    )

    assert payload.highlights == ["Views", "Culture"]
    assert payload.special_attractions == ["Stupa"]


def test_update_changes_only_contains_supplied_fields():
    assert DestinationUpdate(price=10, region=None).changes() == {"price": 10.0, "region": None}
    assert DestinationUpdate().changes() == {}


def test_filters_active_drops_unset_values():
    filters = DestinationFilters(country="Nepal", region="", min_price=0, max_price=500)
    assert filters.active() == {"country": "Nepal", "max_price": 500.0}
