from __future__ import annotations

from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from pyride.models.booking import Coordinates
from pyride.models.review import ReviewAuthor, ReviewRecord
from pyride.models.route import RouteMetrics
from pyride.models.session import (
    AdminProfile,
    AdminRole,
    ClientProfile,
    DriverProfile,
    Identity,
    IdentityCheckResult,
    OnlineStatus,
    Role,
    parse_profile,
)


def test_review_record_from_api_payload() -> None:
    review = ReviewRecord.model_validate(
        {
            "id": "rt-1",
            "booking_id": "bk-1",
            "rating": 4,
            "review": "Smooth ride",
            "created_at": "2025-03-02T10:15:00Z",
            "client": {"full_name": "Chidi Okafor", "profile_picture_url": None},
        }
    )

    assert review.rating == 4
    assert review.text == "Smooth ride"
    assert review.created_at == datetime(2025, 3, 2, 10, 15, tzinfo=UTC)
    assert review.author.full_name == "Chidi Okafor"
    assert review.author.profile_picture_url is None
    assert review.raw["booking_id"] == "bk-1"


def test_review_without_client_or_text_uses_defaults() -> None:
    review = ReviewRecord.model_validate({"rating": 5, "review": None, "client": None})

    assert review.text is None
    assert review.author == ReviewAuthor()


def test_review_rating_is_not_range_checked() -> None:
    assert ReviewRecord.model_validate({"rating": 7}).rating == 7


def test_review_requires_rating() -> None:
    with pytest.raises(ValidationError):
        ReviewRecord.model_validate({"review": "no stars"})


@pytest.mark.parametrize(
    ("name", "initials"),
    [("Chidi Okafor", "CO"), ("ada", "A"), ("Mary Ann Lee", "MA"), ("", "")],
)
def test_author_initials(name: str, initials: str) -> None:
    assert ReviewAuthor(full_name=name).initials == initials


@pytest.mark.parametrize(
    ("value", "expected"),
    [("driver", Role.DRIVER), (" Admin ", Role.ADMIN), (Role.CLIENT, Role.CLIENT), ("rider", None), (None, None)],
)
def test_role_parse(value: object, expected: Role | None) -> None:
    assert Role.parse(value) is expected


def test_identity_declared_role_from_metadata() -> None:
    identity = Identity.model_validate({"id": "u-1", "email": "a@b.c", "user_metadata": {"role": "client"}})

    assert identity.user_id == "u-1"
    assert identity.declared_role is Role.CLIENT
    assert IdentityCheckResult.from_identity(identity).role is Role.CLIENT


def test_identity_repr_hides_token() -> None:
    identity = Identity(user_id="u-1", access_token="secret-token")

    assert "secret-token" not in repr(identity)


def test_parse_profile_picks_model_by_role() -> None:
    driver = parse_profile(
        Role.DRIVER,
        {
            "id": "drv-1",
            "user_id": "u-1",
            "full_name": "Ada Obi",
            "hourly_rate": 2500,
            "online_status": "online",
            "current_location": {"lat": 6.5, "lng": 3.3},
            "rating": 4.7,
            "total_trips": 12,
            "license_no": None,
        },
    )
    client = parse_profile(Role.CLIENT, {"id": "cl-1", "user_id": "u-2", "full_name": "Bola"})
    admin = parse_profile(Role.ADMIN, {"id": "ad-1", "user_id": "u-3", "name": "Root", "role": "super_admin"})

    assert isinstance(driver, DriverProfile)
    assert driver.online_status is OnlineStatus.ONLINE
    assert driver.current_location == Coordinates(lat=6.5, lng=3.3)
    assert driver.license_no is None
    assert isinstance(client, ClientProfile)
    assert isinstance(admin, AdminProfile)
    assert admin.admin_role is AdminRole.SUPER_ADMIN


def test_driver_profile_rejects_out_of_range_rating() -> None:
    with pytest.raises(ValidationError):
        DriverProfile.model_validate({"id": "d", "user_id": "u", "full_name": "X", "rating": 6})


def test_route_metrics_parses_numeric_strings() -> None:
    metrics = RouteMetrics.model_validate({"distance_km": "7.3", "duration_minutes": 18, "duration_in_traffic_minutes": None})

    assert metrics.distance_km == 7.3
    assert metrics.duration_minutes == 18
    assert metrics.duration_in_traffic_minutes is None


@pytest.mark.parametrize("payload", [{}, {"distance_km": -1, "duration_minutes": 5}, {"distance_km": "far", "duration_minutes": 5}])
def test_route_metrics_rejects_bad_payloads(payload: dict[str, object]) -> None:
    with pytest.raises(ValidationError):
        RouteMetrics.model_validate(payload)


def test_coordinates_accept_long_names() -> None:
    assert Coordinates.model_validate({"latitude": 1.0, "longitude": 2.0}) == Coordinates(lat=1.0, lng=2.0)


def test_driver_profile_rejects_negative_hourly_rate() -> None:
    with pytest.raises(ValidationError):
        DriverProfile.model_validate({"id": "d", "user_id": "u", "full_name": "X", "hourly_rate": -500})
