"""Integration tests: location repository with test DB session."""
import pytest
from sqlalchemy.exc import IntegrityError

from repositories.location_repository import (
    bulk_insert_locations,
    count_locations,
    delete_location,
    get_location_by_address,
    insert_location,
    search_addresses,
    update_location,
)

pytestmark = pytest.mark.integration


def test_insert_and_get_location(db_session):
    """insert_location stores the normalized address; lookup ignores case and surrounding whitespace."""
    assert insert_location(db_session, "  Queen West  ", 43.6476, -79.3968) is True
    loc = get_location_by_address(db_session, "QUEEN WEST")
    assert loc is not None
    assert loc.address == "queen west"
    assert loc.latitude == pytest.approx(43.6476)
    assert loc.longitude == pytest.approx(-79.3968)


def test_insert_duplicate_returns_false(db_session):
    """Second insert of the same normalized address returns False and adds nothing."""
    assert insert_location(db_session, "Annex", 43.6683, -79.4057) is True
    assert insert_location(db_session, " annex ", 1.0, 2.0) is False
    assert count_locations(db_session) == 1
    assert get_location_by_address(db_session, "annex").latitude == pytest.approx(43.6683)


def test_session_usable_after_duplicate(db_session):
    """A rejected duplicate rolls back, so the session keeps working."""
    insert_location(db_session, "mimico", 43.6191, -79.4911)
    insert_location(db_session, "mimico", 43.6191, -79.4911)
    assert insert_location(db_session, "swansea", 43.6478, -79.4725) is True
    assert count_locations(db_session) == 2


def test_get_missing_returns_none(db_session):
    assert get_location_by_address(db_session, "atlantis") is None


def test_update_location(db_session):
    """update_location overwrites coordinates only."""
    insert_location(db_session, "leaside", 43.7073, -79.3679)
    before = get_location_by_address(db_session, "leaside")
    assert update_location(db_session, "LEASIDE ", 1.5, -2.5) is True
    db_session.expire_all()
    after = get_location_by_address(db_session, "leaside")
    assert after.id == before.id
    assert after.address == "leaside"
    assert (after.latitude, after.longitude) == (1.5, -2.5)


def test_update_missing_is_not_upsert(db_session):
    assert update_location(db_session, "nowhere", 1.0, 1.0) is False
    assert count_locations(db_session) == 0


def test_delete_location(db_session):
    insert_location(db_session, "weston", 43.7009, -79.5144)
    assert delete_location(db_session, " Weston") is True
    assert get_location_by_address(db_session, "weston") is None
    assert delete_location(db_session, "weston") is False


def test_search_addresses_prefix_and_order(db_session):
    """search_addresses matches prefix case-insensitively and sorts results."""
    bulk_insert_locations(
        db_session,
        [("york mills", 43.7489, -79.3868), ("yorkville", 43.6718, -79.3933), ("east york", 43.6896, -79.33)],
    )
    assert search_addresses(db_session, "YORK") == ["york mills", "yorkville"]


def test_search_addresses_empty_prefix(db_session):
    insert_location(db_session, "ajax", 43.8509, -79.0204)
    assert search_addresses(db_session, "") == []
    assert search_addresses(db_session, "   ") == []


def test_search_addresses_limit(db_session):
    bulk_insert_locations(db_session, [(f"spot {i:02d}", 0.0, 0.0) for i in range(15)])
    result = search_addresses(db_session, "spot", limit=10)
    assert result == [f"spot {i:02d}" for i in range(10)]


def test_search_addresses_wildcards_are_literal(db_session):
    """LIKE wildcards in the prefix match only themselves."""
    bulk_insert_locations(db_session, [("50_50 corner", 0.0, 0.0), ("50a50 corner", 0.0, 0.0), ("100% park", 0.0, 0.0)])
    assert search_addresses(db_session, "50_") == ["50_50 corner"]
    assert search_addresses(db_session, "%") == []


def test_bulk_insert_normalizes_and_counts(db_session):
    inserted = bulk_insert_locations(db_session, [("Oshawa ", 43.8971, -78.8658), ("WHITBY", 43.8964, -78.9429)])
    assert inserted == 2
    assert count_locations(db_session) == 2
    assert get_location_by_address(db_session, "oshawa").address == "oshawa"
    assert bulk_insert_locations(db_session, []) == 0


def test_insert_not_null_violation_is_not_a_duplicate(db_session):
    """Only a unique-address clash counts as a duplicate; other integrity errors propagate."""
    with pytest.raises(IntegrityError):
        insert_location(db_session, "nan spot", float("nan"), 1.0)
    assert count_locations(db_session) == 0
