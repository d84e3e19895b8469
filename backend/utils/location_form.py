"""Validate free-form location input from the manage/search screens before it reaches the store.

Messages follow the screens they come from: the map search ("search") and the
manage screen's add, update, delete and load buttons.
"""
import math

ADD = "add"
UPDATE = "update"
DELETE = "delete"
LOAD = "load"
SEARCH = "search"

FILL_ALL_FIELDS = "Please fill all fields."

# Coordinate text that is not a number, per form action.
INVALID_COORDINATES = {
    ADD: "Invalid latitude or longitude.",
    UPDATE: "Invalid coordinates.",
}

# Empty address field, per single-field action.
MISSING_ADDRESS = {
    DELETE: "Enter address to delete.",
    LOAD: "Enter address to load.",
    SEARCH: "Enter an address",
}

ADDRESS_EXISTS = "Address already exists."
ADDRESS_NOT_FOUND = "Address not found."
LOCATION_NOT_FOUND = "Location not found"

# Store result -> message shown to the user, per action. {address} is filled in for load.
_OUTCOMES = {
    ADD: ("Location added successfully!", ADDRESS_EXISTS),
    UPDATE: ("Location updated!", ADDRESS_NOT_FOUND),
    DELETE: ("Deleted successfully!", ADDRESS_NOT_FOUND),
    LOAD: ("Loaded {address}", ADDRESS_NOT_FOUND),
    SEARCH: ("", LOCATION_NOT_FOUND),
}


def _get_str(value: str | None) -> str | None:
    """Strip value; empty string treated as missing."""
    if value is None:
        return None
    s = str(value).strip()
    return s if s else None


def _get_float(value: str) -> float | None:
    """Parse a finite float; None if not numeric (nan and inf included)."""
    try:
        n = float(value)
    except (TypeError, ValueError):
        return None
    return n if math.isfinite(n) else None


def validate_address_field(address: str | None, action: str = SEARCH) -> tuple[bool, str | None, str]:
    """
    Validate a lone address field for delete, load or search. Returns (ok, address, error_message).
    The address is passed through as typed; the store normalizes it.
    """
    if action not in MISSING_ADDRESS:
        raise ValueError(f"Unknown address action '{action}'")
    if _get_str(address) is None:
        return False, None, MISSING_ADDRESS[action]
    return True, address, ""


def validate_location_form(
    address: str | None,
    latitude: str | None,
    longitude: str | None,
    action: str = ADD,
) -> tuple[bool, dict | None, str]:
    """
    Validate the add/update form. Returns (ok, values, error_message).
    values has address (as typed), latitude and longitude (floats). No range check on coordinates.
    """
    if action not in INVALID_COORDINATES:
        raise ValueError(f"Unknown form action '{action}'")
    lat_text = _get_str(latitude)
    lng_text = _get_str(longitude)
    if _get_str(address) is None or lat_text is None or lng_text is None:
        return False, None, FILL_ALL_FIELDS

    lat = _get_float(lat_text)
    lng = _get_float(lng_text)
    if lat is None or lng is None:
        return False, None, INVALID_COORDINATES[action]

    return True, {"address": address, "latitude": lat, "longitude": lng}, ""


def outcome_message(action: str, ok: bool, address: str = "") -> str:
    """Message for a store result: ok is the bool (or found/not-found) the store returned."""
    if action not in _OUTCOMES:
        raise ValueError(f"Unknown action '{action}'")
    success, failure = _OUTCOMES[action]
    return success.format(address=address) if ok else failure
