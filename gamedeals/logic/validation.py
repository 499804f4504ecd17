"""
Validation rules for inbound game payloads.

Validate: structural and semantic checks on a game and its deals
Compare: detect an update that would not change the stored record
Normalize: convert accepted payloads into the stored representation
"""
import math
from typing import Any, Mapping, Sequence

from gamedeals.logic.errors import (
    DuplicateStoreID,
    EmptyInput,
    InvalidDeal,
    MissingRequiredAttributes,
    NonNumericCheapestPrice,
    NonNumericPrice,
)

REQUIRED_ATTRIBUTES = ("title", "cheapestPrice", "deals")
COMPARED_ATTRIBUTES = ("gameID", "title", "thumb", "cheapestPrice")


# ============== VALIDATE ==============

def is_numerical(value: Any) -> bool:
    """True for finite numbers and strings that parse as one ("Infinity" and "NaN" do not)."""
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        try:
            return math.isfinite(value)
        except OverflowError:
            return False
    if isinstance(value, str):
        text = value.strip()
        if not text or "_" in text:
            return False
        try:
            return math.isfinite(float(text))
        except ValueError:
            return False
    return False


def is_deal_valid(deal: Any) -> bool:
    if not isinstance(deal, Mapping):
        return False
    store_id = deal.get("storeID")
    price = deal.get("price")
    if store_id is None or store_id == "" or isinstance(store_id, bool):
        return False
    if not isinstance(store_id, (str, int, float)):
        return False
    return price is not None and price != ""


def has_unique_store_ids(deals: Sequence[Mapping]) -> None:
    # Keyed on the stored (string) form so 1 and "1" collide
    seen = set()
    for deal in deals:
        store_id = deal["storeID"]
        if str(store_id) in seen:
            raise DuplicateStoreID(store_id)
        seen.add(str(store_id))


def validate_deals(deals: Any) -> list[dict]:
    """
    Check a candidate deals list and return it reduced to storeID/price pairs.

    Every entry is checked for presence and numeric price before store IDs are
    checked for uniqueness. Order and values of the entries are preserved.
    """
    if not isinstance(deals, (list, tuple)) or len(deals) == 0:
        raise EmptyInput()

    for deal in deals:
        if not is_deal_valid(deal):
            raise InvalidDeal()
        if not is_numerical(deal["price"]):
            raise NonNumericPrice(deal["price"])

    has_unique_store_ids(deals)

    return [{"storeID": deal["storeID"], "price": deal["price"]} for deal in deals]


def is_attribute_invalid(game: Mapping, attr: str) -> bool:
    # None, "", [] and 0 all count as missing
    return not game.get(attr)


def validate_game_attributes(game: Mapping) -> None:
    missing = [attr for attr in REQUIRED_ATTRIBUTES if is_attribute_invalid(game, attr)]

    cheapest_price = game.get("cheapestPrice")
    if "cheapestPrice" not in missing and not is_numerical(cheapest_price):
        raise NonNumericCheapestPrice(cheapest_price, missing)

    if missing:
        raise MissingRequiredAttributes(missing)


# ============== COMPARE ==============

def _identical(left: Any, right: Any) -> bool:
    return type(left) is type(right) and left == right


def _same_deals(left: Any, right: Any) -> bool:
    if not isinstance(left, (list, tuple)) or not isinstance(right, (list, tuple)):
        return _identical(left, right)
    if len(left) != len(right):
        return False
    return all(
        _identical(a.get("storeID"), b.get("storeID")) and _identical(a.get("price"), b.get("price"))
        for a, b in zip(left, right)
    )


def is_same_game(existing: Mapping, proposed: Mapping) -> bool:
    """True when `proposed` would leave `existing` unchanged. Deal order and value types matter."""
    for attr in COMPARED_ATTRIBUTES:
        if not _identical(existing.get(attr), proposed.get(attr)):
            return False
    return _same_deals(existing.get("deals"), proposed.get("deals"))


# ============== NORMALIZE ==============

def to_number(value: Any) -> float:
    if isinstance(value, str):
        value = value.strip()
    return float(value)


def _optional_str(value: Any) -> str | None:
    return None if value is None else str(value)


def normalize_deals(deals: Sequence[Mapping]) -> list[dict]:
    return [
        {"storeID": str(deal["storeID"]), "price": to_number(deal["price"])}
        for deal in deals
    ]


def normalize_game(game: Mapping) -> dict:
    """Convert an accepted payload into the stored form: string identifiers, float prices."""
    return {
        "gameID": _optional_str(game.get("gameID")),
        "title": _optional_str(game["title"]),
        "thumb": _optional_str(game.get("thumb")),
        "cheapestPrice": to_number(game["cheapestPrice"]),
        "deals": normalize_deals(game["deals"]),
    }
