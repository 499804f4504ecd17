"""Error taxonomy for game validation, reconciliation and the pricing API."""
from typing import Any, Optional


class GameError(ValueError):
    """Base class for every rejection the games logic reports to a caller."""


class EmptyInput(GameError):
    def __init__(self) -> None:
        super().__init__("Deals array cannot be empty.")


class InvalidDeal(GameError):
    def __init__(self) -> None:
        super().__init__("Each deal must have a non-null storeID and price.")


class NonNumericPrice(GameError):
    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(f"Price must be a numerical value. Invalid value: {value}")


class DuplicateStoreID(GameError):
    def __init__(self, store_id: Any) -> None:
        self.store_id = store_id
        super().__init__(f"Duplicate storeID found: {store_id}")


class MissingRequiredAttributes(GameError):
    def __init__(self, missing: list[str]) -> None:
        self.missing = missing
        super().__init__(f"Missing or empty required attributes: {', '.join(missing)}")


class NonNumericCheapestPrice(GameError):
    def __init__(self, value: Any, missing: Optional[list[str]] = None) -> None:
        self.value = value
        self.missing = missing or []
        message = f"CheapestPrice must be a numerical value. Invalid value: {value}"
        if self.missing:
            message += f". Missing or empty required attributes: {', '.join(self.missing)}"
        super().__init__(message)


class DuplicateGame(GameError):
    def __init__(self) -> None:
        super().__init__("A game with the same gameID or title already exists.")


class NoChange(GameError):
    def __init__(self) -> None:
        super().__init__("No changes detected. Provide at least one unique update.")


class NotFound(GameError):
    def __init__(self, message: str = "Game not found.") -> None:
        super().__init__(message)


class StorageFailure(Exception):
    """The games store could not complete an operation."""


class UpstreamFailure(Exception):
    """The pricing API returned an error or an unusable payload."""
