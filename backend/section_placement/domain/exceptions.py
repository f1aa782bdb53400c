class PlacementError(Exception):
    """Base class for placement engine failures that are not ordinary rejections."""


class UnknownGroupError(PlacementError, ValueError):
    def __init__(self, value):
        super().__init__(f"Unknown group: {value!r}")
        self.value = value


class UnknownSectionKindError(PlacementError, ValueError):
    def __init__(self, value):
        super().__init__(f"Unknown section type: {value!r}")
        self.value = value


class PolicyTableError(PlacementError):
    """The group policy table is incomplete or references unknown values."""


class PlacementRejected(PlacementError):
    """A commit was attempted for a move the validators rejected."""

    def __init__(self, result):
        super().__init__(result.reason or "Move not allowed")
        self.result = result


class StaleOperationError(PlacementError, ValueError):
    """A reorder operation no longer matches the current section lists."""
