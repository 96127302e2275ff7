"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class InvalidRequestError(DomainError):
    """Raised when a reaction request is malformed.

    Covers non-positive item ids, empty voter ids and unknown reaction kinds.
    """

    def __init__(self, message: str):
        super().__init__(message)


class ModeDisabledError(DomainError):
    """Raised when a reaction kind is not accepted by the current mode."""

    def __init__(self, reaction: str, mode: str):
        self.reaction = reaction
        self.mode = mode
        super().__init__(f"Reaction '{reaction}' is disabled in mode '{mode}'")


class AlreadyVotedError(DomainError):
    """Raised by the vote store when the voter already reacted to the item."""

    def __init__(self, voter_id: str, item_id: int):
        self.voter_id = voter_id
        self.item_id = item_id
        super().__init__(f"Voter {voter_id} already voted on item {item_id}")


class StorageUnavailableError(DomainError):
    """Raised when the reaction storage backend cannot be reached or fails."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Reaction storage unavailable during {operation}")
