"""Admin use cases."""

from .erase_reactions import (
    EraseReactionsRequest,
    EraseReactionsResponse,
    EraseReactionsUseCase,
)
from .list_tallies import (
    ItemTallyResponse,
    ListTalliesRequest,
    ListTalliesResponse,
    ListTalliesUseCase,
)
from .settings import (
    GetSettingsUseCase,
    SettingsResponse,
    UpdateSettingsRequest,
    UpdateSettingsUseCase,
)

__all__ = [
    "EraseReactionsRequest",
    "EraseReactionsResponse",
    "EraseReactionsUseCase",
    "GetSettingsUseCase",
    "ItemTallyResponse",
    "ListTalliesRequest",
    "ListTalliesResponse",
    "ListTalliesUseCase",
    "SettingsResponse",
    "UpdateSettingsRequest",
    "UpdateSettingsUseCase",
]
