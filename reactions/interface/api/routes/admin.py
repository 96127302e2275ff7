"""Admin routes: settings, dashboard and bulk erase."""

import secrets

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header

from reactions.application.usecase.admin import (
    EraseReactionsRequest,
    EraseReactionsResponse,
    EraseReactionsUseCase,
    GetSettingsUseCase,
    ListTalliesRequest,
    ListTalliesResponse,
    ListTalliesUseCase,
    SettingsResponse,
    UpdateSettingsRequest,
    UpdateSettingsUseCase,
)
from reactions.config import AdminSettings, ReactionSettings
from reactions.interface.error import AdminAccessDeniedError, AdminDisabledError

router = APIRouter(prefix="/admin", tags=["admin"], route_class=DishkaRoute)


def require_admin(token: str | None, admin_settings: AdminSettings) -> None:
    """Check the admin token.

    Raises:
        AdminDisabledError: If no admin token is configured
        AdminAccessDeniedError: If the token is missing or wrong
    """
    if not admin_settings.token:
        raise AdminDisabledError("Admin endpoints are disabled")
    if not token or not secrets.compare_digest(
        token.encode(), admin_settings.token.encode()
    ):
        raise AdminAccessDeniedError("Valid admin token required")


@router.get("/settings", response_model=SettingsResponse)
async def get_settings(
    use_case: FromDishka[GetSettingsUseCase],
    admin_settings: FromDishka[AdminSettings],
    x_admin_token: str | None = Header(default=None),
) -> SettingsResponse:
    """Get the reaction mode in effect."""
    require_admin(x_admin_token, admin_settings)
    return await use_case.execute()


@router.put("/settings", response_model=SettingsResponse)
async def update_settings(
    request: UpdateSettingsRequest,
    use_case: FromDishka[UpdateSettingsUseCase],
    admin_settings: FromDishka[AdminSettings],
    x_admin_token: str | None = Header(default=None),
) -> SettingsResponse:
    """Change the reaction mode.

    Takes effect on the next vote. Existing counts are preserved.
    """
    require_admin(x_admin_token, admin_settings)
    return await use_case.execute(request)


@router.get("/tallies", response_model=ListTalliesResponse)
async def list_tallies(
    use_case: FromDishka[ListTalliesUseCase],
    admin_settings: FromDishka[AdminSettings],
    reaction_settings: FromDishka[ReactionSettings],
    limit: int | None = None,
    x_admin_token: str | None = Header(default=None),
) -> ListTalliesResponse:
    """Dashboard: counts per item, most recently voted first."""
    require_admin(x_admin_token, admin_settings)
    return await use_case.execute(
        ListTalliesRequest(
            limit=limit if limit is not None else reaction_settings.dashboard_limit
        )
    )


@router.post("/erase", response_model=EraseReactionsResponse)
async def erase_reactions(
    request: EraseReactionsRequest,
    use_case: FromDishka[EraseReactionsUseCase],
    admin_settings: FromDishka[AdminSettings],
    x_admin_token: str | None = Header(default=None),
) -> EraseReactionsResponse:
    """Erase vote records and counters.

    With no filters, every reaction is erased.
    """
    require_admin(x_admin_token, admin_settings)
    return await use_case.execute(request)
