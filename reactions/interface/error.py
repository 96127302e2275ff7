"""Interface layer errors."""


class InterfaceError(Exception):
    """Base interface error."""

    pass


class UnauthenticatedError(InterfaceError):
    """No voter identity could be resolved for the request."""

    pass


class AdminAccessDeniedError(InterfaceError):
    """Admin token missing or wrong."""

    pass


class AdminDisabledError(InterfaceError):
    """Admin endpoints are disabled because no admin token is configured."""

    pass
