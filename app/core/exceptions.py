from fastapi import HTTPException, status


class NotFoundError(HTTPException):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{resource} not found",
        )


class ServiceUnavailableError(HTTPException):
    """Raised when the AI service is not configured or cannot be reached."""

    def __init__(self, message: str = "AI service is not configured"):
        super().__init__(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=message,
        )


class RateLimitedError(HTTPException):
    """Raised when the caller or the AI provider is rate limited."""

    def __init__(
        self,
        message: str = "AI service is temporarily unavailable. Please try again later.",
        retry_after: int | None = None,
    ):
        super().__init__(
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            detail=message,
            headers={"Retry-After": str(retry_after)} if retry_after is not None else None,
        )


class BadGatewayError(HTTPException):
    """Raised when the AI provider returned an unusable interpretation."""

    def __init__(self, message: str = "Interpretation failed"):
        super().__init__(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=message,
        )


class GatewayTimeoutError(HTTPException):
    """Raised when the AI provider did not answer in time."""

    def __init__(self, message: str = "AI service timed out"):
        super().__init__(
            status_code=status.HTTP_504_GATEWAY_TIMEOUT,
            detail=message,
        )
