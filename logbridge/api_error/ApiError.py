# logbridge/api_error/ApiError.py
class AppError(Exception):
    """Base error for all logbridge-specific issues."""

    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_ERROR",
    ):
        self.message = message
        self.code = code
        super().__init__(self.message)


__all__ = ["AppError"]
