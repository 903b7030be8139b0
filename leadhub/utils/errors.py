from fastapi import HTTPException, status


class ValidationError(HTTPException):
    def __init__(self, detail: str = "Validation failed", errors: list[dict] | None = None):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)
        self.errors = errors or []


class ConflictError(HTTPException):
    def __init__(self, detail: str):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class AuthError(HTTPException):
    def __init__(self, detail: str = "Invalid credentials"):
        super().__init__(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail)


class ForbiddenError(HTTPException):
    def __init__(self, detail: str):
        super().__init__(status_code=status.HTTP_403_FORBIDDEN, detail=detail)


class ServerError(HTTPException):
    def __init__(self, detail: str = "Server error"):
        super().__init__(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)
