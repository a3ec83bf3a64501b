# travel_agency/domain/errors.py
"""
Bledy domenowe:
- InvalidInputError (ValueError): brakujace / zle pola, zajety login
- InvalidCredentialsError, UnauthenticatedError, ForbiddenError (PermissionError)
- NotFoundError (LookupError): wycieczka, pozycja koszyka, user
- StorageError (RuntimeError): awaria bazy, bez automatycznego ponawiania
"""


class InvalidInputError(ValueError):
    pass


class DuplicateUsernameError(InvalidInputError):
    def __init__(self, username: str):
        super().__init__(f"Username '{username}' is already taken")
        self.username = username


class InvalidCredentialsError(PermissionError):
    def __init__(self):
        super().__init__("Invalid username or password")


class UnauthenticatedError(PermissionError):
    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)


class ForbiddenError(PermissionError):
    pass


class NotFoundError(LookupError):
    pass


class TourNotFoundError(NotFoundError):
    def __init__(self, tour_id: int):
        super().__init__(f"Tour {tour_id} not found")
        self.tour_id = tour_id


class CartLineNotFoundError(NotFoundError):
    def __init__(self, line_id: int):
        super().__init__(f"Cart item {line_id} not found")
        self.line_id = line_id


class StorageError(RuntimeError):
    pass
