"""
Error taxonomy shared by the auth and feedback services.

Each error carries the HTTP status it maps to; the gateway renders any of
them as ``{"error": message}``.
"""


class ServiceError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInput(ServiceError):
    status_code = 400


class Conflict(ServiceError):
    status_code = 400


class InvalidCredentials(ServiceError):
    status_code = 400


class NotFound(ServiceError):
    status_code = 404


class StoreFailure(ServiceError):
    status_code = 500
