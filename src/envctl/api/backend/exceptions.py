class ApiException(Exception):
    """API backend exception."""


class UnauthorizedException(ApiException):
    def __init__(self, message="unauthorized"):
        super().__init__(message)


class NotFoundException(ApiException):
    def __init__(self, resource, id):
        self.resource = resource
        self.id = id

        super().__init__(f"{resource} not found")
