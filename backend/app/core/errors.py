class SofiError(Exception):
    pass


class InvalidCredentialsError(SofiError):
    """Raised when an email/password pair does not match a stored user"""
    pass


class TokenError(SofiError):
    """Raised when a bearer token is malformed, expired or badly signed"""
    pass


class NotFoundError(SofiError):
    def __init__(self, entity: str, entity_id):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} {entity_id} not found.")


class ConflictError(SofiError):
    pass


class ValidationError(SofiError):
    """Business-rule violation that the request schema cannot express"""
    pass
