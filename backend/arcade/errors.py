"""Error taxonomy shared by the services and the HTTP layer.

Every error renders as ``{statusCode, error, message}``.
"""


class ArcadeError(Exception):
    status_code = 500
    error = 'Internal Server Error'
    default_message = 'An internal server error occurred'

    def __init__(self, message=None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message

    def to_dict(self):
        return {
            'statusCode': self.status_code,
            'error': self.error,
            'message': self.message,
        }


class ValidationError(ArcadeError):
    status_code = 400
    error = 'Bad Request'
    default_message = 'The request is missing required fields'


class InvalidId(ValidationError):
    default_message = 'The specified ID is invalid!'


class NotFound(ArcadeError):
    # Missing records are reported as bad requests, not 404s
    status_code = 400
    error = 'Bad Request'
    default_message = 'Could not find a record with the specified ID!'


class Forbidden(ArcadeError):
    status_code = 403
    error = 'Forbidden'
    default_message = 'The request was rejected'


class ProtectedFieldError(Forbidden):
    """A protected field was supplied to a generic update."""
    status_code = 400
    error = 'Bad Request'


class Conflict(ArcadeError):
    status_code = 409
    error = 'Conflict'
    default_message = 'The record conflicts with an existing one'


class StaleRecordError(Conflict):
    default_message = 'The record was modified concurrently, please retry'


class ServerError(ArcadeError):
    pass


class StoreError(ServerError):
    pass


class PartialRedemptionError(ServerError):
    default_message = 'The redemption was partially applied'
