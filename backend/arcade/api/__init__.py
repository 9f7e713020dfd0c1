from flask import jsonify, current_app, request
from werkzeug.exceptions import HTTPException
from arcade.errors import ArcadeError, ServerError, ValidationError


def json_body():
    """Request JSON as a dict; a missing body reads as empty."""
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError('The request body must be a JSON object')
    return data


def register_error_handlers(flask_app):
    @flask_app.errorhandler(ArcadeError)
    def handle_arcade_error(exc):
        if isinstance(exc, ServerError):
            # Details stay in the server log; the caller gets the generic payload
            current_app.logger.error(f"[server-error] {exc.message}", exc_info=exc.__cause__ or exc)
        return jsonify(exc.to_dict()), exc.status_code

    @flask_app.errorhandler(Exception)
    def handle_unexpected_error(exc):
        if isinstance(exc, HTTPException):
            return exc
        current_app.logger.error(f"[server-error] unhandled {type(exc).__name__}", exc_info=exc)
        error = ServerError()
        return jsonify(error.to_dict()), error.status_code
