"""Render engine errors as JSON responses."""

from flask import current_app, jsonify

from jobapps.api import api_bp
from jobapps.errors import StorageError, TrackerError


@api_bp.app_errorhandler(TrackerError)
def handle_tracker_error(err):
    if isinstance(err, StorageError):
        current_app.logger.warning(f'Storage error returned to client: {err.message}')
    return jsonify(err.to_dict()), err.status_code
