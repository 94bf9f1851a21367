"""API Blueprint registration."""

from flask import Blueprint

api_bp = Blueprint('api', __name__)

from jobapps.api import applications, errors  # noqa: E402,F401
