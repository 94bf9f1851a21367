"""API endpoints for job applications."""

from flask import request, jsonify
from marshmallow import ValidationError

from jobapps.api import api_bp
from jobapps.errors import RecordValidationError
from jobapps.models import SearchMode
from jobapps.schemas import ApplicationSchema, TrackRequestSchema
from jobapps.services.tracker import get_tracker


def _json_body():
    data = request.get_json(silent=True)
    if data is None:
        raise RecordValidationError('Request body must be JSON')
    return data


@api_bp.route('/applications/track', methods=['POST'])
def track_application():
    """Extract a draft from pasted posting text. Nothing is saved."""
    try:
        data = TrackRequestSchema().load(_json_body())
    except ValidationError as err:
        raise RecordValidationError('Invalid track request', errors=err.messages) from err

    draft, report = get_tracker().extract(data['raw_text'], data['platform'])
    result = ApplicationSchema().dump(draft)
    result['report'] = report.to_dict()
    return jsonify(result)


@api_bp.route('/applications', methods=['GET'])
def list_applications():
    """List all applications in the order they were saved."""
    records = get_tracker().get_all_job_apps()
    return jsonify({
        'applications': ApplicationSchema(many=True).dump(records),
        'total': len(records),
    })


@api_bp.route('/applications/search', methods=['GET'])
def search_applications():
    """Search applications; most recently applied first."""
    term = request.args.get('q', '')
    mode = request.args.get('mode', SearchMode.COMPANY.value)
    records = get_tracker().search(term, mode)
    return jsonify({
        'applications': ApplicationSchema(many=True).dump(records),
        'total': len(records),
    })


@api_bp.route('/applications/<int:id>', methods=['GET'])
def get_application(id):
    """Get a single application by ID."""
    record = get_tracker().get_job_app(id)
    return jsonify(ApplicationSchema().dump(record))


@api_bp.route('/applications', methods=['POST'])
def save_application():
    """Save a reviewed record. Without app_id a new application is created."""
    data = _json_body()
    record = get_tracker().save_job_app(data)
    created = not isinstance(data, dict) or data.get('app_id') is None
    return jsonify(ApplicationSchema().dump(record)), 201 if created else 200


@api_bp.route('/applications/<int:id>', methods=['PUT'])
def update_application(id):
    """Overwrite an existing application."""
    data = _json_body()
    if not isinstance(data, dict):
        raise RecordValidationError('Application payload must be an object')
    data['app_id'] = id
    record = get_tracker().save_job_app(data)
    return jsonify(ApplicationSchema().dump(record))


@api_bp.route('/applications/<int:id>', methods=['DELETE'])
def delete_application(id):
    """Delete an application."""
    get_tracker().delete_job_app(id)
    return jsonify({'message': 'Application deleted successfully'}), 200
