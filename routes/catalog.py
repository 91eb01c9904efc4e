from flask import Blueprint, jsonify, request
from models import Subject
from utils.errors import FacultyError, ValidationError
from utils.faculty_service import fetch_sections
from utils.grid import get_grid_config

catalog_bp = Blueprint('catalog', __name__)


@catalog_bp.errorhandler(FacultyError)
def handle_faculty_error(error):
    return jsonify(error.to_dict()), error.status_code


@catalog_bp.route('/sections', methods=['GET'])
def get_sections():
    """Assignable sections (2nd year and up) of a department."""
    department_id = request.args.get('department_id', type=int)
    if department_id is None:
        raise ValidationError('department_id is required')

    sections = fetch_sections(department_id)
    return jsonify({
        'success': True,
        'data': [s.to_dict() for s in sections],
        'count': len(sections)
    })


@catalog_bp.route('/subjects', methods=['GET'])
def get_subjects():
    """All subjects with their department, for the subject picker."""
    subjects = Subject.query.order_by(Subject.code).all()
    return jsonify({
        'success': True,
        'data': [s.to_dict() for s in subjects]
    })


@catalog_bp.route('/settings', methods=['GET'])
def get_settings():
    """Timetable grid settings."""
    return jsonify({
        'success': True,
        'data': get_grid_config().to_dict()
    })
