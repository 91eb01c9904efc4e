from flask import Blueprint, jsonify, request
from models import Faculty
from utils.conflicts import blocked_map_to_dict
from utils.errors import FacultyError, NotFoundError, ValidationError
from utils.faculty_service import compute_blocked_slots, delete_faculty, fetch_roster, submit_faculty
from utils.grid import get_grid_config

faculty_bp = Blueprint('faculty', __name__)


@faculty_bp.errorhandler(FacultyError)
def handle_faculty_error(error):
    return jsonify(error.to_dict()), error.status_code


@faculty_bp.route('/', methods=['GET'])
def get_all_faculty():
    """Get all faculty, optionally without the one being edited."""
    exclude_id = request.args.get('exclude_id', type=int)
    query = Faculty.query.order_by(Faculty.id)
    if exclude_id is not None:
        query = query.filter(Faculty.id != exclude_id)
    faculty = query.all()

    return jsonify({
        'success': True,
        'data': [f.to_dict() for f in faculty],
        'count': len(faculty)
    })


@faculty_bp.route('/<int:faculty_id>', methods=['GET'])
def get_faculty(faculty_id):
    """Get one faculty record by ID."""
    faculty = Faculty.query.get(faculty_id)
    if not faculty:
        raise NotFoundError(f'Faculty {faculty_id} not found')
    return jsonify({'success': True, 'data': faculty.to_dict()})


@faculty_bp.route('/', methods=['POST'])
def create_faculty():
    """Create a faculty record after validation and conflict checks."""
    faculty = submit_faculty(request.get_json(silent=True), get_grid_config())
    return jsonify({
        'success': True,
        'data': faculty.to_dict(),
        'message': 'Faculty created successfully'
    }), 201


@faculty_bp.route('/<int:faculty_id>', methods=['PUT'])
def update_faculty(faculty_id):
    """Replace a faculty record; availability is always replaced wholesale."""
    faculty = submit_faculty(request.get_json(silent=True), get_grid_config(), editing_id=faculty_id)
    return jsonify({
        'success': True,
        'data': faculty.to_dict(),
        'message': 'Faculty updated successfully'
    })


@faculty_bp.route('/<int:faculty_id>', methods=['DELETE'])
def remove_faculty(faculty_id):
    """Delete a faculty record and free its slots."""
    delete_faculty(faculty_id)
    return jsonify({'success': True, 'message': 'Faculty deleted successfully'})


@faculty_bp.route('/blocked-slots', methods=['POST'])
def blocked_slots():
    """Slots already taken for the selected sections. Advisory only; writes re-check."""
    data = request.get_json(silent=True) or {}
    section_ids = data.get('section_ids', [])
    editing_id = data.get('editing_id')

    if not isinstance(section_ids, list):
        raise ValidationError('section_ids must be a list')
    if any(isinstance(s, bool) or not isinstance(s, int) for s in section_ids):
        raise ValidationError('section_ids must be integers')
    if editing_id is not None and (isinstance(editing_id, bool) or not isinstance(editing_id, int)):
        raise ValidationError('editing_id must be an integer')

    blocked = compute_blocked_slots(section_ids, get_grid_config(), editing_id)
    return jsonify({
        'success': True,
        'blocked': blocked_map_to_dict(blocked),
        'count': len(blocked)
    })


@faculty_bp.route('/roster', methods=['GET'])
def get_roster():
    """Roster snapshots as consumed by the conflict builder."""
    exclude_id = request.args.get('exclude_id', type=int)
    roster = fetch_roster(exclude_id=exclude_id)
    return jsonify({
        'success': True,
        'data': [
            {
                'id': entry.id,
                'name': entry.name,
                'subject_code': entry.subject_code,
                'section_ids': [section_id for section_id, _ in entry.sections],
                'availability': entry.availability
            }
            for entry in roster
        ]
    })
