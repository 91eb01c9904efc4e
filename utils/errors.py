"""Error kinds raised by the faculty write path."""


class FacultyError(Exception):
    """Base error; carries the HTTP status the routes answer with."""
    status_code = 500

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def to_dict(self):
        return {
            'success': False,
            'error': self.message
        }


class ValidationError(FacultyError):
    """Missing or malformed name, subject, sections or availability."""
    status_code = 400


class NotFoundError(FacultyError):
    """Unknown subject code, department or faculty id."""
    status_code = 404


class ConflictError(FacultyError):
    """Submitted slots collide with another faculty teaching a shared section."""
    status_code = 409

    def __init__(self, conflicts):
        self.conflicts = list(conflicts)
        details = '; '.join(
            f"{c['faculty_name']} ({c['subject_code']}) - Section {c['section_code']} "
            f"on {c['day']} period {c['period']}"
            for c in self.conflicts
        )
        super().__init__(f'Slot conflict: {details}' if details else 'Slot conflict')

    def to_dict(self):
        data = super().to_dict()
        data['conflicts'] = self.conflicts
        return data


class StoreError(FacultyError):
    """Persistence failure; the caller may resubmit."""
    status_code = 500
