from .database import db


class Section(db.Model):
    """Section model representing a student group sharing one timetable."""

    __tablename__ = 'sections'

    id = db.Column(db.Integer, primary_key=True)
    code = db.Column(db.String(20), nullable=False)  # e.g., "2A", "P1"
    name = db.Column(db.String(100), nullable=False)  # e.g., "2A - 2nd Year"
    department_id = db.Column(db.Integer, db.ForeignKey('departments.id'), nullable=False)
    academic_year = db.Column(db.String(20), nullable=False)  # e.g., "2nd Year"
    year = db.Column(db.Integer, nullable=False)
    cycle = db.Column(db.String(20), nullable=True)  # "Physics"/"Chemistry", 1st year only
    capacity = db.Column(db.Integer, default=60)

    __table_args__ = (
        db.UniqueConstraint('department_id', 'code', name='uq_section_department_code'),
    )

    def __repr__(self):
        return f'<Section {self.code}>'

    @property
    def is_assignable(self):
        """First-year (cycle) sections never get faculty assigned."""
        return not self.cycle

    def to_dict(self):
        return {
            'id': self.id,
            'code': self.code,
            'name': self.name,
            'department_id': self.department_id,
            'academic_year': self.academic_year,
            'year': self.year,
            'cycle': self.cycle,
            'capacity': self.capacity
        }
