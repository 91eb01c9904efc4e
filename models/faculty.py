from datetime import datetime
from .database import db
from utils.conflicts import RosterEntry


faculty_sections = db.Table(
    'faculty_sections',
    db.Column('faculty_id', db.Integer, db.ForeignKey('faculties.id'), primary_key=True),
    db.Column('section_id', db.Integer, db.ForeignKey('sections.id'), primary_key=True)
)


class Faculty(db.Model):
    """Faculty model representing a teacher with the sections they teach and their weekly availability."""

    __tablename__ = 'faculties'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    subject_id = db.Column(db.Integer, db.ForeignKey('subjects.id'), nullable=False)
    # Always copied from subject.department_id on write
    department_id = db.Column(db.Integer, db.ForeignKey('departments.id'), nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    subject = db.relationship('Subject')
    department = db.relationship('Department')
    sections = db.relationship('Section', secondary=faculty_sections, order_by='Section.id')
    availability_entries = db.relationship(
        'AvailabilityEntry', backref='faculty', order_by='AvailabilityEntry.id',
        cascade='all, delete-orphan'
    )
    claims = db.relationship('SlotClaim', backref='faculty', cascade='all, delete-orphan')

    def __repr__(self):
        return f'<Faculty {self.name}>'

    @property
    def availability(self):
        return [entry.to_dict() for entry in self.availability_entries]

    def to_roster_entry(self):
        """Snapshot used by the conflict index builder."""
        return RosterEntry(
            id=self.id,
            name=self.name,
            subject_code=self.subject.code if self.subject else 'N/A',
            sections=[(s.id, s.code) for s in self.sections],
            availability=self.availability
        )

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'subject': self.subject.to_dict() if self.subject else None,
            'department': self.department.to_dict() if self.department else None,
            'sections': [s.to_dict() for s in self.sections],
            'availability': self.availability,
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'updated_at': self.updated_at.isoformat() if self.updated_at else None
        }
