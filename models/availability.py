from .database import db


class AvailabilityEntry(db.Model):
    """One weekday of a faculty member's availability with its free periods."""

    __tablename__ = 'availability_entries'

    id = db.Column(db.Integer, primary_key=True)
    faculty_id = db.Column(db.Integer, db.ForeignKey('faculties.id'), nullable=False)
    day = db.Column(db.String(10), nullable=False)  # "Monday" .. "Friday"
    periods = db.Column(db.JSON, nullable=False)  # sorted, e.g. [1, 2, 4]

    __table_args__ = (
        db.UniqueConstraint('faculty_id', 'day', name='uq_availability_faculty_day'),
    )

    def __repr__(self):
        return f'<AvailabilityEntry {self.day} {self.periods}>'

    def to_dict(self):
        return {
            'day': self.day,
            'periods': list(self.periods)
        }


class SlotClaim(db.Model):
    """A (section, day, period) cell held by one faculty member.

    Rows are derived from a faculty's sections crossed with its availability
    and rewritten wholesale on every save. The unique constraint makes the
    database reject two faculty claiming the same cell of a shared section.
    """

    __tablename__ = 'slot_claims'

    id = db.Column(db.Integer, primary_key=True)
    faculty_id = db.Column(db.Integer, db.ForeignKey('faculties.id'), nullable=False)
    section_id = db.Column(db.Integer, db.ForeignKey('sections.id'), nullable=False)
    day = db.Column(db.String(10), nullable=False)
    period = db.Column(db.Integer, nullable=False)

    __table_args__ = (
        db.UniqueConstraint('section_id', 'day', 'period', name='uq_slot_claim_section_cell'),
    )

    def __repr__(self):
        return f'<SlotClaim section={self.section_id} {self.day}-{self.period}>'
