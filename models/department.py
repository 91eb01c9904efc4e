from .database import db


class Department(db.Model):
    """Department model owning subjects and sections."""

    __tablename__ = 'departments'

    id = db.Column(db.Integer, primary_key=True)
    code = db.Column(db.String(20), unique=True, nullable=False)
    name = db.Column(db.String(100), nullable=False)

    subjects = db.relationship('Subject', backref='department', lazy='dynamic')
    sections = db.relationship('Section', backref='department', lazy='dynamic')

    def __repr__(self):
        return f'<Department {self.code}>'

    def to_dict(self):
        return {
            'id': self.id,
            'code': self.code,
            'name': self.name
        }
