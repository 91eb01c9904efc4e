from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()

def init_app(app):
    db.init_app(app)
    # Import models to register them with SQLAlchemy
    from .department import Department
    from .subject import Subject
    from .section import Section
    from .faculty import Faculty
    from .availability import AvailabilityEntry, SlotClaim
