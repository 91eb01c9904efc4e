from .database import db
from .department import Department
from .subject import Subject
from .section import Section
from .faculty import Faculty, faculty_sections
from .availability import AvailabilityEntry, SlotClaim

__all__ = ['db', 'Department', 'Subject', 'Section', 'Faculty', 'faculty_sections', 'AvailabilityEntry', 'SlotClaim']
