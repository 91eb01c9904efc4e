from types import SimpleNamespace

import pytest

from app import create_app
from models import db, Department, Section, Subject


@pytest.fixture()
def app(tmp_path):
    app = create_app({
        'TESTING': True,
        'SQLALCHEMY_DATABASE_URI': 'sqlite:///' + str(tmp_path / 'test.db'),
        'PERIODS_PER_DAY': 5,
    })
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def catalog(app):
    """Two departments with subjects and sections; ids only, so nothing lazy-loads later."""
    cse = Department(code='CSE', name='Computer Science')
    ece = Department(code='ECE', name='Electronics')
    db.session.add_all([cse, ece])
    db.session.flush()

    subjects = [
        Subject(code='CS201', name='Data Structures', department_id=cse.id),
        Subject(code='CS301', name='Operating Systems', department_id=cse.id),
        Subject(code='EC201', name='Signals', department_id=ece.id),
    ]
    sections = {
        '2A': Section(code='2A', name='2A - 2nd Year', department_id=cse.id, academic_year='2nd Year', year=2),
        '2B': Section(code='2B', name='2B - 2nd Year', department_id=cse.id, academic_year='2nd Year', year=2),
        '3A': Section(code='3A', name='3A - 3rd Year', department_id=cse.id, academic_year='3rd Year', year=3),
        'P1': Section(code='P1', name='P1 - 1st Year - Physics Cycle', department_id=cse.id,
                      academic_year='1st Year', year=1, cycle='Physics'),
        'EC2A': Section(code='2A', name='2A - 2nd Year', department_id=ece.id, academic_year='2nd Year', year=2),
    }
    db.session.add_all(subjects + list(sections.values()))
    db.session.commit()

    ns = SimpleNamespace(
        cse_id=cse.id,
        ece_id=ece.id,
        sec_2a=sections['2A'].id,
        sec_2b=sections['2B'].id,
        sec_3a=sections['3A'].id,
        sec_p1=sections['P1'].id,
        ece_2a=sections['EC2A'].id,
    )
    db.session.remove()
    return ns
