from datetime import date

import pytest

from app import create_app
from extensions import db
from models import User, Competition, Competitor


class TestConfig:
    TESTING = True
    SECRET_KEY = 'test-secret'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    LOG_LEVEL = 'DEBUG'


@pytest.fixture
def app(tmp_path):
    config = type('TmpConfig', (TestConfig,), {
        'SQLALCHEMY_DATABASE_URI': f"sqlite:///{(tmp_path / 'test.db').as_posix()}",
    })
    app = create_app(config)

    with app.app_context():
        db.create_all()

    yield app

    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def users(app):
    """Admin and two regular users; returns their ids by name."""
    with app.app_context():
        admin = User(name='Admin', email='admin@example.com', role='admin')
        ana = User(name='Ana', email='ana@example.com', role='user')
        marko = User(name='Marko', email='marko@example.com', role='user')
        for user in (admin, ana, marko):
            user.set_password('lozinka')
        db.session.add_all([admin, ana, marko])
        db.session.commit()
        return {'admin': admin.id, 'ana': ana.id, 'marko': marko.id}


@pytest.fixture
def competition(app, users):
    with app.app_context():
        comp = Competition(name='Chess Open', description='Annual chess tournament',
                           author_id=users['admin'], apply_till=date(2025, 12, 1))
        db.session.add(comp)
        db.session.commit()
        return comp.id


@pytest.fixture
def competitors(app, users, competition):
    """Two applications to the competition: Ana (scored 30) and Marko (unscored)."""
    with app.app_context():
        ana = Competitor(id_users=users['ana'], id_competitions=competition, bodovi=30)
        marko = Competitor(id_users=users['marko'], id_competitions=competition)
        db.session.add_all([ana, marko])
        db.session.commit()
        return {'ana': ana.id, 'marko': marko.id}


def _login(client, user_id, name, role):
    with client.session_transaction() as sess:
        sess['user_id'] = user_id
        sess['user_name'] = name
        sess['user_role'] = role
    return client


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_client(app, users):
    return _login(app.test_client(), users['admin'], 'Admin', 'admin')


@pytest.fixture
def user_client(app, users):
    return _login(app.test_client(), users['ana'], 'Ana', 'user')
