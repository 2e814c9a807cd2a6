import click
from flask.cli import with_appcontext
from sqlalchemy.exc import IntegrityError

from extensions import db
from models import User


@click.command('init-db')
@with_appcontext
def init_db_command():
    """
    Create all tables for an empty database (without migrations)

    Usage: flask init-db
    """
    db.create_all()
    click.echo('Tables created')


@click.command('create-user')
@click.argument('name')
@click.argument('email')
@click.argument('password')
@click.option('--admin', is_flag=True, help='Give the user the admin role')
@with_appcontext
def create_user_command(name, email, password, admin):
    """
    Create a user who can log in

    Usage:
        flask create-user Ana ana@example.com secret
        flask create-user Admin admin@example.com secret --admin
    """
    user = User(name=name, email=email, role='admin' if admin else 'user')
    user.set_password(password)
    db.session.add(user)
    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        raise click.ClickException(f'User with name {name} or email {email} already exists')

    click.echo(f'Created {user.role} {user.name} (id={user.id})')
