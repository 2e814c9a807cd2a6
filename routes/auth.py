# routes/auth.py
# Маршруты для авторизации и декораторы доступа

from functools import wraps
from flask import Blueprint, render_template, request, redirect, url_for, session, flash, current_app
from extensions import db
from models.user import User # Импортируем нашу модель User

auth_bp = Blueprint('auth', __name__)


def login_required(f):
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if 'user_id' not in session:
            flash('Za pristup ovoj stranici potrebna je prijava.', 'error')
            return redirect(url_for('auth.login'))
        return f(*args, **kwargs)
    return decorated_function


def admin_required(f):
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if 'user_id' not in session:
            flash('Za pristup ovoj stranici potrebna je prijava.', 'error')
            return redirect(url_for('auth.login'))
        if session.get('user_role') != 'admin':
            flash('Nemate prava za pristup ovoj stranici.', 'error')
            return redirect(url_for('competitions.index'))
        return f(*args, **kwargs)
    return decorated_function


@auth_bp.route('/login', methods=['GET', 'POST'])
def login():
    # Если пользователь уже вошел, перенаправляем его на список соревнований
    if 'user_id' in session:
        return redirect(url_for('competitions.index'))

    if request.method == 'POST':
        email = request.form.get('email')
        password = request.form.get('password')
        if not email or not password:
            flash('Unesite email i lozinku.', 'error')
            return redirect(url_for('auth.login'))

        user = db.session.query(User).filter_by(email=email).first()

        if user and user.check_password(password):
            # Сохраняем ID, имя и роль в сессию
            session.clear() # Очищаем старую сессию для безопасности
            session['user_id'] = user.id
            session['user_name'] = user.name
            session['user_role'] = user.role
            current_app.logger.info(f'User {user.id} logged in')
            flash('Prijava uspješna!', 'success')
            return redirect(url_for('competitions.index'))
        else:
            current_app.logger.warning(f'Failed login for {email}')
            flash('Neispravan email ili lozinka.', 'error')
            return redirect(url_for('auth.login'))

    return render_template('login.html')


@auth_bp.route('/logout')
def logout():
    session.clear()
    flash('Uspješno ste se odjavili.', 'success')
    return redirect(url_for('auth.login'))
