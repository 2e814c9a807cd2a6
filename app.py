# app.py
# Основной файл Flask-приложения с использованием паттерна Application Factory

import logging

from flask import Flask, redirect, render_template, url_for
from config import Config
from extensions import db, migrate
from errors import CompetitionError

# Важно импортировать модели здесь, чтобы Alembic (Migrate) мог их видеть
from models import User, Competition, Competitor

def create_app(config_class=Config):
    # Создаем экземпляр приложения
    app = Flask(__name__)
    app.config.from_object(config_class)

    logging.basicConfig(level=app.config.get('LOG_LEVEL', 'INFO'))
    app.logger.setLevel(app.config.get('LOG_LEVEL', 'INFO'))

    # --- Инициализируем расширения С ПРИЛОЖЕНИЕМ ---
    db.init_app(app)
    migrate.init_app(app, db)

    # --- Регистрируем наши Blueprints (маршруты) ---
    from routes.auth import auth_bp
    from routes.competitions import competitions_bp

    app.register_blueprint(auth_bp)
    app.register_blueprint(competitions_bp)

    # --- CLI-команды: flask init-db, flask create-user ---
    from commands import init_db_command, create_user_command
    app.cli.add_command(init_db_command)
    app.cli.add_command(create_user_command)

    @app.errorhandler(CompetitionError)
    def handle_competition_error(error):
        app.logger.warning(f'Request failed ({error.kind.value}): {error.message}')
        return render_template('error.html', message=error.message), error.status_code

    @app.route('/')
    def root():
        return redirect(url_for('competitions.index'))

    return app
