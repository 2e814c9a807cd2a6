# routes/competitions.py
# Маршруты соревнований: список, добавление/изменение/удаление (админ),
# заявка пользователя, список заявок и выставление бодова (админ)

from flask import Blueprint, render_template, request, redirect, url_for, session

import logic
from errors import CompetitionError, ErrorKind
from routes.auth import login_required, admin_required


competitions_bp = Blueprint('competitions', __name__, url_prefix='/competitions')


def _unwrap(outcome):
    """Значение Ok или общая ошибка для Err."""
    if not outcome.ok:
        raise CompetitionError.from_err(outcome)
    return outcome.value


def _render_form(**result):
    return render_template('competitions/form.html', result=result)


@competitions_bp.route('')
@login_required
def index():
    items = _unwrap(logic.list_competitions())
    return render_template('competitions/index.html', result={'items': items})


@competitions_bp.route('/delete/<id>')
@admin_required
def delete(id):
    _unwrap(logic.delete_competition(id))
    return redirect(url_for('competitions.index'))


@competitions_bp.route('/edit/<id>')
@admin_required
def edit_form(id):
    competition = _unwrap(logic.get_competition(id))
    return _render_form(display_form=True, is_edit=True, edit=competition)


@competitions_bp.route('/edit', methods=['POST'])
@admin_required
def edit():
    form = request.form.to_dict()
    outcome = logic.update_competition(form)
    if outcome.ok:
        return redirect(url_for('competitions.index'))

    if outcome.kind == ErrorKind.VALIDATION:
        # Возвращаем введенные значения обратно в форму
        return _render_form(validation_error=True, display_form=True, is_edit=True, edit=form)
    return _render_form(database_error=True)


@competitions_bp.route('/add')
@admin_required
def add_form():
    return _render_form(display_form=True)


@competitions_bp.route('/add', methods=['POST'])
@admin_required
def add():
    form = request.form.to_dict()
    outcome = logic.add_competition(form, session['user_id'])
    if outcome.ok:
        return _render_form(success=True)

    if outcome.kind == ErrorKind.VALIDATION:
        return _render_form(validation_error=True, display_form=True)
    return _render_form(database_error=True)


@competitions_bp.route('/apply/<id>')
@login_required
def apply(id):
    outcome = logic.apply_to_competition(id, session['user_id'])
    if outcome.ok:
        return _render_form(success=True)

    # Неверный id и повторная заявка - общая ошибка, сбой записи - флаг в форме
    if outcome.kind == ErrorKind.UNKNOWN:
        return _render_form(database_error=True)
    raise CompetitionError.from_err(outcome)


@competitions_bp.route('/applied/<id>')
@admin_required
def applied(id):
    items = _unwrap(logic.list_applied(id))
    return render_template('competitions/applied.html', result={'items': items, 'competition_id': id})


@competitions_bp.route('/bodovi/<id>')
@admin_required
def bodovi_form(id):
    competitor = _unwrap(logic.get_competitor(id))
    return render_template('competitions/bodovi.html', result={'display_form': True, 'bodovi': competitor})


@competitions_bp.route('/bodovi', methods=['POST'])
@admin_required
def bodovi():
    outcome = logic.set_bodovi(request.form.to_dict())
    if outcome.ok:
        return redirect(url_for('competitions.applied', id=outcome.value))

    if outcome.kind == ErrorKind.VALIDATION:
        raise CompetitionError.from_err(outcome)
    return render_template('competitions/bodovi.html', result={'database_error': True})
