# logic.py
# Операции над соревнованиями и заявками. Каждая функция проверяет вход
# и выполняет один запрос к БД, а результат возвращает как Ok/Err.
# Как показать результат (страница, редирект, ошибка) решают маршруты.

from flask import current_app
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from extensions import db
from models import User, Competition, Competitor
from errors import Ok, Err, ErrorKind, INVALID_CALL, OPERATION_FAILED, ALREADY_APPLIED
from schemas import validate, IdSchema, CompetitionAddSchema, CompetitionEditSchema, BodoviSchema


def list_competitions():
    rows = db.session.query(
        Competition.id,
        Competition.name,
        Competition.description,
        User.name.label('author'),
        Competition.apply_till
    ).join(User, Competition.author_id == User.id).order_by(Competition.apply_till).all()
    return Ok(rows)


def delete_competition(raw_id):
    checked = validate(IdSchema, {'id': raw_id})
    if not checked.ok:
        return checked
    competition_id = checked.value.id

    try:
        deleted = Competition.query.filter_by(id=competition_id).delete(synchronize_session=False)
    except IntegrityError as e:
        # На заявки ссылается FK, если БД его проверяет
        db.session.rollback()
        current_app.logger.warning(f'Delete of competition {competition_id} rejected: {e.orig}')
        return Err(ErrorKind.CONSTRAINT, OPERATION_FAILED)
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f'Delete of competition {competition_id} failed: {e}')
        return Err(ErrorKind.UNKNOWN, OPERATION_FAILED)

    if deleted != 1:
        db.session.rollback()
        current_app.logger.warning(f'Delete of competition {competition_id} affected {deleted} rows')
        return Err(ErrorKind.NOT_FOUND, OPERATION_FAILED)

    db.session.commit()
    current_app.logger.info(f'Competition {competition_id} deleted')
    return Ok(competition_id)


def get_competition(raw_id):
    checked = validate(IdSchema, {'id': raw_id})
    if not checked.ok:
        return checked

    competition = db.session.get(Competition, checked.value.id)
    if not competition:
        return Err(ErrorKind.NOT_FOUND, INVALID_CALL)
    return Ok(competition)


def update_competition(form):
    checked = validate(CompetitionEditSchema, form)
    if not checked.ok:
        return checked
    data = checked.value

    try:
        updated = Competition.query.filter_by(id=data.id).update({
            'name': data.name,
            'description': data.description,
            'apply_till': data.apply_till,
        }, synchronize_session=False)
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f'Update of competition {data.id} failed: {e}')
        return Err(ErrorKind.UNKNOWN, OPERATION_FAILED)

    if updated != 1:
        db.session.rollback()
        current_app.logger.warning(f'Update of competition {data.id} affected {updated} rows')
        return Err(ErrorKind.NOT_FOUND, OPERATION_FAILED)

    db.session.commit()
    current_app.logger.info(f'Competition {data.id} updated')
    return Ok(data.id)


def add_competition(form, author_id):
    checked = validate(CompetitionAddSchema, form)
    if not checked.ok:
        return checked
    data = checked.value

    competition = Competition(
        name=data.name,
        description=data.description,
        author_id=author_id,
        apply_till=data.apply_till
    )
    db.session.add(competition)
    try:
        db.session.commit()
    except IntegrityError as e:
        db.session.rollback()
        current_app.logger.warning(f'Insert of competition "{data.name}" rejected: {e.orig}')
        return Err(ErrorKind.CONSTRAINT, OPERATION_FAILED)
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f'Insert of competition "{data.name}" failed: {e}')
        return Err(ErrorKind.UNKNOWN, OPERATION_FAILED)

    current_app.logger.info(f'Competition {competition.id} "{competition.name}" added by user {author_id}')
    return Ok(competition.id)


def apply_to_competition(raw_id, user_id):
    checked = validate(IdSchema, {'id': raw_id})
    if not checked.ok:
        return checked
    competition_id = checked.value.id

    existing = Competitor.query.filter_by(id_users=user_id, id_competitions=competition_id).all()
    if len(existing) > 0:
        return Err(ErrorKind.CONSTRAINT, ALREADY_APPLIED)

    competitor = Competitor(id_users=user_id, id_competitions=competition_id)
    db.session.add(competitor)
    try:
        db.session.commit()
    except IntegrityError:
        # Параллельная заявка успела раньше, ее не пропускает unique_user_competition
        db.session.rollback()
        return Err(ErrorKind.CONSTRAINT, ALREADY_APPLIED)
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f'User {user_id} could not apply to competition {competition_id}: {e}')
        return Err(ErrorKind.UNKNOWN, OPERATION_FAILED)

    current_app.logger.info(f'User {user_id} applied to competition {competition_id}')
    return Ok(competitor.id)


def list_applied(raw_id):
    checked = validate(IdSchema, {'id': raw_id})
    if not checked.ok:
        return checked

    rows = db.session.query(
        Competitor.id,
        Competition.name,
        User.name.label('korisnik'),
        Competitor.bodovi
    ).join(Competition, Competitor.id_competitions == Competition.id) \
     .join(User, Competitor.id_users == User.id) \
     .filter(Competition.id == checked.value.id) \
     .order_by(Competitor.bodovi).all()

    current_app.logger.debug(f'Applicants for competition {checked.value.id}: {rows}')
    return Ok(rows)


def get_competitor(raw_id):
    checked = validate(IdSchema, {'id': raw_id})
    if not checked.ok:
        return checked

    competitor = db.session.get(Competitor, checked.value.id)
    if not competitor:
        return Err(ErrorKind.NOT_FOUND, INVALID_CALL)
    return Ok(competitor)


def set_bodovi(form):
    """
    Выставляет бодови заявке. В Ok возвращается id соревнования этой заявки,
    чтобы вернуться на список заявок.
    """
    checked = validate(BodoviSchema, form)
    if not checked.ok:
        current_app.logger.debug(f'Bodovi validation failed: {checked.details}')
        return checked
    data = checked.value

    competitor = db.session.get(Competitor, data.id)
    if not competitor:
        return Err(ErrorKind.NOT_FOUND, OPERATION_FAILED)
    competition_id = competitor.id_competitions

    updated = Competitor.query.filter_by(id=data.id).update({'bodovi': data.bodovi}, synchronize_session=False)
    if updated != 1:
        db.session.rollback()
        current_app.logger.warning(f'Bodovi update of competitor {data.id} affected {updated} rows')
        return Err(ErrorKind.NOT_FOUND, OPERATION_FAILED)

    db.session.commit()
    current_app.logger.info(f'Competitor {data.id} scored {data.bodovi}')
    return Ok(competition_id)
