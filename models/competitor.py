# models/competitor.py

from extensions import db
from sqlalchemy import CheckConstraint, UniqueConstraint

class Competitor(db.Model):
    __tablename__ = 'competitors'

    id = db.Column(db.Integer, primary_key=True)
    id_users = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False)
    id_competitions = db.Column(db.Integer, db.ForeignKey('competitions.id'), nullable=False)
    # Бодови выставляет админ, до этого NULL
    bodovi = db.Column(db.Float, nullable=True)

    user = db.relationship('User')

    __table_args__ = (
        # Одна заявка на пару (пользователь, соревнование)
        UniqueConstraint('id_users', 'id_competitions', name='unique_user_competition'),
        CheckConstraint("bodovi IS NULL OR bodovi BETWEEN 1 AND 50", name="check_bodovi"),
    )
