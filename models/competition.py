# models/competition.py

from extensions import db

class Competition(db.Model):
    __tablename__ = 'competitions'
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(50), nullable=False)
    description = db.Column(db.String(1000), nullable=False)
    author_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False)
    apply_till = db.Column(db.Date, nullable=False)

    author = db.relationship('User')

    # Каскада на competitors нет: при удалении соревнования заявки остаются.
    competitors = db.relationship('Competitor', backref='competition', lazy=True, passive_deletes='all')
