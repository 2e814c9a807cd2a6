from datetime import date
from app import create_app
from extensions import db
from models import User, Competition, Competitor

# Создаем экземпляр приложения, чтобы получить контекст
app = create_app()

with app.app_context():
    db.create_all()

    # --- 1. ОЧИСТКА ДАННЫХ ---
    print("Brisanje starih podataka...")
    # Идем в обратном порядке зависимостей
    db.session.query(Competitor).delete()
    db.session.query(Competition).delete()
    db.session.query(User).delete()
    db.session.commit()

    # --- 2. СОЗДАНИЕ ДАННЫХ ---
    print("Dodavanje testnih podataka...")

    try:
        admin = User(name='Admin', email='admin@example.com', role='admin')
        ana = User(name='Ana', email='ana@example.com', role='user')
        marko = User(name='Marko', email='marko@example.com', role='user')
        for user in (admin, ana, marko):
            user.set_password('lozinka')
        db.session.add_all([admin, ana, marko])
        db.session.commit()

        chess = Competition(name='Chess Open', description='Annual chess tournament',
                            author_id=admin.id, apply_till=date(2025, 12, 1))
        quiz = Competition(name='Kviz znanja', description='Školski kviz općeg znanja',
                           author_id=admin.id, apply_till=date(2025, 11, 15))
        db.session.add_all([chess, quiz])
        db.session.commit()

        # Заявки, одна уже с бодовима
        db.session.add_all([
            Competitor(id_users=ana.id, id_competitions=chess.id, bodovi=42),
            Competitor(id_users=marko.id, id_competitions=chess.id),
            Competitor(id_users=ana.id, id_competitions=quiz.id),
        ])
        db.session.commit()

        print("Testni podaci uspješno dodani!")
    except Exception as e:
        db.session.rollback()
        print(f"Greška prilikom dodavanja podataka: {e}")
