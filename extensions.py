# extensions.py
# Файл для хранения экземпляров расширений Flask

from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate

# Единственный на процесс доступ к БД: движок создается в db.init_app(),
# сессия живет в рамках одного запроса и закрывается на teardown.
db = SQLAlchemy()
migrate = Migrate()
