# models/__init__.py
# Инициализация моделей

from .user import User
from .competition import Competition
from .competitor import Competitor
