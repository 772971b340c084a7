# Importa todos os modelos para que Base.metadata os conheça (create_all / Alembic)
from app.db.models.order import Order, OrderItem, OrderStatus, ServiceType, TERMINAL_STATUSES  # noqa: F401
from app.db.models.cash_session import CashSession, CashSessionStatus  # noqa: F401
from app.db.models.profile import Profile  # noqa: F401
from app.db.models.address import Address  # noqa: F401
from app.db.models.menu import Category, Product, ChoiceGroup, ChoiceOption  # noqa: F401
