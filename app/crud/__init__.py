from .crud_order import order
from .crud_cash_session import cash_session
from .crud_profile import profile
from .crud_address import address
from .crud_menu import category, product, choice_group, choice_option
