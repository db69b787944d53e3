from demondeduce.core.model import Category
from demondeduce.core.statements import CountClaim

from . import Role, register_role
from .abilities import StatementOnly


@register_role
class FortuneTeller(Role):
    name = "fortune teller"
    category = Category.VILLAGER
    ability = StatementOnly(CountClaim)

    @staticmethod
    def statement_shape(statement, seat, seats):
        return len(statement.targets) == 2 and not statement.none_closer
