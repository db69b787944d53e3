from demondeduce.core.model import Alignment, Category
from demondeduce.core.statements import DirectionalClaim

from . import Role, register_role
from .abilities import StatementOnly


@register_role
class Enlightened(Role):
    name = "enlightened"
    category = Category.VILLAGER
    ability = StatementOnly(DirectionalClaim)

    @staticmethod
    def statement_shape(statement, seat, seats):
        return statement.seeks is Alignment.EVIL
