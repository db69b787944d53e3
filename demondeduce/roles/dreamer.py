from demondeduce.core.model import Category
from demondeduce.core.statements import RoleIdentityClaim

from . import Role, register_role, is_known
from .abilities import StatementOnly


@register_role
class Dreamer(Role):
    name = "dreamer"
    category = Category.VILLAGER
    ability = StatementOnly(RoleIdentityClaim)

    @staticmethod
    def statement_shape(statement, seat, seats):
        return statement.target != seat and is_known(statement.role)
