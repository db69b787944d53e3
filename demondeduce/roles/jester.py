from demondeduce.core.model import Category
from demondeduce.core.statements import CountClaim

from . import Role, register_role
from .abilities import StatementOnly


@register_role
class Jester(Role):
    name = "jester"
    category = Category.VILLAGER
    ability = StatementOnly(CountClaim)

    @staticmethod
    def statement_shape(statement, seat, seats):
        return (
            len(statement.targets) == 3
            and 0 <= statement.count <= 3
            and not statement.minimum
            and not statement.none_closer
        )
