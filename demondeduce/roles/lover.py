from demondeduce.core.model import Category
from demondeduce.core.statements import CountClaim, neighbors

from . import Role, register_role
from .abilities import StatementOnly


@register_role
class Lover(Role):
    """Counts the evil among its two neighbours."""
    name = "lover"
    category = Category.VILLAGER
    ability = StatementOnly(CountClaim)

    @staticmethod
    def statement_shape(statement, seat, seats):
        return (
            set(statement.targets) == set(neighbors(seat, seats))
            and not statement.minimum
            and not statement.none_closer
        )
