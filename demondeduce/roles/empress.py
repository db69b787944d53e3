from demondeduce.core.model import Category
from demondeduce.core.statements import CountClaim

from . import Role, register_role
from .abilities import StatementOnly


@register_role
class Empress(Role):
    """Names three cards, exactly one of which is evil."""
    name = "empress"
    category = Category.VILLAGER
    ability = StatementOnly(CountClaim)

    @staticmethod
    def statement_shape(statement, seat, seats):
        return (
            len(statement.targets) == 3
            and statement.count == 1
            and not statement.minimum
            and not statement.none_closer
        )
