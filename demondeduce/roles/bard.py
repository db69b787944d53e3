from demondeduce.core.model import Category
from demondeduce.core.statements import CorruptionDistanceClaim

from . import Role, register_role
from .abilities import StatementOnly


@register_role
class Bard(Role):
    """Says how far away the closest corrupted card is, or that there is none."""
    name = "bard"
    category = Category.VILLAGER
    ability = StatementOnly(CorruptionDistanceClaim)

    @staticmethod
    def statement_shape(statement, seat, seats):
        return statement.distance is None or 1 <= statement.distance <= seats // 2
