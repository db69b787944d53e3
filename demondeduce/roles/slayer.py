from demondeduce.core.model import Category
from demondeduce.core.statements import TargetedBinaryClaim, Verdict

from . import Role, register_role
from .abilities import StatementOnly


@register_role
class Slayer(Role):
    name = "slayer"
    category = Category.VILLAGER
    ability = StatementOnly(TargetedBinaryClaim)

    @staticmethod
    def statement_shape(statement, seat, seats):
        return statement.target != seat and statement.verdict in (Verdict.GOOD, Verdict.EVIL)
