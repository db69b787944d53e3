from demondeduce.core.model import Category
from demondeduce.core.statements import RoleDistanceClaim

from . import Role, register_role, is_known, get_role
from .abilities import StatementOnly


@register_role
class Scout(Role):
    """Names an evil role and how far it sits from the closest other evil."""
    name = "scout"
    category = Category.VILLAGER
    ability = StatementOnly(RoleDistanceClaim)

    @staticmethod
    def statement_shape(statement, seat, seats):
        if not is_known(statement.role) or not get_role(statement.role).is_evil():
            return False
        return 1 <= statement.distance <= seats // 2
