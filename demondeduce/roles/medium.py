from demondeduce.core.model import Category
from demondeduce.core.statements import RoleIdentityClaim

from . import Role, register_role, is_known, category_of
from .abilities import StatementOnly


@register_role
class Medium(Role):
    """Names the real role of a Villager."""
    name = "medium"
    category = Category.VILLAGER
    ability = StatementOnly(RoleIdentityClaim)

    @staticmethod
    def statement_shape(statement, seat, seats):
        if statement.target == seat or not is_known(statement.role):
            return False
        return category_of(statement.role) is Category.VILLAGER
