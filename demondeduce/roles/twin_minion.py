from demondeduce.core.model import Category

from . import Role, register_role


@register_role
class TwinMinion(Role):
    name = "twin minion"
    category = Category.MINION
