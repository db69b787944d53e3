from demondeduce.core.model import Category

from . import Role, register_role


@register_role
class Minion(Role):
    name = "minion"
    category = Category.MINION
