from demondeduce.core.model import Category

from . import Role, register_role


@register_role
class Witch(Role):
    name = "witch"
    category = Category.MINION
