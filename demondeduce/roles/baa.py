from demondeduce.core.model import Category

from . import Role, register_role


@register_role
class Baa(Role):
    name = "baa"
    category = Category.DEMON
