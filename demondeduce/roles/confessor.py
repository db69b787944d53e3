from demondeduce.core.model import Category
from demondeduce.core.statements import SelfStatusClaim

from . import Role, register_role
from .abilities import StatementOnly


@register_role
class Confessor(Role):
    """Always reports its own state: good, or dizzy when evil or impaired."""
    name = "confessor"
    category = Category.VILLAGER
    ability = StatementOnly(SelfStatusClaim)
    compelled = True
