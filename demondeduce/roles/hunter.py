from demondeduce.core.model import Category
from demondeduce.core.statements import CountClaim, seat_distance

from . import Role, register_role
from .abilities import StatementOnly


@register_role
class Hunter(Role):
    """I am N cards away from the closest evil.

    Expressed as a count claim over the seats exactly N away: at least one
    of them is evil and nothing nearer is.
    """
    name = "hunter"
    category = Category.VILLAGER
    ability = StatementOnly(CountClaim)

    @staticmethod
    def statement_shape(statement, seat, seats):
        if not statement.targets or statement.count != 1:
            return False
        if not (statement.minimum and statement.none_closer):
            return False
        reach = seat_distance(seat, statement.targets[0], seats)
        ring = {s for s in range(seats) if s != seat and seat_distance(seat, s, seats) == reach}
        return set(statement.targets) == ring
