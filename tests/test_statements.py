import pytest

from demondeduce.core.errors import UnsupportedStatementError
from demondeduce.core.model import Alignment, Status
from demondeduce.core.statements import (
    CorruptionDistanceClaim,
    CountClaim,
    Direction,
    DirectionalClaim,
    RoleDistanceClaim,
    RoleIdentityClaim,
    SelfStatus,
    SelfStatusClaim,
    TargetedBinaryClaim,
    UnparsedClaim,
    Verdict,
    evaluate,
    is_supported,
    nearest_direction,
    neighbors,
    seat_distance,
)
from demondeduce.core.world import World


def make_world(roles, statuses=None):
    n = len(roles)
    statuses = statuses or [frozenset()] * n
    return World(tuple(roles), (None,) * n, tuple(statuses), (None,) * n)


@pytest.fixture
def world():
    # seat 1 is the minion, seat 4 the wretch
    return make_world(["confessor", "minion", "lover", "knight", "wretch"])


def test_seat_distance_wraps():
    assert seat_distance(0, 4, 5) == 1
    assert seat_distance(1, 3, 5) == 2
    assert seat_distance(2, 2, 5) == 0
    assert neighbors(0, 5) == (4, 1)


def test_directional(world):
    assert evaluate(DirectionalClaim(Direction.COUNTERCLOCKWISE), world, 2)
    assert evaluate(DirectionalClaim(Direction.EQUIDISTANT), world, 0)
    assert evaluate(DirectionalClaim(Direction.CLOCKWISE), world, 3)
    assert not evaluate(DirectionalClaim(Direction.CLOCKWISE), world, 2)


def test_directional_seeking_good(world):
    assert nearest_direction(world, 1, Alignment.GOOD) is Direction.EQUIDISTANT
    assert evaluate(DirectionalClaim(Direction.EQUIDISTANT, Alignment.GOOD), world, 1)


def test_self_status(world):
    assert evaluate(SelfStatusClaim(SelfStatus.GOOD), world, 0)
    assert not evaluate(SelfStatusClaim(SelfStatus.DIZZY), world, 0)
    assert evaluate(SelfStatusClaim(SelfStatus.DIZZY), world, 1)


def test_binary(world):
    assert evaluate(TargetedBinaryClaim(4, Verdict.EVIL), world, 0)
    assert not evaluate(TargetedBinaryClaim(4, Verdict.GOOD), world, 0)
    # the wretch registers evil but is still good and truthful
    assert evaluate(TargetedBinaryClaim(4, Verdict.TRUTHY), world, 0)
    assert evaluate(TargetedBinaryClaim(1, Verdict.LYING), world, 0)


def test_count(world):
    assert evaluate(CountClaim((4, 1), 2), world, 0)
    assert not evaluate(CountClaim((4, 1), 1), world, 0)
    assert evaluate(CountClaim((4, 1), 1, minimum=True), world, 0)


def test_count_targets_are_normalized():
    assert CountClaim((4, 1, 4), 1).targets == (1, 4)


def test_count_none_closer(world):
    assert evaluate(CountClaim((2, 4), 1, minimum=True, none_closer=True), world, 3)
    assert not evaluate(CountClaim((0, 1), 1, minimum=True, none_closer=True), world, 3)


def test_identity(world):
    assert evaluate(RoleIdentityClaim(2, "lover"), world, 0)
    assert not evaluate(RoleIdentityClaim(2, "knight"), world, 0)


def test_distance(world):
    assert evaluate(RoleDistanceClaim("minion", 2), world, 3)
    assert not evaluate(RoleDistanceClaim("minion", 1), world, 3)
    assert not evaluate(RoleDistanceClaim("witch", 1), world, 3)


def test_unparsed_claim_has_no_rule(world):
    claim = UnparsedClaim("the bard says something")
    assert not is_supported(claim)
    with pytest.raises(UnsupportedStatementError):
        evaluate(claim, world, 0)


def test_poisoned_seat_is_unreliable():
    world = make_world(
        ["confessor", "minion", "lover"],
        [frozenset({Status.POISONED}), frozenset(), frozenset()],
    )
    assert not world.is_reliable(0)
    assert evaluate(SelfStatusClaim(SelfStatus.DIZZY), world, 0)
    assert evaluate(TargetedBinaryClaim(0, Verdict.LYING), world, 2)


def test_corruption_distance():
    world = make_world(
        ["bard", "minion", "lover", "knight", "pooka"],
        [frozenset(), frozenset(), frozenset(), frozenset({Status.CORRUPTED}), frozenset()],
    )
    assert evaluate(CorruptionDistanceClaim(2), world, 0)
    assert not evaluate(CorruptionDistanceClaim(1), world, 0)
    assert not evaluate(CorruptionDistanceClaim(None), world, 0)
    # the impaired seat does not measure itself
    assert evaluate(CorruptionDistanceClaim(None), world, 3)

    clean = make_world(["bard", "minion", "lover"])
    assert evaluate(CorruptionDistanceClaim(None), clean, 0)
