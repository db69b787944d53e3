from demondeduce.core.constraints import (
    apply_constraints,
    check_world,
    must_tell_truth,
    seat_consistent,
    statement_permitted,
)
from demondeduce.core.csp import enumerate_worlds
from demondeduce.core.model import Status
from demondeduce.core.observations import Card
from demondeduce.core.statements import CountClaim, SelfStatus, SelfStatusClaim, TargetedBinaryClaim, Verdict
from demondeduce.core.world import World

from conftest import make_request


def shown_world(roles, displays, statuses=None):
    n = len(roles)
    statuses = statuses or [frozenset()] * n
    return World(tuple(roles), tuple(displays), tuple(statuses), (None,) * n)


def test_compelled_display_must_tell_truth():
    world = shown_world(
        ["confessor", "minion", "lover", "witch"],
        ["confessor", "confessor", None, "lover"],
    )
    assert must_tell_truth(world, 0)
    assert must_tell_truth(world, 1)
    # reliable without a compelled display
    assert must_tell_truth(world, 2)
    assert not must_tell_truth(world, 3)
    assert statement_permitted(world, 1, SelfStatusClaim(SelfStatus.DIZZY))
    assert not statement_permitted(world, 1, SelfStatusClaim(SelfStatus.GOOD))


def test_poisoned_confessor_reports_dizzy():
    world = shown_world(
        ["confessor", "poisoner", "lover"],
        ["confessor", None, None],
        [frozenset({Status.POISONED}), frozenset(), frozenset()],
    )
    assert statement_permitted(world, 0, SelfStatusClaim(SelfStatus.DIZZY))
    assert not statement_permitted(world, 0, SelfStatusClaim(SelfStatus.GOOD))


def test_reliable_lover_tells_truth():
    world = shown_world(["lover", "minion", "knight"], ["lover", "lover", None])
    assert statement_permitted(world, 0, CountClaim((1, 2), 1))
    assert not statement_permitted(world, 0, CountClaim((1, 2), 0))
    # the minion may say anything the lover could say
    assert statement_permitted(world, 1, CountClaim((0, 2), 0))
    assert statement_permitted(world, 1, CountClaim((0, 2), 2))


def test_liars_must_lie():
    world = shown_world(["lover", "minion", "knight"], ["lover", "lover", None])
    assert not statement_permitted(world, 1, CountClaim((0, 2), 0), liars_must_lie=True)
    assert statement_permitted(world, 1, CountClaim((0, 2), 1), liars_must_lie=True)


def test_statement_must_fit_displayed_role():
    world = shown_world(["lover", "minion", "knight"], ["lover", "lover", "knight"])
    # wrong targets for a lover at seat 0
    assert not statement_permitted(world, 0, CountClaim((0, 1), 1))
    assert not statement_permitted(world, 2, TargetedBinaryClaim(0, Verdict.GOOD))


def test_seat_consistent_checks_card():
    world = shown_world(["lover", "minion", "knight"], ["lover", "knight", None])
    assert seat_consistent(world, 0, Card(shown="lover", confirmed="lover"))
    assert not seat_consistent(world, 1, Card(shown="lover"))
    assert not seat_consistent(world, 1, Card(confirmed="knight"))
    assert seat_consistent(world, 2, Card())


def test_apply_constraints_filters_stream():
    cards = [
        Card(shown="confessor", says=SelfStatusClaim(SelfStatus.GOOD)),
        Card(shown="confessor", says=SelfStatusClaim(SelfStatus.GOOD)),
        Card(shown="confessor", says=SelfStatusClaim(SelfStatus.DIZZY)),
    ]
    request = make_request(["confessor", "confessor", "minion"], (2, 0, 1, 0), cards)
    kept = list(apply_constraints(enumerate_worlds(request), request))
    assert [w.roles for w in kept] == [("confessor", "confessor", "minion")]
    assert all(check_world(w, request) for w in kept)
