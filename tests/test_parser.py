import json

import pytest

from demondeduce.core.config import Distinct, SolverOptions
from demondeduce.core.errors import ConfigurationError
from demondeduce.core.model import Alignment, Counts
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
)
from demondeduce.io import cli
from demondeduce.io.parser import load_puzzle, parse_puzzle, parse_statement


def test_load_puzzle1(data_dir):
    puzzle = load_puzzle(data_dir / "puzzle1.yaml")
    assert puzzle.seats == 5
    assert "Lover" in puzzle.deck
    assert puzzle.counts == Counts(4, 0, 1, 0)
    assert puzzle.cards[0].shown == "lover"
    assert puzzle.cards[0].says == CountClaim((1, 4), 1)
    assert [c.shown for c in puzzle.cards[2:]] == [None, None, None]
    assert puzzle.solver_options().liars_must_lie


def test_load_puzzle2(data_dir):
    puzzle = load_puzzle(data_dir / "puzzle2.yaml")
    assert puzzle.seats == 3
    assert puzzle.counts == Counts(2, 0, 1, 0)
    assert puzzle.cards[0].confirmed == "enlightened"
    assert puzzle.cards[0].says == DirectionalClaim(Direction.CLOCKWISE, Alignment.EVIL)
    assert puzzle.options == {}


def test_every_claim_kind(data_dir):
    puzzle = load_puzzle(data_dir / "claims.yaml")
    says = [c.says for c in puzzle.cards]
    assert says[0] == SelfStatusClaim(SelfStatus.DIZZY)
    assert says[1] == TargetedBinaryClaim(0, Verdict.GOOD)
    assert says[2] == CountClaim((0, 4), 1, minimum=True, none_closer=True)
    assert says[3] == RoleIdentityClaim(1, "Gemcrafter")
    assert says[4] == RoleDistanceClaim("witch", 2)
    assert isinstance(says[5], UnparsedClaim)
    assert says[6] is None

    options = puzzle.solver_options(workers=4, max_worlds=None)
    assert options.workers == 4
    assert options.max_worlds == 1000


def test_parse_statement():
    assert parse_statement(None) is None
    assert parse_statement("?") is None
    assert parse_statement({"claim": "direction", "direction": "equidistant", "seeks": "good"}) == \
        DirectionalClaim(Direction.EQUIDISTANT, Alignment.GOOD)
    assert parse_statement({"claim": "whisper", "text": "hi"}) == UnparsedClaim("{'claim': 'whisper', 'text': 'hi'}")
    with pytest.raises(ConfigurationError):
        parse_statement({"claim": "binary", "target": 1, "verdict": "sneaky"})
    with pytest.raises(ConfigurationError):
        parse_statement({"claim": "count", "targets": [1, 2], "count": 1, "minimum": "false"})
    assert parse_statement({"claim": "corruption", "distance": "none"}) == CorruptionDistanceClaim(None)
    assert parse_statement({"claim": "corruption", "distance": None}) == CorruptionDistanceClaim(None)
    assert parse_statement({"claim": "corruption", "distance": 2}) == CorruptionDistanceClaim(2)


def test_malformed_puzzles(data_dir):
    with pytest.raises(ConfigurationError):
        load_puzzle(data_dir / "bad_claim.yaml")
    with pytest.raises(ConfigurationError):
        load_puzzle(data_dir / "broken.yaml")
    with pytest.raises(ConfigurationError):
        load_puzzle(data_dir / "bad_options.yaml").solver_options()
    with pytest.raises(ConfigurationError):
        parse_puzzle({"deck": ["lover"]})
    with pytest.raises(ConfigurationError):
        parse_puzzle({"deck": ["lover"], "counts": [1, 0]})
    with pytest.raises(ConfigurationError):
        parse_puzzle(["lover"])


def test_solver_options_from_mapping():
    options = SolverOptions.from_mapping({"distinct": "worlds", "workers": "3", "time_limit": 2})
    assert options.distinct is Distinct.WORLDS
    assert options.workers == 3
    assert options.time_limit == 2.0
    with pytest.raises(ConfigurationError):
        SolverOptions.from_mapping({"strict": "yes"})
    with pytest.raises(ConfigurationError):
        SolverOptions.from_mapping({"workers": 0})
    with pytest.raises(ConfigurationError):
        SolverOptions.from_mapping({"distinct": "seats"})


def test_cli_json(data_dir, capsys):
    assert cli.main([str(data_dir / "puzzle1.yaml"), "--json", "-q"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["status"] == "solved"
    assert data["assignments"] == [
        {"roles": ["lover", "lover", "confessor", "confessor", "minion"], "worlds": 1}
    ]
    assert data["possible"]["4"] == [{"role": "minion", "category": "minion"}]


def test_cli_text(data_dir, capsys):
    assert cli.main([str(data_dir / "puzzle1.yaml"), "--workers", "2"]) == 0
    out = capsys.readouterr().out
    assert "Found 1 solution(s)" in out
    assert "Position 4: minion (minion)" in out


def test_cli_contradictory(data_dir, capsys):
    assert cli.main([str(data_dir / "puzzle2.yaml")]) == 1
    assert "No solutions found" in capsys.readouterr().out


def test_cli_errors(data_dir, capsys):
    assert cli.main([str(data_dir / "missing.yaml")]) == 2
    assert cli.main([str(data_dir / "bad_claim.yaml")]) == 2
    assert cli.main([str(data_dir / "bad_options.yaml")]) == 2
    assert "error:" in capsys.readouterr().err


def test_to_request(data_dir):
    request, caveats = load_puzzle(data_dir / "claims.yaml").to_request()
    assert request.seats == 7
    assert request.deck[0] == "confessor"
    assert request.cards[3].says == RoleIdentityClaim(1, "gemcrafter")
    assert request.cards[5].says is None
    assert len(caveats) == 1


def test_cli_json_worlds(data_dir, capsys):
    assert cli.main([str(data_dir / "puzzle1.yaml"), "--json", "--worlds", "-q"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert len(data["worlds"]) == 1
    world = data["worlds"][0]
    assert world[0] == {"role": "lover", "alignment": "good", "statuses": [], "shown": "lover"}
    assert world[4] == {"role": "minion", "alignment": "evil", "statuses": [], "shown": None}
