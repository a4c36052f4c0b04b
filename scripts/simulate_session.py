"""Run a complete ballot session with fake participants.

Generates voter names with faker using a fixed seed, walks the workflow
through every phase, casts one random vote per voter, tallies, and prints
the session snapshot as JSON.

Usage:
    python scripts/simulate_session.py
    python scripts/simulate_session.py --voters 25 --proposals 4 --method plurality
    python scripts/simulate_session.py -o session.json
"""

import argparse
import json
import random
import sys
from dataclasses import replace
from pathlib import Path

from faker import Faker

# Add the project root to the path so the script runs from a checkout
sys.path.insert(0, str(Path(__file__).parent.parent))

from ballot.config import BallotConfig  # noqa: E402
from ballot.session import BallotSession  # noqa: E402
from ballot.tally import get_all_tally_methods  # noqa: E402

SEED = 20260201
ADMIN = "administrator"


def generate_voters(count: int, seed: int) -> list[str]:
    """Generate count distinct fake voter names."""
    fake = Faker(["en_US", "en_GB", "de_DE", "fr_FR"])
    Faker.seed(seed)

    voters: list[str] = []
    used: set[str] = set()
    while len(voters) < count:
        name = fake.name()
        if name.lower() in used:
            continue
        used.add(name.lower())
        voters.append(name)
    return voters


def generate_proposals(count: int, seed: int) -> list[str]:
    """Generate count distinct short proposal descriptions."""
    fake = Faker()
    Faker.seed(seed)

    proposals: list[str] = []
    while len(proposals) < count:
        text = fake.sentence(nb_words=4).rstrip(".")
        if text not in proposals:
            proposals.append(text)
    return proposals


def run_simulation(
    num_voters: int,
    num_proposals: int,
    seed: int = SEED,
    config: BallotConfig | None = None,
) -> BallotSession:
    """Run every phase of a session and return it, tallied."""
    session = BallotSession(ADMIN, config)
    voters = generate_voters(num_voters, seed)
    proposals = generate_proposals(num_proposals, seed)
    rng = random.Random(seed)

    for voter in voters:
        session.register(ADMIN, voter)

    session.start_proposals_registration(ADMIN)
    for text in proposals:
        session.submit_proposal(rng.choice(voters), text)
    session.end_proposals_registration(ADMIN)

    session.start_voting_session(ADMIN)
    for voter in voters:
        session.vote(voter, rng.choice(proposals))
    session.end_voting_session(ADMIN)

    session.tally(ADMIN)
    return session


def main():
    methods = [m.key for m in get_all_tally_methods()]

    parser = argparse.ArgumentParser(
        description="Simulate a ballot session with fake voters")
    parser.add_argument("--voters", type=int, default=10,
                        help="Number of voters to register (default: 10)")
    parser.add_argument("--proposals", type=int, default=3,
                        help="Number of proposals to submit (default: 3)")
    parser.add_argument("--seed", type=int, default=SEED,
                        help=f"Random seed (default: {SEED})")
    parser.add_argument("--method", choices=methods, default=None,
                        help="Tally method (default: BALLOT_TALLY_METHOD or adjacent)")
    parser.add_argument("-o", "--output", default=None,
                        help="Write the JSON snapshot here instead of stdout")
    args = parser.parse_args()

    if args.voters < 1 or args.proposals < 1:
        parser.error("--voters and --proposals must be at least 1")

    config = BallotConfig.from_env()
    if args.method:
        config = replace(config, tally_method=args.method)

    session = run_simulation(args.voters, args.proposals, args.seed, config)
    snapshot = json.dumps(session.to_dict(), indent=2)

    winner = session.winning_proposal()
    print(f"Winner: {winner.description} ({winner.vote_count} votes)", file=sys.stderr)

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(snapshot, encoding="utf-8")
        print(f"Written to {output_path}", file=sys.stderr)
    else:
        print(snapshot)


if __name__ == "__main__":
    main()
