#!/usr/bin/env python3
"""
Minimal CLI for simulating Whale-opoly sessions.

This script demonstrates the game engine by running a seeded four-seat game
with simple AI players and printing the activity feed as it happens.
"""

import argparse
import json
import logging
from typing import List, Optional

from whaleopoly.agents import Agent, GreedyAgent, RandomAgent
from whaleopoly.config import GameConfig
from whaleopoly.engine import GameEngine
from whaleopoly.game import GameState
from whaleopoly.player import default_players
from whaleopoly.rules import ActionType

logger = logging.getLogger(__name__)

MAX_ACTIONS_PER_TURN = 50


def print_game_state(game: GameState) -> None:
    """Print current standings."""
    print("\n" + "=" * 60)
    print(f"TURN {game.turn_number}")
    print("=" * 60)

    for seat in game.seats:
        player = game.players[seat.player_id]
        jail = game.jail.remaining(player.player_id)
        if jail:
            status = f"IN JAIL ({jail} turns)"
        else:
            status = f"at {game.board.get_space(player.position).name}"
        owned = len(game.ledger.owned_by(player.player_id))
        print(f"{player.name}: ${player.cash} | {owned} properties | {status}")


def build_agents(agent_type: str, seed: Optional[int]) -> List[Agent]:
    if agent_type == "random":
        return [RandomAgent(p.player_id, p.name, seed or 0) for p in default_players()]
    return [GreedyAgent(p.player_id, p.name) for p in default_players()]


def play_turn(engine: GameEngine, agent: Agent, verbose: bool = True) -> int:
    """Let one agent act until it ends its turn. Returns actions taken."""
    seen = engine.get_state().activity.total_logged
    actions_taken = 0
    while actions_taken < MAX_ACTIONS_PER_TURN:
        legal_actions = engine.legal_actions()
        if not legal_actions:
            break
        action = agent.choose_action(engine.get_state(), legal_actions)
        engine.apply(action)
        actions_taken += 1
        if action.action_type == ActionType.END_TURN:
            break
    else:
        # Runaway agent: close any open card and move on
        if engine.get_state().pending_card is not None:
            engine.apply_pending_card()
        engine.end_turn()

    if verbose:
        game = engine.get_state()
        # Entries are newest first; print this turn's in play order
        new_entries = game.activity.get_recent_entries(game.activity.total_logged - seen)
        for entry in reversed(new_entries):
            print(f"  [{entry.timestamp}] {entry.severity.value:<4} {entry.title}: {entry.body}")
    return actions_taken


def simulate_game(
    agent_type: str = "greedy",
    seed: Optional[int] = None,
    turns: int = 40,
    verbose: bool = True,
    snapshot_file: Optional[str] = None,
    remote: bool = False,
) -> GameState:
    """
    Simulate a Whale-opoly session for a fixed number of turns.

    Args:
        agent_type: Type of AI ('random' or 'greedy')
        seed: Random seed for reproducibility
        turns: Number of turns (single seats) to play
        verbose: Whether to print the activity feed
        snapshot_file: Optional path to write the final JSON snapshot
        remote: Consult the remote authority configured via WHALEOPOLY_* settings
    """
    config = GameConfig(seed=seed)
    if remote:
        engine = GameEngine.from_settings(config=config, players=default_players())
        if engine.remote is None:
            logger.warning("No WHALEOPOLY_REMOTE_BASE_URL set, playing locally")
    else:
        engine = GameEngine(config=config, players=default_players())
    agents = {agent.player_id: agent for agent in build_agents(agent_type, seed)}

    if verbose:
        print(f"Starting Whale-opoly with {agent_type} agents, seed={seed}")

    for _ in range(turns):
        game = engine.get_state()
        current = game.get_current_player()
        if verbose:
            print(f"\n-- {current.name} (turn {game.turn_number}) --")
        play_turn(engine, agents[current.player_id], verbose)
        if verbose and (game.turn_number + 1) % 10 == 0:
            print_game_state(engine.get_state())

    if snapshot_file:
        with open(snapshot_file, "w") as f:
            json.dump(engine.snapshot(), f, indent=2)

    return engine.get_state()


def main():
    """Main entry point for CLI."""
    parser = argparse.ArgumentParser(description="Simulate a Whale-opoly game")
    parser.add_argument(
        "--agent",
        type=str,
        default="greedy",
        choices=["random", "greedy"],
        help="AI agent type",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--turns", type=int, default=40, help="Number of turns to play")
    parser.add_argument("--quiet", action="store_true", help="Reduce output verbosity")
    parser.add_argument("--snapshot", type=str, default=None, help="Write final JSON snapshot here")
    parser.add_argument("--remote", action="store_true", help="Use the remote authority from WHALEOPOLY_* settings")
    parser.add_argument("--log-level", type=str, default="WARNING", help="Diagnostic log level")

    args = parser.parse_args()
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    game = simulate_game(
        agent_type=args.agent,
        seed=args.seed,
        turns=args.turns,
        verbose=not args.quiet,
        snapshot_file=args.snapshot,
        remote=args.remote,
    )
    print_game_state(game)


if __name__ == "__main__":
    main()
