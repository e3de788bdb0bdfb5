#!/usr/bin/env python3
"""
Example demonstrating the WarGame API with event listeners.

This script plays a computer vs computer game of War on the console and
prints a short summary of every round from the event bus.
"""

import asyncio
import argparse

from cardwar.adapters import CLIAdapter, DummyAdapter
from cardwar.api import WarGame
from cardwar.events import EngineEventType, EventPriority


async def main():
    # Parse command-line arguments
    parser = argparse.ArgumentParser(description="Watch a game of War.")
    parser.add_argument(
        "-i",
        "--interval",
        type=float,
        default=0.2,
        help="seconds between rounds (default: 0.2)",
    )
    parser.add_argument(
        "-n",
        "--names",
        nargs=2,
        default=["Alice", "Bob"],
        help="names of the two computers (default: Alice Bob)",
    )
    parser.add_argument("-s", "--seed", type=int, help="seed for the shuffle")
    parser.add_argument(
        "--silent", action="store_true", help="run in silent mode (summary only)"
    )
    args = parser.parse_args()

    # Create the adapter
    adapter = DummyAdapter() if args.silent else CLIAdapter()

    game = WarGame(
        adapter=adapter,
        config={
            "round_interval": args.interval,
            "player_names": {"auto-auto": args.names},
            "seed": args.seed,
        },
    )

    streaks = {name: 0 for name in args.names}

    def on_round_ended(data):
        winner = data.get("winner_name")
        for name in streaks:
            streaks[name] = streaks[name] + 1 if name == winner else 0
        if winner and streaks[winner] >= 3:
            print(f"{winner} is on a {streaks[winner]} round streak!")

    def on_game_ended(data):
        print(
            f"\nGame over after {data['rounds_played']} rounds: "
            f"{data['top_score']} - {data['bottom_score']}"
        )

    await game.initialize()
    game.on(EngineEventType.ROUND_ENDED, on_round_ended)
    game.on(EngineEventType.GAME_ENDED, on_game_ended, EventPriority.LOW)

    try:
        state = await game.play_to_completion()
        if state.winner is None:
            print("Nobody wins.")
        else:
            print(f"Winner: {state.player(state.winner).name}")
    finally:
        await game.shutdown()


if __name__ == "__main__":
    asyncio.run(main())
