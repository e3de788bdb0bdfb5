"""
Command line entry point for cardwar.

``play`` runs an interactive console game in any of the three modes;
``simulate`` plays many instant computer vs computer games and prints the
results.
"""

import argparse
import asyncio
import logging
from typing import List, Optional

from cardwar.adapters import CLIAdapter, DummyAdapter
from cardwar.api import WarGame
from cardwar.common.io_interface import (
    ConsoleIOInterface,
    IOInterface,
    LoggingIOInterface,
)
from cardwar.war.constants import DEFAULT_ROUND_INTERVAL, GameMode, Slot
from cardwar.war.state import GameStage

QUIT_COMMANDS = ("q", "quit", "menu")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="cardwar", description="Play the War card game in the console."
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="logging level for diagnostics (default: WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    play = subparsers.add_parser("play", help="play an interactive game")
    play.add_argument(
        "-m",
        "--mode",
        choices=[mode.value for mode in GameMode],
        default=GameMode.HUMAN_AUTO.value,
        help="game mode (default: human-auto)",
    )
    play.add_argument(
        "-i",
        "--interval",
        type=float,
        default=DEFAULT_ROUND_INTERVAL,
        help=f"seconds between automated rounds (default: {DEFAULT_ROUND_INTERVAL})",
    )
    play.add_argument("-s", "--seed", type=int, help="seed for the shuffle")
    play.add_argument("-l", "--log-file", help="append the game narration to this file")

    simulate = subparsers.add_parser(
        "simulate", help="play computer vs computer games instantly"
    )
    simulate.add_argument(
        "-g",
        "--games",
        type=int,
        default=1000,
        help="number of games to play (default: 1000)",
    )
    simulate.add_argument("-s", "--seed", type=int, help="seed for the shuffles")

    return parser.parse_args(argv)


def _waiting_slots(game: WarGame) -> List[Slot]:
    """Manual slots that have not revealed a card this round."""
    state = game.engine.state
    return [
        slot
        for slot, player in zip(Slot, state.players)
        if player.is_manual and player.current_card is None
    ]


def _prompt_for(game: WarGame) -> str:
    waiting = _waiting_slots(game)
    if len(waiting) == 1:
        name = game.engine.state.player(waiting[0]).name
        return f"{name}, press Enter to play (q for menu): "
    return "Who plays? 1 = top, 2 = bottom (q for menu): "


def _slot_from_input(game: WarGame, text: str) -> Optional[Slot]:
    text = text.strip().lower()
    if not text:
        waiting = _waiting_slots(game)
        return waiting[0] if len(waiting) == 1 else None
    try:
        return Slot.parse(text)
    except ValueError:
        return None


async def play(args: argparse.Namespace, io_interface: Optional[IOInterface] = None) -> None:
    io_interface = io_interface or ConsoleIOInterface()
    transcript = LoggingIOInterface(args.log_file) if args.log_file else None
    adapter = CLIAdapter(io_interface, transcript=transcript)
    game = WarGame(
        adapter, config={"round_interval": args.interval, "seed": args.seed}
    )

    await game.initialize()
    try:
        await game.select_mode(args.mode)
        if GameMode.parse(args.mode) is GameMode.AUTO_AUTO:
            await game.wait_for_conclusion()
            return

        while game.phase is GameStage.IN_PROGRESS:
            try:
                text = await io_interface.input_async(_prompt_for(game))
            except EOFError:
                await game.return_to_menu()
                break

            if text.strip().lower() in QUIT_COMMANDS:
                await game.return_to_menu()
                break

            slot = _slot_from_input(game, text)
            if slot is None or not await game.human_reveal(slot):
                io_interface.output("That seat cannot play right now.")
    finally:
        await game.shutdown()


async def simulate(args: argparse.Namespace, io_interface: Optional[IOInterface] = None) -> dict:
    io_interface = io_interface or ConsoleIOInterface()
    adapter = DummyAdapter()
    game = WarGame(adapter, config={"round_interval": 0, "seed": args.seed})

    await game.initialize()
    results = {"wins": [0, 0], "draws": 0, "scores": [0, 0], "rounds": 0}
    names = None
    try:
        for _ in range(args.games):
            state = await game.play_to_completion()
            adapter.clear()

            names = [player.name for player in state.players]
            if state.winner is None:
                results["draws"] += 1
            else:
                results["wins"][state.winner.value] += 1
            for index, player in enumerate(state.players):
                results["scores"][index] += player.score
            results["rounds"] += state.round - 1
    finally:
        await game.shutdown()

    games = max(args.games, 1)
    io_interface.output(f"Finished playing {args.games} games.")
    for index, name in enumerate(names or []):
        wins = results["wins"][index]
        io_interface.output(
            f"{name} won {wins} times ({wins / games * 100:.2f}%), "
            f"average score {results['scores'][index] / games:.2f}."
        )
    io_interface.output(
        f"Draws: {results['draws']} ({results['draws'] / games * 100:.2f}%)."
    )
    return results


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING))

    if args.command == "play":
        asyncio.run(play(args))
    else:
        asyncio.run(simulate(args))


if __name__ == "__main__":
    main()
