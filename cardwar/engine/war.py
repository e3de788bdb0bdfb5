"""
War card game engine implementation.

This module provides the WarEngine class, the game controller for War. It owns
the live session, drives rounds according to the selected mode (a repeating
timer for computer vs computer, human reveals otherwise) and detects the end
of the game.

All changes to a session happen synchronously inside one step (a timer tick
or a single human action). Events emitted during the step are collected and
handed to the platform adapter once the step is complete.
"""

from typing import Dict, Any, List, Optional, Sequence, Tuple
import asyncio
import logging
import random
import time

from cardwar.adapters import PlatformAdapter
from cardwar.common.card import Card
from cardwar.common.deck import build_shuffled_deck, partition
from cardwar.engine.base import CardwarEngine
from cardwar.events import EngineEventType
from cardwar.war.constants import (
    DEFAULT_ROUND_INTERVAL,
    MODE_SEATS,
    GameMode,
    Slot,
)
from cardwar.war.state import GameStage, GameState
from cardwar.war.transitions import StateTransitionEngine

logger = logging.getLogger(__name__)


class WarEngine(CardwarEngine):
    """
    Game controller for War.

    The engine moves between three phases: selecting a mode (no session),
    a game in progress, and a concluded game. ``select_mode`` starts a new
    session, ``human_reveal`` feeds human actions in, and ``return_to_menu``
    tears everything down.
    """

    def __init__(self, adapter: PlatformAdapter, config: Dict[str, Any] = None):
        """
        Initialize the War engine.

        Args:
            adapter: Platform adapter to use for rendering
            config: Configuration options. Recognised keys are
                ``round_interval`` (seconds between automated rounds),
                ``player_names`` (mapping of mode value to a pair of names)
                and ``seed`` (seed for a dedicated random source).
        """
        super().__init__(adapter, config)
        self.state: Optional[GameState] = None

        self.round_interval = float(
            self.config.get("round_interval", DEFAULT_ROUND_INTERVAL)
        )
        self.player_names = self.config.get("player_names", {})
        seed = self.config.get("seed")
        self.rng = random.Random(seed) if seed is not None else None

        self._scheduler: Optional[asyncio.Task] = None
        self._collecting = False
        self._outbox: List[Tuple[str, Dict[str, Any]]] = []
        self._unsubscribe = self.event_bus.on_any(self._collect_event)

    @property
    def phase(self) -> GameStage:
        """Current phase of the mode state machine."""
        if self.state is None:
            return GameStage.SELECTING_MODE
        if self.state.finished:
            return GameStage.CONCLUDED
        return GameStage.IN_PROGRESS

    @property
    def scheduler_active(self) -> bool:
        return self._scheduler is not None and not self._scheduler.done()

    async def initialize(self) -> None:
        """
        Initialize the engine and its adapter.
        """
        await super().initialize()

        self.event_bus.emit(
            EngineEventType.ENGINE_INIT,
            {
                "engine_type": "war",
                "config": self.config,
                "timestamp": time.time(),
            },
        )

    async def shutdown(self) -> None:
        """
        Tear down any live session and shut the adapter down.
        """
        await self.return_to_menu()
        self._unsubscribe()

        self.event_bus.emit(EngineEventType.ENGINE_SHUTDOWN, {"timestamp": time.time()})

        await super().shutdown()

    async def select_mode(
        self,
        mode,
        decks: Optional[Tuple[Sequence[Card], Sequence[Card]]] = None,
    ) -> GameState:
        """
        Start a new game in the given mode, discarding any previous one.

        Args:
            mode: A GameMode or its value ("auto-auto", "human-auto", "human-human")
            decks: Optional pair of decks to deal instead of a shuffled deck

        Returns:
            The new game state

        Raises:
            ValueError: If the mode is unknown or a name override is not a pair
        """
        mode = GameMode.parse(mode)
        names = self._seat_names(mode)
        self._teardown()
        self._run_step(self._start_session, mode, names, decks)

        if mode is GameMode.AUTO_AUTO:
            self._scheduler = asyncio.create_task(self._run_scheduler(self.state.id))

        await self._flush()
        logger.info("Started %s game %s", mode.value, self.state.id)
        return self.state

    async def human_reveal(self, slot) -> bool:
        """
        Play the next card for a human-controlled slot.

        The action is ignored when there is no game in progress, the slot is
        not under manual control, or the slot already revealed this round.

        Args:
            slot: A Slot, its index, or "first"/"second"

        Returns:
            True if the action was accepted
        """
        slot = Slot.parse(slot)
        state = self.state
        if state is None or state.finished:
            logger.debug("Ignoring reveal for %s: no game in progress", slot.name)
            return False

        player = state.player(slot)
        if not player.is_manual:
            logger.debug("Ignoring reveal for automated slot %s", slot.name)
            return False
        if player.current_card is not None:
            logger.debug("Ignoring duplicate reveal for %s", slot.name)
            return False

        self._run_step(self._human_reveal, slot)
        await self._flush()
        return True

    async def return_to_menu(self) -> None:
        """
        Cancel any scheduled round and discard the session.
        """
        self._teardown()
        await self._flush()

    async def play_automated_round(self) -> None:
        """
        Play one timer tick of a computer vs computer game immediately.
        """
        if self.state is None or self.state.finished:
            return
        self._run_step(self._play_automated_round)
        await self._flush()

    async def render_state(self) -> None:
        """
        Render the current game state.
        """
        if self.state is None:
            return
        await self.adapter.render_game_state(self.state.to_adapter_format())

    def _seat_names(self, mode: GameMode) -> Sequence[str]:
        names = self.player_names.get(mode.value)
        if not names:
            return [name for name, _ in MODE_SEATS[mode]]
        if isinstance(names, str) or len(names) != 2:
            raise ValueError(
                f"player_names for {mode.value} must hold exactly two names, "
                f"got {names!r}"
            )
        return list(names)

    # Steps. Each runs synchronously from start to finish.

    def _start_session(
        self,
        mode: GameMode,
        names: Sequence[str],
        decks: Optional[Tuple[Sequence[Card], Sequence[Card]]],
    ) -> None:
        if decks is None:
            decks = partition(build_shuffled_deck(self.rng))

        seats = MODE_SEATS[mode]
        first, second = [
            StateTransitionEngine.create_player(name, control, deck)
            for name, (_, control), deck in zip(names, seats, decks)
        ]

        self.state = StateTransitionEngine.new_game(mode, first, second)

        self.event_bus.emit(
            EngineEventType.GAME_STARTED,
            {"game_id": self.state.id, "mode": mode.value, "timestamp": time.time()},
        )
        self._log(f"Starting {mode.label} game.")
        if mode is GameMode.AUTO_AUTO:
            self._log("Both computers are playing automatically. Watch the showdown!")
        elif mode is GameMode.HUMAN_AUTO:
            self._log(
                "Play your card when ready. The computer will respond automatically."
            )

    def _play_automated_round(self) -> None:
        if self.state.any_deck_empty:
            self._conclude()
            return

        for slot in Slot:
            self.state, card = StateTransitionEngine.draw_card(self.state, slot)
            self._log(f"{self.state.player(slot).name} plays {card}.")

        self._resolve()

    def _human_reveal(self, slot: Slot) -> None:
        player = self.state.player(slot)
        self.event_bus.emit(
            EngineEventType.PLAYER_ACTION,
            {
                "game_id": self.state.id,
                "slot": slot.name.lower(),
                "player_name": player.name,
                "action": "reveal",
            },
        )

        self.state, card = StateTransitionEngine.draw_card(self.state, slot)
        if card is None:
            self._conclude()
            return
        self._log(f"{player.name} reveals {card}.")

        if self.state.mode is GameMode.HUMAN_AUTO:
            self._computer_response(slot.opponent)
        elif self.state.both_revealed:
            self._resolve()

    def _computer_response(self, slot: Slot) -> None:
        player = self.state.player(slot)
        if player.is_manual or player.current_card is not None:
            return

        self.state, card = StateTransitionEngine.draw_card(self.state, slot)
        if card is None:
            self._conclude()
            return
        self._log(f"{player.name} responds with {card}.")
        self._resolve()

    def _resolve(self) -> None:
        self.state, result = StateTransitionEngine.resolve_round(self.state)
        if result is None:
            return

        if result.winner is None:
            self._log("It's a tie. No points awarded.")
        else:
            self._log(f"{self.state.player(result.winner).name} wins the round!")

        if self.state.any_deck_empty:
            self._conclude()

    def _conclude(self) -> None:
        if self.state is None or self.state.finished:
            return

        self._cancel_scheduler()
        self.state = StateTransitionEngine.conclude_game(self.state)

        first, second = self.state.players
        self._log(
            f"Final Score → {first.name}: {first.score} | {second.name}: {second.score}"
        )
        if self.state.winner is None:
            self._log("The game ends in a draw.")
        else:
            self._log(f"{self.state.player(self.state.winner).name} wins the game!")
        logger.info("Game %s concluded after %d rounds", self.state.id, self.state.round - 1)

    def _teardown(self) -> None:
        # The scheduler goes first so no tick can touch a discarded session
        self._cancel_scheduler()
        if self.state is None:
            return

        state, self.state = self.state, None
        self._run_step(
            self.event_bus.emit,
            EngineEventType.GAME_ABANDONED,
            {"game_id": state.id, "finished": state.finished, "timestamp": time.time()},
        )
        logger.info("Discarded game %s", state.id)

    def _log(self, message: str) -> None:
        self.event_bus.emit(
            EngineEventType.LOG_MESSAGE,
            {"game_id": self.state.id, "message": message, "timestamp": time.time()},
        )

    # Scheduling and event delivery

    async def _run_scheduler(self, game_id: str) -> None:
        """Play an automated round every ``round_interval`` seconds."""
        while True:
            await asyncio.sleep(self.round_interval)
            if not self._is_live(game_id):
                logger.debug("Stale tick for game %s dropped", game_id)
                return

            self._run_step(self._play_automated_round)
            await self._flush()
            if not self._is_live(game_id):
                return

    def _is_live(self, game_id: str) -> bool:
        return (
            self.state is not None
            and self.state.id == game_id
            and not self.state.finished
        )

    def _cancel_scheduler(self) -> None:
        task, self._scheduler = self._scheduler, None
        if task is None or task.done():
            return
        try:
            current = asyncio.current_task()
        except RuntimeError:
            current = None
        # A tick that concludes the game finishes on its own
        if task is not current:
            task.cancel()

    def _run_step(self, step, *args) -> None:
        self._collecting = True
        try:
            step(*args)
        finally:
            self._collecting = False

    def _collect_event(self, event: Tuple[str, Dict[str, Any]]) -> None:
        if self._collecting:
            self._outbox.append(event)

    async def _flush(self) -> None:
        """Deliver the events of the last step to the adapter, then render."""
        events, self._outbox = self._outbox, []
        for event_type, data in events:
            try:
                await self.adapter.notify_game_event(event_type, data)
            except Exception as e:
                logger.error(
                    f"Adapter failed to handle {event_type}: {e}", exc_info=True
                )
        try:
            await self.render_state()
        except Exception as e:
            logger.error(f"Adapter failed to render the game: {e}", exc_info=True)
