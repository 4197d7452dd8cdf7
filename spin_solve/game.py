"""
Spin & Solve - Session Factory

Wires settings, the phrase library and the engine together for a host UI.
"""

import logging
import random

from spin_solve.config.settings import Settings, get_settings
from spin_solve.engine.session import GameSession, RoundRules
from spin_solve.engine.wheel import Wheel
from spin_solve.events.dispatcher import EventDispatcher
from spin_solve.phrases.library import PhraseLibrary

logger = logging.getLogger(__name__)


def load_library(settings: Settings, rng: random.Random | None = None) -> PhraseLibrary:
    """Use the configured phrase file, or the built-in phrases when unset."""
    if settings.phrase_file is not None:
        return PhraseLibrary.from_json(settings.phrase_file, rng=rng)
    return PhraseLibrary.default(rng=rng)


def create_session(
    settings: Settings | None = None,
    *,
    library: PhraseLibrary | None = None,
    events: EventDispatcher | None = None,
    rng: random.Random | None = None,
) -> GameSession:
    """Build a GameSession configured from settings.

    Args:
        settings: Defaults to the cached environment settings.
        library: Overrides the configured phrase library.
        events: Dispatcher to publish on; a new one is created if omitted.
        rng: Shared random source for the wheel and phrase picks.
    """
    settings = settings or get_settings()
    library = library or load_library(settings, rng=rng)
    wheel = Wheel.from_labels(
        settings.wheel_segments,
        full_rotations=settings.full_rotations,
        rng=rng,
    )
    logger.debug("Creating session with %d wheel segments", wheel.num_segments)
    return GameSession(
        library,
        rules=RoundRules.from_settings(settings),
        wheel=wheel,
        events=events,
    )
