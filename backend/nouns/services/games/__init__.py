"""Game domain services: the turn timer, word pool, scoring, rounds,
analytics and the coordinator that sequences them.

Everything here except ``scheduler`` is plain Python with no Flask imports,
so HTTP routes and socket handlers stay thin and the rules can be tested
without an app.
"""
from .coordinator import GameCoordinator

__all__ = ['GameCoordinator']
