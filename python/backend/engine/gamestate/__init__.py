from backend.engine.gamestate.state import EndGameStats, GameState

__all__ = ["EndGameStats", "GameState"]
