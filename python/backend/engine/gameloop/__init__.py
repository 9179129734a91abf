from backend.engine.gameloop.loop import GameLoop, Platform

__all__ = ["GameLoop", "Platform"]
