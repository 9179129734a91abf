from backend.engine.gamechecker.checker import CheckResult, Checker, Invalid, Valid

__all__ = ["CheckResult", "Checker", "Invalid", "Valid"]
