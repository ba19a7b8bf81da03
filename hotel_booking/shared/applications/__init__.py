from .outcome import Outcome, OutcomeKind

__all__ = ["Outcome", "OutcomeKind"]
