from .executor import HttpExecutor, HttpOutcome

__all__ = ["HttpExecutor", "HttpOutcome"]
