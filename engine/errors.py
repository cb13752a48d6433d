# engine/errors.py


class ParseFailure(RuntimeError):
    """Markup rejected by the parser. Never fatal: callers switch to the plain-text path."""


class Cancelled(Exception):
    """Caller's cancel signal fired before an external call; partial output is kept."""
