class PatternError(Exception):
    """Base class for errors raised by the pattern examples."""


class TransportCreationError(PatternError):
    """A factory could not hand back a usable transport."""


class SingletonError(PatternError, TypeError):
    """The singleton was constructed or duplicated outside its accessor."""
