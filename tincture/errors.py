class TinctureError(Exception):
    """Base class for errors raised by tincture."""


class ParseError(TinctureError, ValueError):
    """A string did not match any known color notation."""

    def __init__(self, reason: str, input: object) -> None:
        self.reason = reason
        self.input = input
        super().__init__(f"{reason}: {input!r}")


class RangeError(TinctureError, ValueError):
    """A channel or argument is outside of anything that can be normalised."""


class UnsupportedMethodError(TinctureError, ValueError):
    """Requested color difference method is not implemented."""


class ParseWarning(UserWarning):
    """Emitted when a literal could not be parsed and a fallback color was used."""
