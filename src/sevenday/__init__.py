"""sevenday: weekly body-weight tracking against cut, bulk and maintain blocks."""

__version__ = "0.1.0"
