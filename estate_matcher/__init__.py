"""estate-matcher: investment analysis toolkit for real-estate agents."""

__version__ = "0.1.0"
