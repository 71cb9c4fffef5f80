"""LLM-powered commit message, changelog and PR description generator."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("commitgen")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.0.0-dev"
