"""Client version and user agent."""

__version__ = "0.1.0"

USER_AGENT = f"Algolia for Python {__version__}"

__all__ = ["USER_AGENT", "__version__"]
