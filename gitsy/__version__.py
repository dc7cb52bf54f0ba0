"""Version information for gitsy."""

try:
    from gitsy._version import __version__
except ImportError:
    # Fallback for development without tags or when running from source
    __version__ = "0.1.0"
