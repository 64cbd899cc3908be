"""Editorial news desk: weighted news-search prompt generation."""

__version__ = "0.1.0"
