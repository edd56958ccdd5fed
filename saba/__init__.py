"""Small web browser engine: URLs, HTTP responses, DOM, styles, layout and a tiny JavaScript interpreter."""

__version__ = "0.1.0"