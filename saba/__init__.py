"""Core pieces of a small web browser: URL parsing, a tiny JavaScript engine and computed styles."""

__version__ = "0.1.0"

__all__ = ["url", "js_token", "js_ast", "js_runtime", "computed_style"]