"""Teaching tools: words and languages, a Turing machine simulator, grade books and minimum spanning trees."""

__version__ = "0.1.0"

__all__ = ["__version__"]