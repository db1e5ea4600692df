"""Table-driven lexer, token types and syntax-tree model for the HULK language."""

__version__ = "0.1.0"
__all__ = ["scanner", "syntax_tree", "tokens"]