"""
csvcursor core library.

This package contains the core functionality:
- tokenizer: cursor-driven field extraction and typed accessors
"""

__all__: list[str] = []
