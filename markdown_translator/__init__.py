"""
Markdown to HTML converter with structure-preserving Japanese ⇄ English translation
"""

__version__ = "0.1.0"
