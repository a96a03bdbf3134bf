"""
Oneliners: a tiny personal snippet store.

Save single-line snippets to ~/.oneliners, then:
- List what you have stored
- Search by substring
- Copy a match to the system clipboard
"""

__version__ = "0.1.0"
