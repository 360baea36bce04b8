"""bibview: browse, search and yank BibTeX entries from the terminal."""

__version__ = "0.1.0"
