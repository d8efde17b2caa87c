"""clishow - Command-line help documentation generator

Philosophy:
- Ruthless simplicity
- Brick architecture (self-contained modules)
- Records are immutable, emitters are the only format-specific piece

clishow walks the command tree of a Click application (or a static YAML/JSON
command description) and renders it as Markdown, HTML or a terminal overview.
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
