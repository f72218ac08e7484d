"""Console prompt/read/print program.

The command surface is implemented with Typer and Rich for help and error
ergonomics, while prompts and the summary block stay byte-for-byte plain.
"""

__all__ = ["__version__"]

__version__ = "0.1.0"
