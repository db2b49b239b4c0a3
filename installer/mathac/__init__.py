"""Math AutoCorrect installer.

Synchronizes a curated table of math-symbol shorthands (``\\infinity``,
``\\union``, ...) into Word's Math AutoCorrect entries.
"""

__version__ = "0.1.0"
