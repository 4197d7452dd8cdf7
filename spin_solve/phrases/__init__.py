"""
Spin & Solve Phrase Library.

Static and file-backed phrase pools for each difficulty tier.
"""

from spin_solve.phrases.library import PhraseLibrary
from spin_solve.phrases.models import PhraseBook, PhraseRecord

__all__ = [
    "PhraseBook",
    "PhraseLibrary",
    "PhraseRecord",
]
