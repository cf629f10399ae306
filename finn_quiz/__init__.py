"""
Finnish vocabulary quiz

Drills a YAML or JSON word list in the terminal, by typed recall or
multiple choice, and saves the words you missed for the next round.
"""

from . import structured
from . import console
from . import words
from . import matching
from . import exercises
from . import quiz
from . import report

__version__ = "1.0.0"
__all__ = ["structured", "console", "words", "matching", "exercises", "quiz", "report"]
