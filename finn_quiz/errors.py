"""Errors raised while loading words, selecting them, or running a quiz.

All of them are fatal: the command line reports the message and exits.
"""


class QuizError(Exception):
    """Base class for every error the quiz reports to the user."""


class FileError(QuizError):
    """The word file is missing or cannot be read."""


class ParseError(QuizError):
    """The word file is not valid YAML or JSON."""


class LoadError(QuizError):
    """The document parsed but its shape or one of its entries is invalid."""


class ArgumentError(QuizError):
    """A command line value could not be interpreted."""


class InsufficientPoolError(QuizError):
    """Too few distinct wrong answers remain to build a multiple-choice question."""
