"""
Errors raised when loading or saving answer files.
"""


class AnswerStoreError(Exception):
    """Base class for answer file errors."""

    action = "load"
    reason = "failed"

    def __init__(self, path, detail=None):
        self.path = str(path)
        self.detail = detail
        msg = f'Impossible to {self.action} answers: file "{self.path}" {self.reason}'
        if detail:
            msg += f" ({detail})"
        super().__init__(msg)


class AnswerFileNotFound(AnswerStoreError):
    reason = "not found"


class AnswerFileUnreadable(AnswerStoreError):
    reason = "is unreadable"


class AnswerFileEmpty(AnswerStoreError):
    reason = "is empty"


class AnswerFileInvalid(AnswerStoreError):
    reason = "does not contain a valid JSON object"


class AnswerFileWriteFailed(AnswerStoreError):
    action = "save"
    reason = "could not be written"
