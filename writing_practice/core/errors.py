# writing_practice/core/errors.py


class WritingPracticeError(Exception):
    """
    Base class for every error the evaluation pipeline knows about.
    `status_code` is the HTTP status the API layer renders it with.
    """

    status_code: int = 500
    default_message: str = "Internal error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


# ---------------- Client input ----------------
class InvalidCategoryError(WritingPracticeError):
    status_code = 400
    default_message = "Invalid category"


class EmptyAnswerError(WritingPracticeError):
    status_code = 400
    default_message = "Answer cannot be empty"


# ---------------- Question banks ----------------
class NoQuestionsFoundError(WritingPracticeError):
    status_code = 404
    default_message = "No questions found in file"


class StorageUnavailableError(WritingPracticeError):
    status_code = 500
    default_message = "Failed to load question"


# ---------------- Grading path (recovered by the fallback grader) ----------------
class GradingUnavailableError(WritingPracticeError):
    status_code = 503
    default_message = "Grading service unavailable"


class MalformedGradingOutputError(WritingPracticeError):
    status_code = 502
    default_message = "Grading service returned malformed output"

    def __init__(self, message: str = None, raw: str = ""):
        super().__init__(message)
        self.raw = raw
