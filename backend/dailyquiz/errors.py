"""Error taxonomy shared by the quiz services and HTTP routes."""


class QuizError(Exception):
    status_code = 500

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def to_dict(self):
        return {'error': self.message}


class ValidationError(QuizError):
    """The request is missing a required field or carries a malformed one."""
    status_code = 400


class CollaboratorError(QuizError):
    """The record store failed; the message is passed through to the client."""
    status_code = 500
