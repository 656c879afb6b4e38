class ProgressError(Exception):
    """Base class for errors the course progress API reports to the client."""
    status_code = 500

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def to_dict(self):
        return {"error": self.message}


class ValidationError(ProgressError):
    status_code = 400


class NotFound(ProgressError):
    status_code = 404


class ProgressNotFound(NotFound):
    """No progress record for the (user, course) pair; the user never enrolled."""

    def to_dict(self):
        return {"success": False, "message": self.message}


class Conflict(ProgressError):
    status_code = 400
