class ServerError(Exception):
    """Base class for server-related errors"""

    def __init__(self, msg="Server error occurred", status_code=500):
        self.msg = msg
        self.status_code = status_code
        super().__init__(self.msg)


class InvalidRequestError(ServerError):
    """Raised when request is invalid"""

    def __init__(self, msg="Invalid request", status_code=400):
        super().__init__(msg=msg, status_code=status_code)


class ResourceNotFoundError(ServerError):
    """Raised when requested resource is not found"""

    def __init__(self, msg="Resource not found", status_code=404):
        super().__init__(msg=msg, status_code=status_code)


class ConflictError(ServerError):
    """Raised when a request conflicts with existing data"""

    def __init__(self, msg="Resource already exists", status_code=409):
        super().__init__(msg=msg, status_code=status_code)


class DatabaseError(ServerError):
    """Raised when a database operation fails"""

    def __init__(self, msg="Database operation failed", status_code=500):
        super().__init__(msg=msg, status_code=status_code)


class DatabaseIntegrityError(DatabaseError):
    """Raised when database integrity constraint is violated"""

    def __init__(self, msg="Database constraint violated", status_code=409):
        super().__init__(msg=msg, status_code=status_code)


class MigrationError(DatabaseError):
    """Raised when the schema could not be brought up to date"""

    def __init__(self, msg="Database migration failed", status_code=500):
        super().__init__(msg=msg, status_code=status_code)


class CalendarError(ServerError):
    """Base class for failures talking to the calendar service"""

    def __init__(self, msg="Calendar service error", status_code=502):
        super().__init__(msg=msg, status_code=status_code)


class AuthUrlUnavailable(CalendarError):
    """Raised when the calendar authorization URL cannot be retrieved"""

    def __init__(
        self, msg="Could not retrieve Google authentication URL", status_code=502
    ):
        super().__init__(msg=msg, status_code=status_code)


class CalendarExportError(CalendarError):
    """Raised when exporting tasks to the calendar fails"""

    def __init__(self, msg="Failed to export to Google Calendar", status_code=502):
        super().__init__(msg=msg, status_code=status_code)
