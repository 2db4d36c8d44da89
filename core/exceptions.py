"""Custom exceptions for Structify"""


class StructifyError(Exception):
    """Base exception for all Structify errors"""
    pass


class ValidationError(StructifyError):
    """Malformed input or schema table"""
    def __init__(self, message: str, row: int = None, column: int = None):
        super().__init__(message)
        self.row = row
        self.column = column


class CredentialMissingError(StructifyError):
    """No API key stored"""
    pass


class LLMError(StructifyError):
    """Error in LLM communication"""
    def __init__(self, message: str, model: str = None):
        super().__init__(message)
        self.model = model


class ApiError(LLMError):
    """Transport failure or non-success HTTP status"""
    def __init__(self, message: str, status: int = None, body: str = None, model: str = None):
        super().__init__(message, model=model)
        self.status = status
        self.body = body


class RefusalError(LLMError):
    """The model declined to answer"""
    def __init__(self, message: str, refusal: str = None, model: str = None):
        super().__init__(message, model=model)
        self.refusal = refusal


class MalformedResponseError(LLMError):
    """Response envelope is missing the expected content"""
    def __init__(self, message: str, payload: str = None, model: str = None):
        super().__init__(message, model=model)
        self.payload = payload


class ParseError(StructifyError):
    """No usable JSON in a model reply"""
    def __init__(self, message: str, raw=None):
        super().__init__(f"{message}\nOutput received: {raw}")
        self.raw = raw


class FileParseError(StructifyError):
    """Error reading a table file"""
    def __init__(self, message: str, file_path: str = None):
        super().__init__(message)
        self.file_path = file_path


# Failures that belong to a single input row
ROW_ERRORS = (LLMError, ParseError)
