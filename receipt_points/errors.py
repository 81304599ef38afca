class ReceiptServiceError(Exception):
    """Base error rendered as a JSON ``{"error": ...}`` envelope."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ParseError(ReceiptServiceError):
    status_code = 400


class ReceiptValidationError(ReceiptServiceError):
    status_code = 400


class ReceiptNotFoundError(ReceiptServiceError):
    status_code = 404

    def __init__(self, message: str = "Receipt not found"):
        super().__init__(message)


class MethodNotAllowedError(ReceiptServiceError):
    status_code = 405

    def __init__(self, message: str = "Method not allowed"):
        super().__init__(message)


class UnsupportedMediaTypeError(ReceiptServiceError):
    status_code = 415

    def __init__(self, message: str = "Content-Type must be application/json"):
        super().__init__(message)
