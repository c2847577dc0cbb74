class IecsError(Exception):
    """Base error. Every failure surfaced to the operator derives from this."""

    def __init__(self, message, stage=None, cause=None):
        super().__init__(message)
        self.message = message
        self.stage = stage
        self.cause = cause

    def __str__(self):
        return self.message


class NotFound(IecsError):
    pass


class EmptyResult(IecsError):
    pass


class ParseError(IecsError):
    pass


class PromptFailed(IecsError):
    pass


class ApiError(IecsError):
    pass


class SerializationError(IecsError):
    pass


class AWSSessionError(IecsError):
    pass


class UnsupportedLogDriver(IecsError):
    def __init__(self, driver, stage="logs", cause=None):
        super().__init__(f"Unsupported log driver '{driver}'", stage, cause)
        self.driver = driver


class PluginNotFound(IecsError):
    INSTRUCTIONS = (
        "'session-manager-plugin' not found, install it using the instructions "
        "in the link below:\n\n"
        "https://docs.aws.amazon.com/systems-manager/latest/userguide/"
        "session-manager-working-with-install-plugin.html"
    )

    def __init__(self, stage="session", cause=None):
        super().__init__(self.INSTRUCTIONS, stage, cause)
