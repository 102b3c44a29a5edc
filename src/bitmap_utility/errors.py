class BitmapUtilityError(Exception):
    exit_code = 1


class ArgumentError(BitmapUtilityError, ValueError):
    """A required path is missing, blank, or points at nothing."""

    exit_code = 3

    def __init__(self, message, name=None):
        self.name = name
        if name:
            message = f"{message} (Parameter '{name}')"
        super().__init__(message)


class CodeParseError(BitmapUtilityError, ValueError):
    """A byte token in a code file is not a hex value in 0..255."""

    exit_code = 5

    def __init__(self, path, line_number, token):
        self.path = path
        self.line_number = line_number
        self.token = token
        super().__init__(f"{path}:{line_number}: invalid byte value '{token}'")


class ImageDecodeError(BitmapUtilityError):
    exit_code = 6


# Exit codes for errors raised by the OS rather than by us
EXIT_NOT_FOUND = 4
EXIT_IO = 7
