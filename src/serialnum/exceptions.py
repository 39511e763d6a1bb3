from typing import Optional


class SerialNumberError(Exception):
    pass


class WidthError(SerialNumberError, TypeError):
    """
    Raised when a bit-width declaration is invalid or when a serial number
    class is used without a bound width.
    """

    def __init__(self, owner: Optional[str] = None, reason: Optional[str] = None):
        if reason:
            self.message = f"{owner}: {reason}"
        elif owner:
            self.message = f"{owner} has no valid bit-width."
        else:
            self.message = "An invalid bit-width was specified."
        super().__init__(self.message)
