"""Base exception shared by every uNivUSaver error."""


class UNivUSaverError(Exception):
    """
    Base class for errors that are reported back to the user.

    Commands turn any subclass into a single feedback line, so the
    message should already be readable as-is.
    """
    pass
