"""Exceptions raised by the scheduler. All of them end the run."""


class ShellyError(Exception):
    """Base class for every error the CLI reports and exits on."""


class InvalidIntegerError(ShellyError, ValueError):
    pass


class MissingArgumentsError(ShellyError):
    """Command line is missing the subcommand or one of its arguments.

    `usage` carries the text to print before exiting.
    """

    def __init__(self, message, usage=""):
        super().__init__(message)
        self.usage = usage


class MissingConfigurationError(ShellyError):
    pass


class UnknownDateFormatError(ShellyError, ValueError):
    pass


class InvalidTimeFormatError(ShellyError, ValueError):
    pass


class DeviceConnectionError(ShellyError, ConnectionError):
    """Device did not answer Shelly.GetStatus with 200."""


class ScheduleClearError(ShellyError):
    """Schedule.DeleteAll failed."""


class ScheduleCreateError(ShellyError):
    """Schedule.Create failed."""
