"""Base error for service installation."""


class ServiceInstallError(Exception):
    """Raised when a service unit cannot be installed.

    Terminal for the current invocation; never retried.
    """
