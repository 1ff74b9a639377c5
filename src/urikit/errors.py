__all__ = ('UriError',
           'InvalidArgument',
           'InvalidBase',
           'UnparsableInput')


class UriError(Exception):
    pass


class InvalidArgument(UriError, ValueError):
    """A parameter that must be a single value was given several."""


class InvalidBase(UriError, ValueError):
    """The base URI of a resolution could not be parsed."""


class UnparsableInput(UriError, ValueError):
    pass
