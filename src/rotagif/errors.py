class RotagifError(Exception):
    """Base class for every fatal condition raised by rotagif."""


class ConfigError(RotagifError):
    pass


class DecodeError(RotagifError):
    pass


class NotFoundError(RotagifError):
    pass


class EncodeError(RotagifError):
    pass


class WriteError(RotagifError):
    pass
