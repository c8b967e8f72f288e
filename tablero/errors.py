class TableroError(Exception):
    pass


class LoadError(TableroError):
    """Source file could not be decoded into rows."""


class ConfigError(TableroError):
    pass
