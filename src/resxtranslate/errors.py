class ResxTranslateError(Exception):
    pass


class ConfigurationError(ResxTranslateError, ValueError):
    pass


class DirectoryNotFoundError(ResxTranslateError, FileNotFoundError):
    pass


class ResourceFileNotFoundError(ResxTranslateError, FileNotFoundError):
    pass


class ResourceFormatError(ResxTranslateError, ValueError):
    pass


class WorklistNotFoundError(ResxTranslateError, FileNotFoundError):
    pass


class WorklistFormatError(ResxTranslateError, ValueError):
    pass
