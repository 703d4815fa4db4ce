class StatementFileError(ValueError):
    """Base error for statement files that cannot be processed."""


class UnsupportedFileType(StatementFileError):
    pass


class StatementReadError(StatementFileError):
    pass
