"""Defines the exceptions scrivener reports to the user.

Every exception here derives from :class:`Error`. The command-line interface prints the message of any
:class:`Error` and exits with a nonzero status; other exceptions are treated as bugs and propagate.
"""


class Error(Exception):
    """Base class for failures that should be reported to the user as a message."""
    def __init__(self, message: str, cause: BaseException = None):
        super().__init__(message)
        self.message = message
        self.cause = cause


class ConfigError(Error):
    """Raised when the user's config file exists but does not define a usable configuration."""
    def __init__(self, message: str, path: str, cause: BaseException = None):
        super().__init__(message, cause)
        self.path = path


class AlreadyExistsError(Error):
    def __init__(self, name: str):
        super().__init__(f'A note named `{name}` already exists.')
        self.name = name


class NotFoundError(Error):
    def __init__(self, name: str):
        super().__init__(f'Note `{name}` does not exist.')
        self.name = name


class NotAccessibleError(Error):
    """Raised when a path cannot be canonicalized, e.g. because it does not exist or permission is denied."""
    def __init__(self, path: str, cause: BaseException = None):
        super().__init__(f'Could not read file `{path}`.', cause)
        self.path = path


class PathIsDirectoryError(Error):
    def __init__(self, path: str):
        super().__init__(f'{path} is a directory, not a file.')
        self.path = path


class PathAlreadyExistsError(Error):
    def __init__(self, path: str):
        super().__init__(f'A file at {path} already exists.')
        self.path = path


class StoreReadError(Error):
    """Raised when the store file exists but cannot be read or parsed."""
    def __init__(self, path: str, cause: BaseException = None):
        super().__init__(f'Could not read {path}.', cause)
        self.path = path


class StoreWriteError(Error):
    def __init__(self, path: str, cause: BaseException = None):
        super().__init__(f'Could not write to {path}.', cause)
        self.path = path


class EditorLaunchError(Error):
    """Raised when the editor cannot be started or exits with a nonzero status."""
    def __init__(self, command: str, cause: BaseException = None, returncode: int = None):
        if returncode is not None:
            message = f'Editor `{command}` exited with status {returncode}.'
        else:
            message = f'Could not open editor `{command}`.'
        super().__init__(message, cause)
        self.command = command
        self.returncode = returncode


class FileWriteError(Error):
    def __init__(self, path: str, cause: BaseException = None):
        super().__init__(f'Could not write to file {path}.', cause)
        self.path = path


class FileDeleteError(Error):
    def __init__(self, name: str, path: str, cause: BaseException = None):
        super().__init__(f'Could not delete note `{name}` at {path}.', cause)
        self.name = name
        self.path = path


class WorkingDirectoryUnavailableError(Error):
    def __init__(self, cause: BaseException = None):
        super().__init__('Could not access current directory.', cause)


class TemplateNotFoundError(Error):
    def __init__(self, template: str):
        super().__init__(f'Template does not exist: {template}')
        self.template = template


class TemplateError(Error):
    """Raised when a template exists but cannot be read, compiled, or rendered."""
    def __init__(self, path: str, cause: BaseException = None):
        super().__init__(f'Could not render template {path}: {cause}', cause)
        self.path = path
