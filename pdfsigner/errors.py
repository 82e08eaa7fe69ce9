# *-* coding: utf-8 *-*


class SignerError(Exception):
    """Base class of every error raised by pdfsigner."""


class FileNotFound(SignerError, FileNotFoundError):
    pass


class DirectoryNotFound(SignerError, FileNotFoundError):
    pass


class InvalidCredential(SignerError, ValueError):
    pass


class InvalidParameter(SignerError, ValueError):
    pass


class UnsupportedPlatform(SignerError, OSError):
    pass


class ToolNotInstalled(SignerError, OSError):
    pass


class SigningToolError(SignerError, RuntimeError):
    def __init__(self, returncode):
        super().__init__(
            'Failed to execute the signing command. Return code: {}'.format(returncode)
        )
        self.returncode = returncode


class VerificationToolFailure(SignerError, RuntimeError):
    pass
