# *-* coding: utf-8 *-*
"""
    Validation Utils
    ~~~~~~~~~~~~~~~~
    Fail-fast checks run before any external tool is started. Each check
    raises on the first violation and returns nothing (or the resolved value)
    otherwise.
"""
import os
import numbers
import platform
import shutil

from pdfsigner.errors import (
    DirectoryNotFound,
    FileNotFound,
    InvalidCredential,
    InvalidParameter,
    ToolNotInstalled,
    UnsupportedPlatform,
)

UNSUPPORTED_SYSTEMS = ('Windows',)


def is_number():
    def validate(name, value):
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            raise InvalidParameter('{} ({!r}) must be numeric'.format(name, value))
    return validate


def greater_than(i):
    def validate(name, value):
        if not value > i:
            raise InvalidParameter('{} ({!r}) must be greater than {}'.format(name, value, i))
    return validate


def is_integer():
    def validate(name, value):
        if isinstance(value, bool) or not isinstance(value, numbers.Integral):
            raise InvalidParameter('{} ({!r}) must be an integer'.format(name, value))
    return validate


def expand_path(path):
    if path is None:
        return None
    return os.path.expanduser(os.fspath(path))


def check(name, value, *validators):
    for validate in validators:
        validate(name, value)


def check_page(page):
    try:
        check('page', page, is_integer(), greater_than(0))
    except InvalidParameter:
        raise InvalidParameter(
            'Page number must be a numeric value greater than 0: {!r}'.format(page)
        ) from None


def check_geometry(**values):
    for name, value in values.items():
        check(name, value, is_number())


def check_platform(system=None):
    system = system or platform.system()
    if system in UNSUPPORTED_SYSTEMS:
        raise UnsupportedPlatform('This package is only supported on Linux and macOS.')


def check_file(path, what='PDF file'):
    if not path or not os.path.exists(path):
        raise FileNotFound('The specified {} does not exist: {}'.format(what, path))


def check_directory(path):
    if not path:
        raise DirectoryNotFound('No output file given: {!r}'.format(path))
    directory = os.path.dirname(path) or os.curdir
    if not os.path.isdir(directory):
        raise DirectoryNotFound('The output directory does not exist: {}'.format(directory))


def check_password(password):
    if not password:
        raise InvalidCredential('The keystore password cannot be empty.')


def check_executable(name):
    """Return the full path of ``name`` on PATH or raise ToolNotInstalled."""
    path = shutil.which(name)
    if path is None:
        raise ToolNotInstalled(
            "'{}' command is not installed on the system. "
            "Please install it before using this function.".format(name)
        )
    return path
