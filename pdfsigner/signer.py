# *-* coding: utf-8 *-*
import logging
import numbers
import subprocess

from pdfsigner.errors import SigningToolError

logger = logging.getLogger(__name__)

PASSWORD_FLAG = '-p'


def number(value) -> str:
    if isinstance(value, numbers.Integral):
        return str(int(value))
    return str(float(value))


def build_command(java: str, jar: str, request) -> list:
    """
    Argument vector for BatchPDFSign.

    The request must already be resolved: paths expanded, keystore values
    filled in and ``signtext``/``rh`` replaced by the composed caption.
    """
    command = [
        java, '-jar', jar,
        '--page', number(request.page),
        '--fs', number(request.fs),
        '--rh', number(request.rh),
        '--rw', number(request.rw),
        '--rx', number(request.rx),
        '--ry', number(request.ry),
        '-k', request.keystore_path,
        PASSWORD_FLAG, request.keystore_password,
        '-i', request.pdf_file,
        '-o', request.output_file,
    ]
    if request.signtext:
        command.extend(['--signtext', request.signtext])
    return command


def masked(command: list) -> str:
    shown = list(command)
    for i, arg in enumerate(shown[:-1]):
        if arg == PASSWORD_FLAG:
            shown[i + 1] = '*' * 8
    return ' '.join(shown)


def run(command: list) -> None:
    logger.debug('executing: %s', masked(command))
    process = subprocess.run(
        command, stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL
    )
    if process.returncode != 0:
        raise SigningToolError(process.returncode)
