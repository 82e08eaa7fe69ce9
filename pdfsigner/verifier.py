# *-* coding: utf-8 *-*
import logging
import subprocess

from pdfsigner.errors import VerificationToolFailure

logger = logging.getLogger(__name__)


def run(pdfsig: str, pdf_file: str) -> list:
    """
    Run pdfsig on a document.

    :param pdfsig: pdfsig executable.
    :param pdf_file: Document to inspect.
    :return: Lines printed by pdfsig, stdout and stderr interleaved.
    :raises VerificationToolFailure: pdfsig could not be started or was killed.
    """
    try:
        process = subprocess.run(
            [pdfsig, pdf_file],
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            encoding='utf-8',
            errors='replace',
        )
    except (OSError, subprocess.SubprocessError) as ex:
        raise VerificationToolFailure('cannot execute {}: {}'.format(pdfsig, ex)) from ex
    if process.returncode < 0:
        raise VerificationToolFailure(
            '{} terminated by signal {}'.format(pdfsig, -process.returncode)
        )
    lines = process.stdout.splitlines()
    logger.debug('%s exited with %d, %d lines of output', pdfsig, process.returncode, len(lines))
    return lines
