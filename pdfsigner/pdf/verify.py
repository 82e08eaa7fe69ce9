# *-* coding: utf-8 *-*
import logging

from pdfsigner import validation, verifier
from pdfsigner.config import SignerConfig
from pdfsigner.errors import VerificationToolFailure
from pdfsigner.models import VerificationReport
from pdfsigner.pdf.report import parse_report

logger = logging.getLogger(__name__)


def verify(pdf_file, config: SignerConfig = None) -> VerificationReport:
    """
    Verify the signatures of a PDF document with pdfsig.

    :param pdf_file: Path of the document.
    :param config: SignerConfig, only ``pdfsig`` is used.
    :return: VerificationReport. A document without signatures gives an empty
        report with a message; when pdfsig itself fails the report is empty,
        carries a message and has ``failed`` set.
    :raises UnsupportedPlatform: running on Windows.
    :raises ToolNotInstalled: pdfsig is not on PATH.
    :raises FileNotFound: the document does not exist.
    """
    if config is None:
        config = SignerConfig.from_env()
    pdf_file = validation.expand_path(pdf_file)

    validation.check_platform()
    pdfsig = validation.check_executable(config.pdfsig)
    validation.check_file(pdf_file, 'PDF file')

    try:
        lines = verifier.run(pdfsig, pdf_file)
    except VerificationToolFailure:
        logger.exception('verification of %s failed', pdf_file)
        return VerificationReport.failure()
    return parse_report(lines)
