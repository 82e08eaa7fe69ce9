# *-* coding: utf-8 *-*
import os
import logging

import attr

from pdfsigner import dates, signer, validation
from pdfsigner.caption import compose_caption
from pdfsigner.config import SignerConfig
from pdfsigner.errors import ToolNotInstalled

logger = logging.getLogger(__name__)


def sign(request, config: SignerConfig = None, clock=None, formatter=None) -> None:
    """
    Sign a PDF document with BatchPDFSign.

    The signed document is written to ``request.output_file``; nothing is
    returned.

    :param request: SignRequest describing the document and the signature box.
    :param config: SignerConfig, read from the environment when omitted.
    :param clock: Callable returning the signing time, defaults to the current
        time in ``config.timezone``.
    :param formatter: Date formatter used for the caption timestamp.
    :raises UnsupportedPlatform: running on Windows.
    :raises FileNotFound: the PDF or the keystore does not exist.
    :raises DirectoryNotFound: the output directory does not exist.
    :raises InvalidCredential: the keystore password is empty.
    :raises ToolNotInstalled: the bundled jar or java is missing.
    :raises InvalidParameter: page or geometry values are invalid.
    :raises SigningToolError: BatchPDFSign exited with a non-zero code.
    """
    if config is None:
        config = SignerConfig.from_env()

    validation.check_platform()

    pdf_file = validation.expand_path(request.pdf_file)
    validation.check_file(pdf_file, 'PDF file')
    output_file = validation.expand_path(request.output_file)
    validation.check_directory(output_file)
    keystore_path = validation.expand_path(request.keystore_path or config.keystore_path)
    validation.check_file(keystore_path, 'keystore')
    keystore_password = request.keystore_password or config.keystore_password
    validation.check_password(keystore_password)

    jar_path = validation.expand_path(config.jar_path)
    if not os.path.exists(jar_path):
        raise ToolNotInstalled(
            "The '{}' file was not found in the package.".format(os.path.basename(jar_path))
        )
    validation.check_page(request.page)
    validation.check_geometry(
        fs=request.fs, rh=request.rh, rw=request.rw, rx=request.rx, ry=request.ry
    )
    java = validation.check_executable(config.java)

    if clock is None:
        clock = dates.clock(config.timezone)
    caption = compose_caption(
        request.signtext, request.translate, request.validate_link,
        request.rh, clock(), formatter
    )

    resolved = attr.evolve(
        request,
        pdf_file=pdf_file,
        output_file=output_file,
        keystore_path=keystore_path,
        keystore_password=keystore_password,
        rh=caption.rh,
        signtext=caption.text,
    )
    signer.run(signer.build_command(java, jar_path, resolved))
    logger.info('PDF successfully signed: %s', output_file)
