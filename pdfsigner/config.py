# *-* coding: utf-8 *-*
import os

import attr

KEYSTORE_PATH_ENV = 'KEYSTORE_PATH'
KEYSTORE_PASSWORD_ENV = 'KEY_PASSWORD'

DEFAULT_TIMEZONE = 'America/Recife'
DEFAULT_JAR = os.path.join(os.path.dirname(__file__), 'ext', 'BatchPDFSignPortable.jar')


@attr.s(frozen=True)
class SignerConfig(object):
    keystore_path = attr.ib(default=None)
    keystore_password = attr.ib(default=None, repr=False)
    java = attr.ib(default='java')
    jar_path = attr.ib(default=DEFAULT_JAR)
    pdfsig = attr.ib(default='pdfsig')
    timezone = attr.ib(default=DEFAULT_TIMEZONE)

    @classmethod
    def from_env(cls, environ=None, **kwargs):
        """
        Build a configuration with keystore defaults taken from the environment.

        :param environ: Mapping to read from, ``os.environ`` when omitted.
        :param kwargs: Any other :class:`SignerConfig` attribute.
        """
        if environ is None:
            environ = os.environ
        kwargs.setdefault('keystore_path', environ.get(KEYSTORE_PATH_ENV) or None)
        kwargs.setdefault('keystore_password', environ.get(KEYSTORE_PASSWORD_ENV) or None)
        return cls(**kwargs)
