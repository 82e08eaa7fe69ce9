# *-* coding: utf-8 *-*
__version__ = '1.0.0'

from pdfsigner.pdf import sign, verify

__all__ = ['sign', 'verify', '__version__']
