# *-* coding: utf-8 *-*
from .report import parse_report, parse_signatures
from .sign import sign
from .verify import verify

__all__ = ['sign', 'verify', 'parse_report', 'parse_signatures']
