# *-* coding: utf-8 *-*
import attr

from pdfsigner.dates import (
    DateFormatter,
    ENGLISH,
    ENGLISH_PATTERN,
    PORTUGUESE,
    PORTUGUESE_PATTERN,
)

LINK_EXTRA_HEIGHT = 20

ENGLISH_LINK = '\n Validate document at: "{}"'
PORTUGUESE_LINK = '\n Validar documento em: "{}"'


@attr.s(frozen=True)
class Caption(object):
    text = attr.ib()
    rh = attr.ib()


def compose_caption(signtext, translate, validate_link, rh, now, formatter=None) -> Caption:
    """
    Build the text printed inside the visible signature rectangle.

    :param signtext: Caption template, the signing timestamp is appended to it.
    :param translate: Render the timestamp and link line in Portuguese instead of English.
    :param validate_link: Optional address where the document can be validated.
    :param rh: Rectangle height requested by the caller.
    :param now: Signing time.
    :param formatter: Object with a ``format(when, pattern, locale)`` method.
    :return: Caption with ``text`` None when there is nothing to print, and the
        rectangle height to use.
    """
    if not signtext:
        return Caption(None, rh)
    if formatter is None:
        formatter = DateFormatter()
    if translate:
        pattern, locale, link = PORTUGUESE_PATTERN, PORTUGUESE, PORTUGUESE_LINK
    else:
        pattern, locale, link = ENGLISH_PATTERN, ENGLISH, ENGLISH_LINK
    text = signtext + ' ' + formatter.format(now, pattern, locale)
    if validate_link:
        text = text + ' ' + link.format(validate_link)
        rh = rh + LINK_EXTRA_HEIGHT
    return Caption(text, rh)
