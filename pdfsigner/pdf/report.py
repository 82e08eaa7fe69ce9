# *-* coding: utf-8 *-*
"""
    pdfsig report parser
    ~~~~~~~~~~~~~~~~~~~~
    pdfsig prints one block per signature::

        Digital Signature Info of: signed.pdf
        Signature #1:
          - Signature Field Name: Signature1
          - Signer Certificate Common Name: Jane Doe
          - Signer full Distinguished Name: CN=Jane Doe,O=Example
          - Signing Time: Jul 31 2018 08:26:42
          - Signing Hash Algorithm: SHA-256
          - Signature Type: adbe.pkcs7.detached
          - Signed Ranges: [0 - 1234], [5678 - 9012]
          - Total document signed
          - Signature Validation: Signature is Valid.
          - Certificate Validation: Certificate issuer is unknown.
        Signature #2:
          ...

    A ``Signature #`` header closes the block being filled and opens the next
    one. Every other line is matched against :data:`FIELD_RULES` in order and
    sets at most one field. Lines nothing matches, including everything before
    the first header, are skipped.
"""
import attr

from pdfsigner.models import SignatureRecord, VerificationReport

HEADER = 'Signature #'
NOT_SIGNED_MARKER = 'does not contain any signatures'
FORM_FIELD_NOT_SIGNED = 'The signature form field is not signed.'


@attr.s(frozen=True)
class FieldRule(object):
    marker = attr.ib()
    name = attr.ib()
    # fixed text stripped from the line, or a constant value to store
    label = attr.ib(default=None)
    value = attr.ib(default=None)

    def matches(self, line):
        return self.marker in line

    def extract(self, line):
        if self.value is not None:
            return self.value
        return line.replace(self.label, '', 1)


def _labelled(marker, name):
    return FieldRule(marker, name, label='  - {} '.format(marker))


FIELD_RULES = (
    _labelled('Signature Field Name:', 'field_name'),
    _labelled('Signer Certificate Common Name:', 'signer'),
    _labelled('Signer full Distinguished Name:', 'distinguished_name'),
    _labelled('Signing Time:', 'signing_time'),
    _labelled('Signing Hash Algorithm:', 'hash_algorithm'),
    _labelled('Signature Type:', 'signature_type'),
    _labelled('Signed Ranges:', 'signed_ranges'),
    FieldRule('Total document signed', 'total_document_signed', value=True),
    _labelled('Signature Validation:', 'signature_validation'),
    _labelled('Certificate Validation:', 'certificate_validation'),
    FieldRule('The signature form field is not signed', 'invalid_signature',
              value=FORM_FIELD_NOT_SIGNED),
)


def is_header(line):
    return line.startswith(HEADER)


def classify(line, rules=FIELD_RULES):
    """Return the first rule matching ``line`` or None."""
    for rule in rules:
        if rule.matches(line):
            return rule
    return None


def parse_signatures(lines, rules=FIELD_RULES) -> list:
    """Split pdfsig output into one :class:`SignatureRecord` per block."""
    records = []
    current = None
    count = 0
    for line in lines:
        if is_header(line):
            if current:
                records.append(SignatureRecord(ordinal=count, **current))
            count += 1
            current = {'signature': line}
            continue
        if current is None:
            continue
        rule = classify(line, rules)
        if rule is not None:
            current[rule.name] = rule.extract(line)
    if current:
        records.append(SignatureRecord(ordinal=count, **current))
    return records


def parse_report(lines) -> VerificationReport:
    """
    Turn the complete pdfsig output into a report.

    :param lines: pdfsig output, one string per line.
    :return: VerificationReport with one record per signature block, or the
        "no signatures" report when the document is unsigned or no block was
        found.
    """
    lines = list(lines)
    if lines and NOT_SIGNED_MARKER in lines[0]:
        return VerificationReport.no_signatures()
    records = parse_signatures(lines)
    if not records:
        return VerificationReport.no_signatures()
    return VerificationReport(records)
