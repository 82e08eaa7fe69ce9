# *-* coding: utf-8 *-*
"""
    Models
    ~~~~~~
    Value objects passed in and out of the signing and verification calls.
"""
import attr

NO_SIGNATURES = 'No signatures found in the PDF.'
VERIFICATION_FAILED = 'Error while executing the pdfsig command.'

# attribute name -> label used by the report dictionaries
LABELS = (
    ('signature', 'Signature'),
    ('field_name', 'Field Name'),
    ('signer', 'Signer'),
    ('distinguished_name', 'Distinguished Name'),
    ('signing_time', 'Signing Time'),
    ('hash_algorithm', 'Hash Algorithm'),
    ('signature_type', 'Signature Type'),
    ('signed_ranges', 'Signed Ranges'),
    ('total_document_signed', 'Total Document Signed'),
    ('signature_validation', 'Signature Validation'),
    ('certificate_validation', 'Certificate Validation'),
    ('invalid_signature', 'Invalid Signature'),
)


@attr.s(frozen=True)
class SignRequest(object):
    """Everything needed to sign one PDF.

    ``keystore_path`` and ``keystore_password`` may be left out, in which case
    they are taken from :class:`pdfsigner.config.SignerConfig`. Geometry is in
    PDF points: ``fs`` font size, ``rh``/``rw`` rectangle height and width,
    ``rx``/``ry`` rectangle offset.
    """
    pdf_file = attr.ib()
    output_file = attr.ib()
    keystore_path = attr.ib(default=None)
    keystore_password = attr.ib(default=None, repr=False)
    fs = attr.ib(default=7)
    rh = attr.ib(default=20)
    rw = attr.ib(default=600)
    rx = attr.ib(default=5)
    ry = attr.ib(default=5)
    page = attr.ib(default=1)
    signtext = attr.ib(default=None)
    validate_link = attr.ib(default=None)
    translate = attr.ib(default=False)


@attr.s(frozen=True)
class SignatureRecord(object):
    ordinal = attr.ib()
    signature = attr.ib(default=None)
    field_name = attr.ib(default=None)
    signer = attr.ib(default=None)
    distinguished_name = attr.ib(default=None)
    signing_time = attr.ib(default=None)
    hash_algorithm = attr.ib(default=None)
    signature_type = attr.ib(default=None)
    signed_ranges = attr.ib(default=None)
    total_document_signed = attr.ib(default=None)
    signature_validation = attr.ib(default=None)
    certificate_validation = attr.ib(default=None)
    invalid_signature = attr.ib(default=None)

    @property
    def key(self):
        return 'Signature_{}'.format(self.ordinal)

    def as_dict(self):
        """Fields present in the report, keyed by their labels."""
        return {
            label: getattr(self, name)
            for name, label in LABELS
            if getattr(self, name) is not None
        }


@attr.s(frozen=True)
class VerificationReport(object):
    signatures = attr.ib(default=(), converter=tuple)
    message = attr.ib(default=None)
    failed = attr.ib(default=False)

    @classmethod
    def no_signatures(cls):
        return cls(message=NO_SIGNATURES)

    @classmethod
    def failure(cls, message=VERIFICATION_FAILED):
        return cls(message=message, failed=True)

    @property
    def is_signed(self):
        return len(self.signatures) > 0

    def __len__(self):
        return len(self.signatures)

    def __iter__(self):
        return iter(self.signatures)

    def __getitem__(self, index):
        return self.signatures[index]

    def as_dict(self):
        if not self.signatures:
            return {'message': self.message}
        return {record.key: record.as_dict() for record in self.signatures}
