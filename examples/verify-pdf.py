#!/usr/bin/env python3
import sys
import json
import logging

from pdfsigner import errors, verify


def main():
    logging.basicConfig(level=logging.INFO)
    if len(sys.argv) < 2:
        print('usage: verify-pdf.py file.pdf [--json]', file=sys.stderr)
        return 2
    fname = sys.argv[1]

    try:
        report = verify(fname)
    except errors.SignerError as e:
        print(e, file=sys.stderr)
        return 1

    if '--json' in sys.argv[2:]:
        print(json.dumps(report.as_dict(), indent=2, ensure_ascii=False))
        return 0 if report.is_signed else 1

    if not report.is_signed:
        print(f"{fname}: {report.message}")
        return 1

    for record in report:
        print(f"{record.signature} {record.signer or '?'}")
        print(f"     signed at: {record.signing_time}")
        print(f"     signature: {record.signature_validation}")
        print(f"     certificate: {record.certificate_validation}")
        if record.total_document_signed:
            print("     the signature covers the entire pdf file")
        if record.invalid_signature:
            print(f"     {record.invalid_signature}")
    return 0

if __name__ == '__main__':
    sys.exit(main())
