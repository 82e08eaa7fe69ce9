#!/usr/bin/env python3

""" A tool which takes in a pdf and a keystore and gives out a pdf with a visible signature

"""
import argparse
import logging
import sys

from pdfsigner import errors, sign
from pdfsigner.models import SignRequest


def create_args():
    """Creates CLI arguments for the sign-pdf script."""

    parser = argparse.ArgumentParser(description='Script for digitally signing a pdf')
    parser.add_argument('src', type=str, help='Source file (.pdf) to sign (Mandatory)')
    parser.add_argument('dest', type=str, help='Where the signed pdf is written (Mandatory)')
    parser.add_argument('-k', '--keystore', type=str,
        help='Keystore file, defaults to $KEYSTORE_PATH')
    parser.add_argument('-p', '--password', type=str,
        help='Keystore password, defaults to $KEY_PASSWORD')
    parser.add_argument('--page', type=int, default=1, help='Page receiving the signature')
    parser.add_argument('--fs', type=float, default=7, help='Caption font size')
    parser.add_argument('--rh', type=float, default=20, help='Signature box height')
    parser.add_argument('--rw', type=float, default=600, help='Signature box width')
    parser.add_argument('--rx', type=float, default=5, help='Signature box x offset')
    parser.add_argument('--ry', type=float, default=5, help='Signature box y offset')
    parser.add_argument('-t', '--signtext', type=str, help='Caption printed in the signature box')
    parser.add_argument('-l', '--link', type=str, help='Address where the document can be validated')
    parser.add_argument('--pt', action='store_true', help='Caption in Portuguese')
    parser.add_argument('-v', '--verbose', action='store_true')

    return parser.parse_args()


def run():
    args = create_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    request = SignRequest(
        pdf_file=args.src,
        output_file=args.dest,
        keystore_path=args.keystore,
        keystore_password=args.password,
        fs=args.fs, rh=args.rh, rw=args.rw, rx=args.rx, ry=args.ry,
        page=args.page,
        signtext=args.signtext,
        validate_link=args.link,
        translate=args.pt,
    )
    try:
        sign(request)
    except errors.SignerError as e:
        print(e, file=sys.stderr)
        sys.exit(1)

if __name__ == '__main__':
    run()
