#!/usr/bin/env python3
# coding: utf-8
import unittest
import datetime
import fractions
import os
import subprocess
import tempfile
from unittest import mock

import attr

import keystore
from pdfsigner import errors, signer
from pdfsigner.config import SignerConfig
from pdfsigner.models import SignRequest
from pdfsigner.pdf import sign

NOW = datetime.datetime(2024, 3, 2, 14, 5, 9)
JAVA = '/usr/bin/java'


def clock():
    return NOW


class SignTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.tmp = tempfile.TemporaryDirectory()
        cls.pdf = os.path.join(cls.tmp.name, 'input.pdf')
        with open(cls.pdf, 'wb') as fh:
            fh.write(b'%PDF-1.4\n%%EOF\n')
        cls.keystore = keystore.keystore_save(os.path.join(cls.tmp.name, 'keystore.p12'))
        cls.jar = os.path.join(cls.tmp.name, 'BatchPDFSignPortable.jar')
        with open(cls.jar, 'wb') as fh:
            fh.write(b'PK')
        cls.output = os.path.join(cls.tmp.name, 'signed.pdf')

    @classmethod
    def tearDownClass(cls):
        cls.tmp.cleanup()

    def setUp(self):
        self.config = SignerConfig(jar_path=self.jar)
        patcher = mock.patch('shutil.which', return_value=JAVA)
        self.which = patcher.start()
        self.addCleanup(patcher.stop)
        patcher = mock.patch('subprocess.run')
        self.run = patcher.start()
        self.run.side_effect = lambda args, **kwargs: subprocess.CompletedProcess(args, 0)
        self.addCleanup(patcher.stop)

    def request(self, **kwargs):
        values = {
            'pdf_file': self.pdf,
            'output_file': self.output,
            'keystore_path': self.keystore,
            'keystore_password': keystore.PASSWORD,
        }
        values.update(kwargs)
        return SignRequest(**values)

    def command(self):
        self.run.assert_called_once()
        return self.run.call_args[0][0]

    def test_sign(self):
        with self.assertLogs('pdfsigner.pdf.sign', level='INFO') as logs:
            result = sign(self.request(), self.config, clock)
        assert result is None
        self.assertEqual(self.command(), [
            JAVA, '-jar', self.jar,
            '--page', '1', '--fs', '7', '--rh', '20', '--rw', '600',
            '--rx', '5', '--ry', '5',
            '-k', self.keystore, '-p', keystore.PASSWORD,
            '-i', self.pdf, '-o', self.output,
        ])
        assert self.output in logs.output[0]
        self.which.assert_called_once_with('java')

    def test_sign_geometry(self):
        sign(self.request(page=3, fs=9, rh=30, rw=250.5, rx=10, ry=700), self.config, clock)
        command = self.command()
        self.assertEqual(command[3:15], [
            '--page', '3', '--fs', '9', '--rh', '30', '--rw', '250.5',
            '--rx', '10', '--ry', '700',
        ])

    def test_sign_caption(self):
        request = self.request(
            signtext='Assinado por X', validate_link='example.org/validate', translate=True
        )
        sign(request, self.config, clock)
        command = self.command()
        self.assertEqual(command[-2:], [
            '--signtext',
            'Assinado por X Data e hora: sábado, 02 de março de 2024, 14:05:09.'
            ' \n Validar documento em: "example.org/validate"',
        ])
        self.assertEqual(command[command.index('--rh') + 1], '40')
        # the request itself is left alone
        self.assertEqual(request.rh, 20)

    def test_sign_caption_is_one_argument(self):
        signtext = 'O\'Brien "quoted" $(rm -rf ~); `x`'
        sign(self.request(signtext=signtext), self.config, clock)
        command = self.command()
        assert command[-1].startswith(signtext + ' Date and Time: ')
        assert 'shell' not in self.run.call_args[1]

    def test_keystore_from_config(self):
        config = SignerConfig.from_env(
            {'KEYSTORE_PATH': self.keystore, 'KEY_PASSWORD': 'secret'}, jar_path=self.jar
        )
        sign(self.request(keystore_path=None, keystore_password=None), config, clock)
        command = self.command()
        self.assertEqual(command[command.index('-k') + 1], self.keystore)
        self.assertEqual(command[command.index('-p') + 1], 'secret')

    def test_request_wins_over_config(self):
        config = SignerConfig(keystore_path='/nonexistent.p12', keystore_password='other', jar_path=self.jar)
        sign(self.request(), config, clock)
        command = self.command()
        self.assertEqual(command[command.index('-p') + 1], keystore.PASSWORD)

    def test_keystore_from_environment(self):
        environ = {'KEYSTORE_PATH': self.keystore, 'KEY_PASSWORD': 'secret'}
        with mock.patch.dict(os.environ, environ):
            config = SignerConfig.from_env(jar_path=self.jar)
        self.assertEqual(config.keystore_path, self.keystore)
        self.assertEqual(config.keystore_password, 'secret')

    def test_home_expansion(self):
        with mock.patch.dict(os.environ, {'HOME': self.tmp.name}):
            sign(self.request(pdf_file='~/input.pdf', output_file='~/signed.pdf',
                              keystore_path='~/keystore.p12'), self.config, clock)
        command = self.command()
        self.assertEqual(command[command.index('-i') + 1], self.pdf)
        self.assertEqual(command[command.index('-o') + 1], self.output)
        self.assertEqual(command[command.index('-k') + 1], self.keystore)

    def test_tool_failure(self):
        self.run.side_effect = lambda args, **kwargs: subprocess.CompletedProcess(args, 1)
        with self.assertRaises(errors.SigningToolError) as cm:
            sign(self.request(), self.config, clock)
        self.assertEqual(cm.exception.returncode, 1)
        assert 'Return code: 1' in str(cm.exception)

    def assertRejected(self, exc, request=None, config=None):
        with self.assertRaises(exc):
            sign(request or self.request(), config or self.config, clock)
        self.run.assert_not_called()

    def test_missing_keystore(self):
        self.assertRejected(errors.FileNotFound,
                            self.request(keystore_path=os.path.join(self.tmp.name, 'none.p12')))

    def test_no_keystore(self):
        self.assertRejected(errors.FileNotFound, self.request(keystore_path=None))

    def test_missing_pdf(self):
        self.assertRejected(errors.FileNotFound,
                            self.request(pdf_file=os.path.join(self.tmp.name, 'none.pdf')))

    def test_missing_output_directory(self):
        output = os.path.join(self.tmp.name, 'missing', 'signed.pdf')
        self.assertRejected(errors.DirectoryNotFound, self.request(output_file=output))

    def test_no_output_file(self):
        self.assertRejected(errors.DirectoryNotFound, self.request(output_file=None))
        self.assertRejected(errors.DirectoryNotFound, self.request(output_file=''))

    def test_empty_password(self):
        self.assertRejected(errors.InvalidCredential, self.request(keystore_password=''))
        self.assertRejected(errors.InvalidCredential, self.request(keystore_password=None))

    def test_invalid_page(self):
        for page in (0, -1, 1.5, '1', None, True):
            with self.subTest(page=page):
                self.assertRejected(errors.InvalidParameter, self.request(page=page))

    def test_invalid_geometry(self):
        self.assertRejected(errors.InvalidParameter, self.request(rw='wide'))

    def test_rational_geometry(self):
        sign(self.request(rw=fractions.Fraction(1, 2)), self.config, clock)
        command = self.command()
        self.assertEqual(command[command.index('--rw') + 1], '0.5')

    def test_request_is_frozen(self):
        request = self.request()
        with self.assertRaises(attr.exceptions.FrozenInstanceError):
            request.rh = 40

    def test_missing_jar(self):
        config = SignerConfig(jar_path=os.path.join(self.tmp.name, 'none.jar'))
        self.assertRejected(errors.ToolNotInstalled, config=config)

    def test_missing_java(self):
        self.which.return_value = None
        self.assertRejected(errors.ToolNotInstalled)

    def test_windows(self):
        with mock.patch('platform.system', return_value='Windows'):
            self.assertRejected(errors.UnsupportedPlatform)

    def test_first_violation_wins(self):
        request = self.request(
            keystore_path=os.path.join(self.tmp.name, 'none.p12'), keystore_password='', page=0
        )
        self.assertRejected(errors.FileNotFound, request)

    def test_errors_are_builtin_subclasses(self):
        assert issubclass(errors.FileNotFound, FileNotFoundError)
        assert issubclass(errors.InvalidParameter, ValueError)
        assert issubclass(errors.SigningToolError, errors.SignerError)


class SignerTests(unittest.TestCase):
    def test_masked(self):
        command = ['java', '-jar', 'x.jar', '-k', 'ks.p12', '-p', 'secret', '-i', 'a.pdf']
        line = signer.masked(command)
        assert 'secret' not in line
        assert '-p ********' in line
        self.assertEqual(command[6], 'secret')

    def test_password_not_logged(self):
        request = SignRequest('a.pdf', 'b.pdf', 'ks.p12', 'secret')
        command = signer.build_command('java', 'x.jar', request)
        with mock.patch('subprocess.run') as run:
            run.return_value = subprocess.CompletedProcess(command, 0)
            with self.assertLogs('pdfsigner.signer', level='DEBUG') as logs:
                signer.run(command)
        assert 'secret' not in ''.join(logs.output)
        run.assert_called_once_with(
            command, stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL
        )
