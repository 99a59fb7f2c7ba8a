"""
Integration tests for the shellsim CLI.
Tests complete workflows end-to-end.
"""

import os
import shutil
import tempfile
import unittest

from click.testing import CliRunner

from shellsim import __version__, concatenate, iter_listing, parse_cat_args, parse_ls_args
from shellsim.cli import cli


class TestCatWorkflow(unittest.TestCase):
    """Test the cat workflow end-to-end."""

    @classmethod
    def setUpClass(cls):
        """Create test environment."""
        cls.temp_dir = tempfile.mkdtemp()

        cls.names = os.path.join(cls.temp_dir, 'names.txt')
        with open(cls.names, 'w', encoding='utf-8') as f:
            f.write("charlie\nalpha\nbravo\n")

        cls.control = os.path.join(cls.temp_dir, 'control.txt')
        with open(cls.control, 'w', encoding='utf-8') as f:
            f.write("bell\x07\n")

    @classmethod
    def tearDownClass(cls):
        """Clean up test environment."""
        shutil.rmtree(cls.temp_dir, ignore_errors=True)

    def test_library_pipeline(self):
        """Sort, number and escape across two files."""
        config = parse_cat_args(['-sa', '-n', '-v', self.names, self.control])

        self.assertEqual(
            concatenate(config),
            ['1: alpha', '2: bell^G', '3: bravo', '4: charlie'],
        )

    def test_group_command_redirects(self):
        """Run cat through the bundled command and redirect into a file."""
        output = os.path.join(self.temp_dir, 'sorted.txt')
        runner = CliRunner()

        # Step 1: write sorted content
        result = runner.invoke(cli, ['cat', '-sa', self.names, '>', output])
        self.assertEqual(result.exit_code, 0)
        self.assertEqual(result.output, f"Content written to {output}\n")

        # Step 2: append the raw content
        result = runner.invoke(cli, ['cat', self.names, '>>', output])
        self.assertEqual(result.output, f"Content appended to {output}\n")

        # Step 3: read everything back through cat itself
        result = runner.invoke(cli, ['cat', '-n', output])
        self.assertEqual(
            result.output.splitlines(),
            ['1: alpha', '2: bravo', '3: charlie', '4: charlie', '5: alpha', '6: bravo'],
        )


class TestLsWorkflow(unittest.TestCase):
    """Test the ls workflow end-to-end."""

    @classmethod
    def setUpClass(cls):
        """Create a directory tree with files of different sizes."""
        cls.temp_dir = tempfile.mkdtemp()
        cls.docs = os.path.join(cls.temp_dir, 'docs')
        os.makedirs(cls.docs)

        for name, size in [('large.bin', 300), ('small.bin', 100), ('medium.bin', 200)]:
            with open(os.path.join(cls.docs, name), 'wb') as f:
                f.write(b'\0' * size)

        cls.readme = os.path.join(cls.temp_dir, 'README')
        with open(cls.readme, 'w', encoding='utf-8') as f:
            f.write("read me\n")

    @classmethod
    def tearDownClass(cls):
        """Clean up test environment."""
        shutil.rmtree(cls.temp_dir, ignore_errors=True)

    def test_file_and_directory_targets(self):
        """Files come first, then a header and the directory listing."""
        lines = list(iter_listing(parse_ls_args(['-S', self.docs, self.readme])))

        self.assertEqual(
            lines,
            ['README', '', f'{self.docs}:', 'large.bin', 'medium.bin', 'small.bin', ''],
        )

    def test_group_command_reverse_size(self):
        """Run ls through the bundled command."""
        result = CliRunner().invoke(cli, ['ls', '-rS', self.docs])

        self.assertEqual(result.exit_code, 0)
        self.assertEqual(result.output.splitlines(), ['small.bin', 'medium.bin', 'large.bin', ''])

    def test_group_command_invalid_option(self):
        result = CliRunner().invoke(cli, ['ls', '-lq', self.docs])

        self.assertEqual(result.output, "Invalid option: q\n")

    def test_version(self):
        result = CliRunner().invoke(cli, ['--version'])

        self.assertEqual(result.exit_code, 0)
        self.assertIn(__version__, result.output)


if __name__ == '__main__':
    unittest.main()
