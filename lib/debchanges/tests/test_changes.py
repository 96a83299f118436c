#!/usr/bin/python

# Copyright (C) 2026 The debchanges developers
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program; if not, write to the Free Software
# Foundation, Inc., 51 Franklin Street, Fifth Floor, Boston, MA 02110-1301 USA

import os.path

import pytest

from debian.debian_support import Version

from debchanges import changes
from debchanges.archive import Arch, ReleaseName, Section


def find_test_file(filename):
    # type: (str) -> str
    """ find a test file that is located within the test suite """
    return os.path.join(os.path.dirname(__file__), filename)


REGEX_COMPAT_CHANGES = \
    'haskell-regex-compat_0.92-3+seereason1~jaunty4_amd64.changes'

UNSIGNED_CHANGES = '''\
Format: 1.7
Date: Fri, 28 Dec 2007 17:08:48 +0100
Source: bzr-gtk
Binary: bzr-gtk
Architecture: source all
Version: 0.93.0-2
Distribution: unstable
Urgency: low
Maintainer: Debian Bazaar Maintainers <pkg-bazaar-maint@lists.alioth.debian.org>
Changed-By: Chris Lamb <chris@chris-lamb.co.uk>
Changes:
 bzr-gtk (0.93.0-2) unstable; urgency=low
 .
   * Fix broken icons in .desktop files (Closes: #456438).
Files:
 0fd797f4138a9d4fdeb8c30597d46bc9 1003 python optional bzr-gtk_0.93.0-2.dsc
'''


class TestChangedFileSpec:

    def test_pretty_changes(self):
        # type: () -> None
        spec = changes.ChangedFileSpec(md5sum='abc123', sha1sum='',
                                       sha256sum='', size=42, section='main',
                                       priority='optional', name='foo.deb')
        assert changes.pretty_changes(spec) == \
            'abc123 42 main optional foo.deb'
        assert str(spec) == 'abc123 42 main optional foo.deb'

    def test_pretty_changes_area(self):
        # type: () -> None
        spec = changes.ChangedFileSpec('abc123', '', '', 42,
                                       Section('non-free', 'libs'), 'extra',
                                       'pool/foo.deb')
        assert changes.pretty_changes(spec) == \
            'abc123 42 non-free/libs extra pool/foo.deb'


class TestChangesFileName:

    def test_changes_file_name(self):
        # type: () -> None
        cf = changes.ChangesFile(directory='/srv/incoming', package='hello',
                                 version=Version('1:2.10-3'),
                                 release=ReleaseName('unstable'),
                                 arch=Arch('amd64'), info=None, entry=None,
                                 files=())
        assert changes.changes_file_name(cf) == 'hello_1:2.10-3_amd64.changes'
        assert changes.pretty_changes_file(cf) == changes.changes_file_name(cf)
        assert cf.path == '/srv/incoming/hello_1:2.10-3_amd64.changes'

    def test_parse_changes_file_name(self):
        # type: () -> None
        package, version, arch = changes.parse_changes_file_name(
            '/srv/incoming/' + REGEX_COMPAT_CHANGES)
        assert package == 'haskell-regex-compat'
        assert version == Version('0.92-3+seereason1~jaunty4')
        assert arch == Arch('amd64')

    @pytest.mark.parametrize('filename', [
        'hello_2.10-3_amd64.dsc',
        'hello_2.10-3.changes',
        'hello__amd64.changes',
        'hello_2.10 3_amd64.changes',
    ])
    def test_bad_file_names(self, filename):
        # type: (str) -> None
        with pytest.raises(changes.ChangesFileError):
            changes.parse_changes_file_name(filename)


class TestChangesFile:

    def test_from_file(self):
        # type: () -> None
        cf = changes.ChangesFile.from_file(find_test_file(REGEX_COMPAT_CHANGES))
        assert cf.directory == os.path.dirname(
            find_test_file(REGEX_COMPAT_CHANGES))
        assert cf.package == 'haskell-regex-compat'
        assert str(cf.version) == '0.92-3+seereason1~jaunty4'
        assert cf.arch == Arch('amd64')
        assert cf.release == ReleaseName('jaunty-seereason')
        assert cf.info['Source'] == 'haskell-regex-compat'
        assert cf.path == find_test_file(REGEX_COMPAT_CHANGES)

    def test_entry(self):
        # type: () -> None
        cf = changes.load_changes_file(find_test_file(REGEX_COMPAT_CHANGES))
        assert cf.entry.package == 'haskell-regex-compat'
        assert cf.entry.version == cf.version
        assert cf.entry.distributions == (ReleaseName('jaunty-seereason'),)
        assert cf.entry.urgency == 'low'
        assert '* Depend on hscolour (Closes: #550769)' in cf.entry.changes
        assert cf.entry.author == ''
        assert cf.entry.date == ''

    def test_files(self):
        # type: () -> None
        cf = changes.load_changes_file(find_test_file(REGEX_COMPAT_CHANGES))
        assert len(cf.files) == 2
        dsc, deb = cf.files
        assert dsc.name == 'haskell-regex-compat_0.92-3+seereason1~jaunty4.dsc'
        assert dsc.size == 1387
        assert dsc.sha1sum == '3f786850e387550fdab836ed7e6dc881de23001b'
        assert dsc.sha256sum == \
            'e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855'
        assert changes.pretty_changes(dsc) == \
            '0d3e6e5ed5d1cc8e1d3b1eb5ff2a5a1b 1387 haskell optional ' \
            'haskell-regex-compat_0.92-3+seereason1~jaunty4.dsc'
        assert deb.section == Section('contrib', 'haskell')
        assert changes.pretty_changes(deb) == \
            '7c1f8a5b6e2d4c3b9a8f7e6d5c4b3a29 51202 contrib/haskell extra ' \
            'libghc6-regex-compat-dev_0.92-3+seereason1~jaunty4_amd64.deb'

    def test_missing_checksums(self, write_changes_file):
        # type: (...) -> None
        path = write_changes_file('bzr-gtk_0.93.0-2_source.changes',
                                  UNSIGNED_CHANGES)
        with pytest.raises(changes.ChangesFileError):
            changes.ChangesFile.from_file(path)

    def test_missing_changes_field(self, write_changes_file):
        # type: (...) -> None
        text = UNSIGNED_CHANGES.split('Changes:')[0] + \
            'Files:' + UNSIGNED_CHANGES.split('Files:')[1]
        path = write_changes_file('bzr-gtk_0.93.0-2_source.changes', text)
        with pytest.raises(changes.ChangesFileError):
            changes.ChangesFile.from_file(path)

    def test_unparseable_changes_field(self, write_changes_file):
        # type: (...) -> None
        text = UNSIGNED_CHANGES.replace(
            ' bzr-gtk (0.93.0-2) unstable; urgency=low\n',
            ' Just some words\n')
        path = write_changes_file('bzr-gtk_0.93.0-2_source.changes', text)
        with pytest.raises(changes.ChangesFileError):
            changes.ChangesFile.from_file(path)
