""" Access to the .changes files generated by dpkg-buildpackage

A ``.changes`` file describes the result of a package build: which package
and version were built, for which architecture and release, the files that
were produced (with their checksums), and, in its ``Changes`` field, the
changelog entry of the upload.

The paragraph itself is read with :class:`debian.deb822.Changes`; this
module pulls the pieces of it that matter into a :class:`ChangesFile`.
"""

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

from collections import namedtuple
import logging
import os.path

from debian import deb822
from debian.debian_support import Version

from debchanges.archive import (
    arch_name,
    parse_arch,
    parse_release_name,
    parse_section,
    section_name,
)
from debchanges.changelog import parse_changes

try:
    # pylint: disable=unused-import
    from typing import (
        Iterable,
        Tuple,
    )
    from debchanges.archive import Arch
except ImportError:
    # Missing types aren't important at runtime
    pass


logger = logging.getLogger(__name__)


class ChangesFileError(ValueError):
    """Indicates that a .changes file is incomplete or badly named"""
    is_user_error = True


class ChangedFileSpec(namedtuple('ChangedFileSpec', [
        'md5sum', 'sha1sum', 'sha256sum', 'size', 'section', 'priority',
        'name'])):
    """One of the files listed in a .changes file."""

    __slots__ = ()

    def __str__(self):
        # type: () -> str
        return pretty_changes(self)


class ChangesFile(namedtuple('ChangesFile', [
        'directory', 'package', 'version', 'release', 'arch', 'info',
        'entry', 'files'])):
    """A .changes file describing the result of a package build.

    ``directory`` is the directory holding the file; ``package``,
    ``version`` and ``arch`` come from the file name.  ``release`` is the
    Distribution field, ``info`` the whole :class:`debian.deb822.Changes`
    paragraph, ``entry`` the changelog entry from the Changes field and
    ``files`` the :class:`ChangedFileSpec` for each file of the upload.
    """

    __slots__ = ()

    @property
    def path(self):
        # type: () -> str
        return os.path.join(self.directory, changes_file_name(self))

    @classmethod
    def from_deb822(cls, info, directory, package, version, arch):
        # type: (deb822.Changes, str, str, Version, Arch) -> ChangesFile
        """ build a ChangesFile from an already parsed paragraph """
        try:
            release = parse_release_name(info['Distribution'])
        except KeyError:
            raise ChangesFileError("No Distribution field in %s" % package)
        text = info.get('Changes')
        if text is None:
            raise ChangesFileError("No Changes field in %s" % package)
        entry = parse_changes(text)
        if entry is None:
            raise ChangesFileError("Could not parse Changes field: %r" % text)
        return cls(directory=directory,
                   package=package,
                   version=version,
                   release=release,
                   arch=arch,
                   info=info,
                   entry=entry,
                   files=tuple(_changed_files(info)))

    @classmethod
    def from_file(cls, filename, encoding='utf-8'):
        # type: (str, str) -> ChangesFile
        """Read a .changes file.

        The file must be named ``<package>_<version>_<arch>.changes``.
        """
        directory, basename = os.path.split(filename)
        package, version, arch = parse_changes_file_name(basename)
        logger.debug("Reading %s", filename)
        with open(filename, encoding=encoding) as f:
            info = deb822.Changes(f)
        return cls.from_deb822(info, directory, package, version, arch)


def load_changes_file(filename, encoding='utf-8'):
    # type: (str, str) -> ChangesFile
    return ChangesFile.from_file(filename, encoding=encoding)


def _checksums(info, field, key):
    # type: (deb822.Changes, str, str) -> dict
    return {f['name']: f[key] for f in info.get(field, [])}


def _changed_files(info):
    # type: (deb822.Changes) -> Iterable[ChangedFileSpec]
    sha1 = _checksums(info, 'Checksums-Sha1', 'sha1')
    sha256 = _checksums(info, 'Checksums-Sha256', 'sha256')
    for f in info.get('Files', []):
        name = f['name']
        if name not in sha1:
            raise ChangesFileError("No SHA1 checksum for %s" % name)
        if name not in sha256:
            raise ChangesFileError("No SHA256 checksum for %s" % name)
        yield ChangedFileSpec(md5sum=f['md5sum'],
                              sha1sum=sha1[name],
                              sha256sum=sha256[name],
                              size=int(f['size']),
                              section=parse_section(f['section']),
                              priority=f['priority'],
                              name=name)


def parse_changes_file_name(filename):
    # type: (str) -> Tuple[str, Version, Arch]
    """Split ``<package>_<version>_<arch>.changes`` into its parts.

    >>> package, version, arch = parse_changes_file_name('hello_2.10-3_amd64.changes')
    >>> package, str(version), arch_name(arch)
    ('hello', '2.10-3', 'amd64')
    """
    stem, ext = os.path.splitext(os.path.basename(filename))
    parts = stem.split('_')
    if ext != '.changes' or len(parts) != 3 or not all(parts):
        raise ChangesFileError("Not a .changes file name: %s" % filename)
    package, version, arch = parts
    try:
        return package, Version(version), parse_arch(arch)
    except ValueError:
        raise ChangesFileError("Invalid version in file name: %s" % filename)


def changes_file_name(changes):
    # type: (ChangesFile) -> str
    return "%s_%s_%s.changes" % (changes.package, changes.version,
                                 arch_name(changes.arch))


def pretty_changes_file(changes):
    # type: (ChangesFile) -> str
    return changes_file_name(changes)


def pretty_changes(spec):
    # type: (ChangedFileSpec) -> str
    """Render a file the way it is listed in the Files field.

    That is ``md5sum size section priority name``, space separated.
    """
    return " ".join([spec.md5sum, str(spec.size),
                     section_name(spec.section), spec.priority, spec.name])
