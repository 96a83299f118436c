""" Small value types naming things in a Debian archive

Release (distribution) names, architectures and archive sections appear
throughout changelogs and ``.changes`` files.  The parsers in this package
treat them as opaque identifiers: they are only ever compared, sorted and
written back out.
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
import urllib.parse

try:
    # pylint: disable=unused-import
    from typing import Union
except ImportError:
    # Missing types aren't important at runtime
    pass


# Characters allowed in a URI besides letters and digits (RFC 3986
# unreserved and reserved characters, plus "%"), except ";" which ends the
# distribution list of a changelog header
_URI_ALLOWED = "-._~:/?#[]@!$&'()*+,=%"


class ReleaseName(namedtuple('ReleaseName', ['name'])):
    """The name of a release (distribution) such as ``unstable``."""

    __slots__ = ()

    def __str__(self):
        # type: () -> str
        return release_name(self)


def parse_release_name(text):
    # type: (str) -> ReleaseName
    """ build a ReleaseName from its (possibly percent-encoded) text """
    return ReleaseName(urllib.parse.unquote(text))


def release_name(release):
    # type: (Union[ReleaseName, str]) -> str
    """Canonical text of a release name.

    Names such as ``stretch/updates`` or ``trusty+1`` are written as they
    are.  Whitespace, ``;`` and other characters not allowed in a URI are
    percent-encoded, so the result is always a single token.
    """
    if isinstance(release, ReleaseName):
        release = release.name
    return urllib.parse.quote(release, safe=_URI_ALLOWED)


class Arch(namedtuple('Arch', ['name'])):
    """A build architecture.

    Besides concrete architectures (``amd64``, ``arm64``, ...) the special
    values :data:`SOURCE` and :data:`ALL` name source uploads and
    architecture-independent packages.
    """

    __slots__ = ()

    @property
    def is_source(self):
        # type: () -> bool
        return self.name == 'source'

    @property
    def is_all(self):
        # type: () -> bool
        return self.name == 'all'

    def __str__(self):
        # type: () -> str
        return arch_name(self)


SOURCE = Arch('source')
ALL = Arch('all')


def parse_arch(text):
    # type: (str) -> Arch
    return Arch(text.strip())


def arch_name(arch):
    # type: (Union[Arch, str]) -> str
    if isinstance(arch, Arch):
        return arch.name
    return str(arch)


class Section(namedtuple('Section', ['area', 'name'])):
    """An archive section, qualified by the archive area it lives in.

    Sections in the ``main`` area are written without the area, e.g.
    ``net``; sections in other areas carry it, e.g. ``contrib/net``.
    """

    __slots__ = ()

    def __str__(self):
        # type: () -> str
        return section_name(self)


def parse_section(text):
    # type: (str) -> Section
    """Parse a section as written in a Files field.

    >>> parse_section('contrib/net')
    Section(area='contrib', name='net')
    >>> section_name(parse_section('net'))
    'net'
    """
    if '/' in text:
        area, name = text.split('/', 1)
        return Section(area, name)
    return Section('main', text)


def section_name(section):
    # type: (Union[Section, str]) -> str
    """ render a section the way it is written in a Files field """
    if not isinstance(section, Section):
        return str(section)
    if section.area == 'main':
        return section.name
    return '%s/%s' % (section.area, section.name)
