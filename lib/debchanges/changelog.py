""" Facilities for reading and writing Debian changelogs

The format for the changelog is defined in
`deb-changelog(5) <https://manpages.debian.org/dpkg-dev/deb-changelog.5.html>`_;
the grammar used to recognise it lives in :mod:`debchanges.grammar`.

Overview
--------

:func:`parse_log` turns the text of a whole changelog into a lazy sequence
of :class:`Entry` objects, most recent first::

    with open("debian/changelog", encoding="utf-8") as f:
        latest = next(parse_log(f.read()))
    print(latest.version)

Parsing stops at the first entry that cannot be parsed.  By default a
:class:`ChangelogDiagnostic` describing the problem is logged and yielded
as the last item of the sequence; pass ``strict=True`` to have the
corresponding exception raised instead.

:func:`parse_entry` parses a single entry off the front of a buffer and
hands back the text it did not consume.  :func:`parse_changes` parses the
``Changes`` field of a ``.changes`` file, which holds one entry without a
signature line.

Entries are immutable.  ``str(entry)`` renders an entry in the canonical
changelog layout (see :func:`pretty_entry`).

Classes
-------
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

from debian.debian_support import Version

from debchanges import grammar
from debchanges.archive import parse_release_name, release_name

try:
    # pylint: disable=unused-import
    from typing import (
        Any,
        Iterator,
        List,
        Optional,
        Tuple,
        Union,
    )
except ImportError:
    # Missing types aren't important at runtime
    pass


logger = logging.getLogger(__name__)


MALFORMED_ENTRY = 'malformed-entry'
INTERNAL_INCONSISTENCY = 'internal-inconsistency'


class ChangelogParseError(Exception):
    """Indicates that the changelog could not be parsed"""
    is_user_error = True

    def __init__(self, message):
        # type: (str) -> None
        self._message = message
        super(ChangelogParseError, self).__init__(message)

    def __str__(self):
        # type: () -> str
        return "Could not parse changelog: " + self._message


class MalformedEntryError(ChangelogParseError):
    """No changelog entry could be recognised at the current position"""


class InternalInconsistencyError(Exception):
    """The grammar matched but did not produce the expected fields

    This points at a bug in the grammar rather than at bad input.
    """
    is_user_error = False


class ChangelogDiagnostic(namedtuple('ChangelogDiagnostic',
                                     ['kind', 'messages'])):
    """Describes why an entry could not be parsed.

    ``kind`` is either :data:`MALFORMED_ENTRY` or
    :data:`INTERNAL_INCONSISTENCY`; ``messages`` is a non-empty list of
    strings.
    """

    __slots__ = ()

    def exception(self):
        # type: () -> Exception
        """ the exception to raise for this diagnostic in strict mode """
        message = '\n'.join(self.messages)
        if self.kind == INTERNAL_INCONSISTENCY:
            return InternalInconsistencyError(message)
        return MalformedEntryError(message)

    def __str__(self):
        # type: () -> str
        return '\n'.join(self.messages)


class ChangeLogEntry(object):
    """Base class of the items a changelog is made of.

    An item is either an :class:`Entry` or a :class:`WhiteSpace` run
    separating entries.
    """

    __slots__ = ()

    def __str__(self):
        # type: () -> str
        return pretty_entry(self)

    def __bytes__(self):
        # type: () -> bytes
        return str(self).encode('utf-8')


class Entry(namedtuple('Entry', ['package', 'version', 'distributions',
                                 'urgency', 'changes', 'author', 'date']),
            ChangeLogEntry):
    """Holds all the information about one entry of a changelog.

    ``version`` is a :class:`debian.debian_support.Version` and
    ``distributions`` a tuple of :class:`debchanges.archive.ReleaseName`.
    ``changes`` is the change details exactly as they appeared, blank lines
    included.  ``author`` and ``date`` come verbatim from the signature
    line; both are empty for entries taken from a ``.changes`` file.
    """

    __slots__ = ()

    @property
    def header(self):
        # type: () -> str
        """ the first line of the entry, without the newline """
        return '%s (%s) %s; urgency=%s' % (
            self.package, self.version,
            ' '.join(release_name(d) for d in self.distributions),
            self.urgency)


class WhiteSpace(namedtuple('WhiteSpace', ['text']), ChangeLogEntry):
    """Blank lines found between changelog entries, kept verbatim."""

    __slots__ = ()


def _entry_from_match(match, fields, text):
    # type: (...) -> Union[Entry, ChangelogDiagnostic]
    groups = match.groupdict()
    if any(groups.get(field) is None for field in fields):
        return ChangelogDiagnostic(INTERNAL_INCONSISTENCY, [
            "Internal error",
            " after=%r" % text[match.end():],
            " %d matches: %r" % (len(match.groups()), match.groups()),
        ])
    try:
        version = Version(groups['version'])
    except ValueError as e:
        return ChangelogDiagnostic(MALFORMED_ENTRY, [
            "Invalid version in header: %s" % e,
            "Parse error in %r" % text,
        ])
    author = groups.get('author') or ''
    return Entry(package=groups['package'],
                 version=version,
                 distributions=tuple(parse_release_name(d) for d
                                     in groups['distributions'].split()),
                 urgency=groups['urgency'],
                 changes=groups['changes'],
                 # the two spaces separating the maintainer from the date
                 author=author[:-2],
                 date=groups.get('date') or '')


def _match_entry(text):
    # type: (str) -> Union[None, ChangelogDiagnostic, Tuple[str, Entry, str, str]]
    if not text.strip():
        return None
    match = grammar.entry_re.match(text)
    if match is None:
        return ChangelogDiagnostic(MALFORMED_ENTRY,
                                   ["Parse error in %r" % text])
    entry = _entry_from_match(match, grammar.entry_fields, text)
    if isinstance(entry, ChangelogDiagnostic):
        return entry
    return (match.group('leading'), entry, match.group('trailing'),
            text[match.end():])


def parse_entry(text, encoding='utf-8'):
    # type: (Union[str, bytes], str) -> Union[None, ChangelogDiagnostic, Tuple[Entry, str]]
    """Parse a single changelog entry from the front of ``text``.

    Blank lines before and after the entry are consumed with it.

    :returns: ``(entry, remaining_text)`` on success, a
        :class:`ChangelogDiagnostic` if no entry could be parsed, or
        ``None`` if ``text`` holds nothing but whitespace.
    """
    if isinstance(text, bytes):
        text = text.decode(encoding)
    result = _match_entry(text)
    if result is None or isinstance(result, ChangelogDiagnostic):
        return result
    _, entry, _, remaining = result
    return entry, remaining


def parse_log(text, strict=False, max_entries=None, keep_whitespace=False,
              encoding='utf-8'):
    # type: (Union[str, bytes], bool, Optional[int], bool, str) -> Iterator[Union[ChangeLogEntry, ChangelogDiagnostic]]
    """Parse a whole changelog, lazily yielding its entries in order.

    Args:
      text: The contents of the changelog, as str or bytes.
      strict: Whether to raise an exception when an entry can't be parsed.
          (Default: log a warning and yield a :class:`ChangelogDiagnostic`)
      max_entries: The maximum number of entries to parse.
          (Default: no limit)
      keep_whitespace: Whether to yield the blank lines around entries as
          :class:`WhiteSpace` items, in the position they were found.
      encoding: The encoding used to decode ``text`` if it is bytes.

    Parsing never resumes after a bad entry: the diagnostic (if any) is
    the last item produced.
    """
    if isinstance(text, bytes):
        text = text.decode(encoding)
    remaining = text
    count = 0
    while remaining:
        if max_entries is not None and count >= max_entries:
            return
        result = _match_entry(remaining)
        if result is None:
            if keep_whitespace:
                yield WhiteSpace(remaining)
            return
        if isinstance(result, ChangelogDiagnostic):
            if strict:
                raise result.exception()
            logger.warning("%s", result)
            yield result
            return
        leading, entry, trailing, remaining = result
        if keep_whitespace and leading:
            yield WhiteSpace(leading)
        yield entry
        count += 1
        if keep_whitespace and trailing:
            yield WhiteSpace(trailing)


def read_changelog(filename, encoding='utf-8', **kwargs):
    # type: (str, str, **Any) -> List[Union[ChangeLogEntry, ChangelogDiagnostic]]
    """ read and parse the changelog in ``filename``

    Extra keyword arguments are passed on to :func:`parse_log`.
    """
    with open(filename, encoding=encoding) as f:
        return list(parse_log(f.read(), **kwargs))


def parse_changes(text):
    # type: (str) -> Optional[Entry]
    """Parse the changelog entry in the ``Changes`` field of a .changes file

    The field holds a single entry without a signature line, so everything
    after the header (signature-like lines included) ends up in
    ``changes``.  ``author`` and ``date`` are empty.

    :returns: the entry, or ``None`` if ``text`` doesn't start with a
        header line.
    """
    match = grammar.changes_re.match(text)
    if match is None:
        return None
    entry = _entry_from_match(match, grammar.changes_fields, text)
    if isinstance(entry, ChangelogDiagnostic):
        if entry.kind == INTERNAL_INCONSISTENCY:
            raise entry.exception()
        logger.debug("Ignoring Changes field: %s", entry)
        return None
    return entry


def pretty_entry(entry):
    # type: (ChangeLogEntry) -> str
    """Render an entry in the canonical changelog layout.

    The result is the header line, a blank line, the change details, the
    signature line and a final blank line.  Nothing is validated; fields
    containing newlines produce text that won't parse back.
    """
    if isinstance(entry, WhiteSpace):
        return entry.text
    return (entry.header + "\n\n" + entry.changes
            + " -- " + entry.author + "  " + entry.date + "\n\n")


def show_header(entry):
    # type: (Entry) -> str
    """Just the top line of an entry, for debugging output.

    >>> show_header(Entry('hello', Version('2.10-3'),
    ...                   (parse_release_name('unstable'),), 'low', '', '', ''))
    'hello (2.10-3) unstable; urgency=low...'
    """
    return entry.header + "..."
