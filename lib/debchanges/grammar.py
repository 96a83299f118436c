""" Regular-expression grammar for Debian changelog entries

A changelog (see `deb-changelog(5)
<https://manpages.debian.org/dpkg-dev/deb-changelog.5.html>`_) is a
series of entries like this::

    package (version) distribution(s); urgency=urgency
    [optional blank line(s)]
      * change details
        more change details
    [blank line(s)]
      * even more change details
    [optional blank line(s)]
     -- maintainer name <email address>[two spaces]date

The patterns below are composed from small named pieces.  Two patterns are
exported:

- :data:`entry_re` matches one complete entry at the start of a buffer,
  including the blank lines before and after it.
- :data:`changes_re` matches the ``Changes`` field of a ``.changes`` file:
  a header line followed by an arbitrary body, with no signature.

Both are meant to be used with ``match()``: they only ever match at the
start of the text.
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

import re


opt_white = r'[ \t]*'
blank_line = opt_white + r'\n'
blank_lines = r'(?:' + blank_line + r')*'

# package (version) dist1 dist2; urgency=low
package = r'(?P<package>[^ \t(\n]+)' + opt_white
version = r'\((?P<version>[^)\n]*)\)' + opt_white
distributions = r'(?P<distributions>[^;\n]*);' + opt_white
urgency = r'urgency=(?P<urgency>[^\n]*)\n' + blank_lines
header = package + version + distributions + urgency

# The same shape as the header, without groups, for use in lookaheads
header_line = (r'[^ \t(\n]+' + opt_white + r'\([^)\n]*\)' + opt_white
               + r'[^;\n]*;' + opt_white + r'urgency=')

# A line of change details is anything that can't be mistaken for the
# signature: it must not start with " --".  Lines starting at the left
# margin must not look like the header of the next entry either.
detail_line = (
    r'(?:'
    r'\n'
    r'| \n'
    r'| -\n'
    r'|(?:(?!' + header_line + r')[^ \n]| [^-\n]| -[^-\n])[^\n]*\n'
    r')'
)
change_details = r'(?P<changes>' + detail_line + r'*)'

# " -- " who "  " date: the maintainer runs up to the first double space.
# The two separator spaces are captured with the maintainer.
signature = r' -- (?P<author>[ ]*(?:[^ \n]+ )* )(?P<date>[^\n]*)\n'

entry = (r'(?P<leading>' + blank_lines + r')'
         + header + change_details + signature
         + r'(?P<trailing>' + blank_lines + r')')

changes_block = blank_lines + opt_white + header + r'(?P<changes>.*)\Z'

entry_re = re.compile(entry)
changes_re = re.compile(changes_block, re.DOTALL)

#: Groups every successful match of :data:`entry_re` must have filled in
entry_fields = ('package', 'version', 'distributions', 'urgency',
                'changes', 'author', 'date')

#: Groups every successful match of :data:`changes_re` must have filled in
changes_fields = ('package', 'version', 'distributions', 'urgency',
                  'changes')
