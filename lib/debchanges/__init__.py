""" Parsers and renderers for Debian changelogs and .changes files """

# pylint: disable=useless-import-alias
from debchanges.changelog import (
    ChangeLogEntry as ChangeLogEntry,
    ChangelogDiagnostic as ChangelogDiagnostic,
    ChangelogParseError as ChangelogParseError,
    Entry as Entry,
    InternalInconsistencyError as InternalInconsistencyError,
    MalformedEntryError as MalformedEntryError,
    WhiteSpace as WhiteSpace,
    parse_changes as parse_changes,
    parse_entry as parse_entry,
    parse_log as parse_log,
    pretty_entry as pretty_entry,
)
from debchanges.changes import (
    ChangedFileSpec as ChangedFileSpec,
    ChangesFile as ChangesFile,
    ChangesFileError as ChangesFileError,
    changes_file_name as changes_file_name,
    pretty_changes as pretty_changes,
    pretty_changes_file as pretty_changes_file,
)

__all__ = [
    'ChangeLogEntry',
    'ChangelogDiagnostic',
    'ChangelogParseError',
    'Entry',
    'InternalInconsistencyError',
    'MalformedEntryError',
    'WhiteSpace',
    'parse_changes',
    'parse_entry',
    'parse_log',
    'pretty_entry',
    'ChangedFileSpec',
    'ChangesFile',
    'ChangesFileError',
    'changes_file_name',
    'pretty_changes',
    'pretty_changes_file',
]
