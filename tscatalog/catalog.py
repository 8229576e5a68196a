# This file is part of TsCatalog.
#
# TsCatalog is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# TsCatalog is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with TsCatalog.  If not, see <https://www.gnu.org/licenses/>.

"""In-memory translation catalogs.

A catalog holds every message of one locale, keyed by
(context, source, comment). Catalogs and their entries are immutable;
switching languages means building a new catalog, never editing an
existing one.
"""

from collections import Counter, namedtuple
import enum
import logging
from types import MappingProxyType


logger = logging.getLogger(__name__)


class Status(enum.Enum):
    FINISHED = 'finished'
    UNFINISHED = 'unfinished'
    OBSOLETE = 'obsolete'

    @classmethod
    def from_type_attr(cls, value):
        """Map the ``type`` attribute of a ``<translation>`` element."""
        if not value:
            return cls.FINISHED
        if value == 'unfinished':
            return cls.UNFINISHED
        if value in ('obsolete', 'vanished'):
            return cls.OBSOLETE
        return None


Location = namedtuple('Location', ['filename', 'line'])


class Entry(namedtuple(
        'Entry',
        ['context', 'source', 'translation', 'status', 'comment',
         'locations'])):
    __slots__ = ()

    def __new__(cls, context, source, translation='',
                status=Status.FINISHED, comment='', locations=()):
        return super().__new__(
            cls, context, source, translation, status, comment,
            tuple(locations))

    @property
    def key(self):
        return (self.context, self.source, self.comment)

    @property
    def is_finished(self):
        return self.status == Status.FINISHED

    @property
    def is_obsolete(self):
        return self.status == Status.OBSOLETE


class Catalog:
    """Immutable, queryable set of entries for one locale."""

    def __init__(self, entries, language='', source_language='',
                 version=''):
        self._language = language
        self._source_language = source_language
        self._version = version

        self._entries = tuple(entries)
        index = {}
        contexts = {}
        for entry in self._entries:
            if entry.key in index:
                logger.warning(
                    f'Duplicate message {entry.source!r} in context '
                    f'{entry.context!r}, using the last one')
            index[entry.key] = entry
            contexts.setdefault(entry.context, []).append(entry)
        self._index = MappingProxyType(index)
        self._contexts = MappingProxyType(
            {name: tuple(items) for name, items in contexts.items()})

    @property
    def language(self):
        return self._language

    @property
    def source_language(self):
        return self._source_language

    @property
    def version(self):
        return self._version

    @classmethod
    def empty(cls, language=''):
        return cls((), language=language, source_language=language)

    def __len__(self):
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)

    def __contains__(self, key):
        return key in self._index

    def __repr__(self):
        return (f'<{self.__class__.__name__} language={self.language!r} '
                f'entries={len(self)}>')

    def get(self, context, source, comment=''):
        return self._index.get((context, source, comment or ''))

    def contexts(self):
        return list(self._contexts.keys())

    def entries(self, context):
        return self._contexts.get(context, ())

    def stats(self):
        counts = Counter(entry.status for entry in self._entries)
        return {status: counts.get(status, 0) for status in Status}
