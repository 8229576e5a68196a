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

"""Reader for Qt Linguist translation source files (.ts)."""

import logging

from lxml import etree

from tscatalog import constants
from tscatalog.catalog import Catalog, Entry, Location, Status
from tscatalog.logging import TRACE
from tscatalog.fileio.errors import (
    MalformedResource,
    TsFileIOError,
    UnsupportedVersion,
)


logger = logging.getLogger(__name__)


def _text(element):
    if element is None:
        return ''
    # Plural and length variants: the first form is the one used
    for variant in ('numerusform', 'lengthvariant'):
        child = element.find(variant)
        if child is not None:
            return child.text or ''
    return element.text or ''


class TsReader:
    """Parses a .ts document into a Catalog.

    Either ``filename`` or ``data`` (bytes or str) must be given. The
    whole document is parsed before the catalog is built, so a defect
    anywhere in it means no catalog at all.
    """

    def __init__(self, filename=None, data=None):
        if (filename is None) == (data is None):
            raise ValueError('Need exactly one of filename or data')
        self.filename = filename
        self.data = data

    def _parser(self):
        return etree.XMLParser(
            resolve_entities=False, no_network=True, remove_comments=True)

    def _parse_root(self):
        try:
            if self.filename is not None:
                tree = etree.parse(self.filename, self._parser())
                return tree.getroot()
            data = self.data
            if isinstance(data, str):
                data = data.encode('utf-8')
            return etree.fromstring(data, self._parser())
        except etree.XMLSyntaxError as e:
            raise MalformedResource(
                f'Invalid XML: {e}', self.filename) from e
        except OSError as e:
            raise TsFileIOError(
                f'Could not read file: {e}', self.filename) from e

    def read(self):
        if self.filename:
            logger.info(f'Reading translation file {self.filename}')
        root = self._parse_root()

        if root.tag != 'TS':
            raise MalformedResource(
                f'Expected <TS> root element, found <{root.tag}>',
                self.filename)

        version = root.get('version')
        if version not in constants.SUPPORTED_TS_VERSIONS:
            raise UnsupportedVersion(version, self.filename)

        entries = []
        for context_el in root.iterfind('context'):
            entries.extend(self._read_context(context_el))

        catalog = Catalog(
            entries,
            language=root.get('language', ''),
            source_language=root.get('sourcelanguage', ''),
            version=version)
        logger.debug(
            f'Read {len(catalog)} messages in '
            f'{len(catalog.contexts())} contexts')
        return catalog

    def _read_context(self, context_el):
        name = (context_el.findtext('name') or '').strip()
        if not name:
            raise MalformedResource(
                f'Context without name at line {context_el.sourceline}',
                self.filename)

        for message_el in context_el.iterfind('message'):
            yield self._read_message(name, message_el)

    def _read_message(self, context, message_el):
        source_el = message_el.find('source')
        if source_el is None:
            raise MalformedResource(
                f'Message without source in context {context!r} '
                f'at line {message_el.sourceline}',
                self.filename)

        translation_el = message_el.find('translation')
        if translation_el is None:
            status = Status.UNFINISHED
        else:
            type_attr = translation_el.get('type')
            status = Status.from_type_attr(type_attr)
            if status is None:
                raise MalformedResource(
                    f'Unknown translation type {type_attr!r} '
                    f'at line {translation_el.sourceline}',
                    self.filename)

        entry = Entry(
            context,
            _text(source_el),
            translation=_text(translation_el),
            status=status,
            comment=message_el.findtext('comment') or '',
            locations=self._read_locations(message_el))
        logger.log(TRACE, f'{context}: {entry.source!r} ({status.value})')
        return entry

    def _read_locations(self, message_el):
        """Resolve <location> elements. Newer files store line numbers
        relative to the previous location of the same message."""

        locations = []
        filename = ''
        line = 0
        for location_el in message_el.iterfind('location'):
            filename = location_el.get('filename', filename)
            raw_line = location_el.get('line', '')
            try:
                if raw_line[:1] in ('+', '-'):
                    line += int(raw_line)
                elif raw_line:
                    line = int(raw_line)
            except ValueError:
                logger.debug(f'Ignoring invalid location line {raw_line!r}')
            locations.append(Location(filename, line))
        return tuple(locations)
