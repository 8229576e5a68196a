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

"""String lookup against a catalog.

A missing or incomplete translation is never an error: the caller gets
the source text back and the GUI shows the original string.
"""

from PyQt6 import QtCore

from tscatalog.catalog import Status


def lookup(catalog, context, source, comment=''):
    """Return the usable translation for the message, or None if the
    source text should be shown instead."""

    if catalog is None:
        return None
    if not isinstance(context, str) or not isinstance(source, str):
        return None
    if comment is not None and not isinstance(comment, str):
        return None
    entry = catalog.get(context, source, comment)
    if entry is None or entry.status == Status.OBSOLETE:
        return None
    if not entry.translation:
        return None
    return entry.translation


def translate(catalog, context, source, comment=''):
    translation = lookup(catalog, context, source, comment)
    if translation is None:
        return source
    return translation


class CatalogTranslator(QtCore.QTranslator):
    """Makes a catalog available to ``QCoreApplication.translate`` and
    ``QObject.tr``.

    Install with ``app.installTranslator(translator)``. Untranslated
    messages return None, which Qt receives as a null string, so it
    falls through to the next translator and finally to the source text.
    """

    def __init__(self, catalog, parent=None):
        super().__init__(parent)
        self._catalog = catalog

    @property
    def catalog(self):
        return self._catalog

    def translate(self, context, source_text, disambiguation=None, n=-1):
        return lookup(
            self.catalog, context, source_text, disambiguation or '')

    def isEmpty(self):
        catalog = self.catalog
        return catalog is None or len(catalog) == 0

    def language(self):
        catalog = self.catalog
        if catalog is None:
            return ''
        return catalog.language
