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

"""Selection of the active locale.

A LocaleSelector owns the catalog that lookups go through. Switching
locale loads the new catalog completely before replacing the active
one, so a lookup running at the same time sees either the old or the
new catalog, never a mix of both.
"""

from collections import namedtuple
import logging
import os
import threading

from PyQt6 import QtCore

from tscatalog import constants
from tscatalog.catalog import Catalog
from tscatalog.config import TsSettings
from tscatalog.fileio import LoadError, TsFileIOError, load_catalog
from tscatalog.translator import CatalogTranslator, translate


logger = logging.getLogger(__name__)

ActiveLocale = namedtuple('ActiveLocale', ['locale', 'catalog'])


def normalize_locale(value):
    """Turn locale names like ``pam-PH``, ``de_DE.UTF-8`` or
    ``sr_RS@latin`` into the ``pam_PH`` form used in file names."""

    raw = (value or '').strip()
    raw = raw.split('.', 1)[0].split('@', 1)[0]
    raw = raw.replace('-', '_')
    if raw in ('C', 'POSIX'):
        return constants.SOURCE_LANGUAGE
    return raw


def system_locale():
    return normalize_locale(QtCore.QLocale.system().name())


class LocaleTranslator(CatalogTranslator):
    """Translator that always uses the catalog active in a selector."""

    def __init__(self, selector, parent=None):
        super().__init__(None, parent)
        self.selector = selector

    @property
    def catalog(self):
        return self.selector.catalog


class LocaleSelector(QtCore.QObject):
    """Holds the active locale and its catalog.

    If no locale is given, the ``General/language`` setting decides;
    ``system`` means the locale of the operating system. Failing to load
    the initial locale is not fatal: the selector then starts with the
    source language.
    """

    locale_changed = QtCore.pyqtSignal(str)

    def __init__(self, translations_path=None,
                 prefix=constants.RESOURCE_PREFIX, locale=None,
                 settings=None, parent=None):
        super().__init__(parent)
        self.settings = settings or TsSettings()
        self.translations_path = (
            translations_path
            or self.settings.valueOrDefault('General/translations_path'))
        self.prefix = prefix
        self._switch_lock = threading.Lock()
        self._active = ActiveLocale(
            constants.SOURCE_LANGUAGE,
            Catalog.empty(constants.SOURCE_LANGUAGE))
        self._initialize(locale)

    def _initialize(self, locale):
        if locale is None:
            locale = self.settings.valueOrDefault('General/language')
        if locale == constants.SYSTEM_LANGUAGE:
            locale = system_locale()
            logger.debug(f'Using system locale: {locale}')

        try:
            self._switch(locale)
        except LoadError as e:
            logger.warning(
                f'{e}. Falling back to {constants.SOURCE_LANGUAGE}')

    def current_locale(self):
        return self._active.locale

    @property
    def catalog(self):
        return self._active.catalog

    def set_active_locale(self, locale):
        """Load the catalog for ``locale`` and make it the active one.

        Raises LoadError if the catalog can't be loaded. The previously
        active locale then stays in effect.
        """

        locale = self._switch(locale)
        self.locale_changed.emit(locale)

    def _switch(self, locale):
        with self._switch_lock:
            locale_code = normalize_locale(locale)
            catalog = self._load(locale_code)
            self._active = ActiveLocale(locale_code, catalog)
        logger.info(f'Active locale: {locale_code} ({len(catalog)} messages)')
        return locale_code

    def _load(self, locale):
        if not locale:
            raise LoadError(f'Invalid locale: {locale!r}', locale)

        for candidate in self.candidates(locale):
            path = self.resource_path(candidate)
            if not os.path.exists(path):
                logger.debug(f'No translation file {path}')
                continue
            try:
                return load_catalog(path)
            except TsFileIOError as e:
                raise LoadError(
                    f'Could not load locale {locale}: {e.msg}',
                    locale, path) from e

        if locale.split('_')[0] == constants.SOURCE_LANGUAGE:
            return Catalog.empty(locale)
        raise LoadError(f'No translation file for locale {locale}', locale)

    def candidates(self, locale):
        """Locale codes to try, most specific first: ``pam_PH``, ``pam``."""
        candidates = [locale]
        language = locale.split('_')[0]
        if language != locale:
            candidates.append(language)
        return candidates

    def resource_path(self, locale):
        filename = f'{self.prefix}_{locale}{constants.RESOURCE_SUFFIX}'
        return os.path.join(self.translations_path, filename)

    def available_locales(self):
        """Scan the translations directory for available .ts files."""
        available = {constants.SOURCE_LANGUAGE}
        start = f'{self.prefix}_'
        if os.path.isdir(self.translations_path):
            for filename in os.listdir(self.translations_path):
                if (filename.startswith(start)
                        and filename.endswith(constants.RESOURCE_SUFFIX)):
                    locale = filename[len(start):-len(
                        constants.RESOURCE_SUFFIX)]
                    if locale:
                        available.add(locale)
        return sorted(available)

    def translate(self, context, source, comment=''):
        return translate(self._active.catalog, context, source, comment)

    def create_translator(self, parent=None):
        """Return a QTranslator that follows this selector: after a
        locale switch it serves the new catalog without reinstalling."""
        return LocaleTranslator(self, parent)

    def close(self):
        logger.debug(f'Releasing catalog for {self._active.locale}')
        self._active = ActiveLocale(self._active.locale, None)
