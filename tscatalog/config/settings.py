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

import logging
import os
import os.path

from PyQt6 import QtCore

from tscatalog import constants
from tscatalog.translations import TRANSLATIONS_PATH


logger = logging.getLogger(__name__)

_NOT_FOUND = object()

LOGLEVELS = ('TRACE', 'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


class TsSettingsEvents(QtCore.QObject):
    restore_defaults = QtCore.pyqtSignal()


# Global instance, so that all settings objects share the same listeners
settings_events = TsSettingsEvents()


class TsSettings(QtCore.QSettings):

    FIELDS = {
        'General/language': {
            'default': constants.SYSTEM_LANGUAGE,
            'cast': str,
            'validate': lambda x: bool(x.strip()),
        },
        'General/translations_path': {
            'default': TRANSLATIONS_PATH,
            'cast': str,
            'validate': lambda x: os.path.isdir(x),
        },
        'Logging/level': {
            'default': 'INFO',
            'cast': lambda x: str(x).upper(),
            'validate': lambda x: x in LOGLEVELS,
        },
    }

    def __init__(self):
        settings_format = QtCore.QSettings.Format.IniFormat
        settings_scope = QtCore.QSettings.Scope.UserScope
        QtCore.QSettings.setPath(
            settings_format,
            settings_scope,
            self.get_settings_dir())
        super().__init__(
            settings_format,
            settings_scope,
            constants.APPNAME,
            constants.APPNAME)

    @staticmethod
    def get_settings_dir():
        settings_dir = os.environ.get('TSCATALOG_SETTINGS_DIR')
        if settings_dir:
            return settings_dir
        return QtCore.QStandardPaths.writableLocation(
            QtCore.QStandardPaths.StandardLocation.GenericConfigLocation)

    def valueOrDefault(self, key):
        """Get the value for key, or the default value specified in
        FIELDS if the key doesn't exist or holds an invalid value."""

        field = self.FIELDS[key]
        val = self.value(key, _NOT_FOUND)
        if val is _NOT_FOUND:
            return field['default']

        if 'cast' in field:
            try:
                val = field['cast'](val)
            except (TypeError, ValueError):
                logger.warning(f'Invalid value for {key}: {val!r}')
                return field['default']

        if 'validate' in field and not field['validate'](val):
            logger.warning(f'Invalid value for {key}: {val!r}')
            return field['default']

        return val

    def value_changed(self, key):
        return self.valueOrDefault(key) != self.FIELDS[key]['default']

    def restore_defaults(self):
        logger.debug('Restoring settings to defaults')
        for key in self.FIELDS:
            self.remove(key)
        settings_events.restore_defaults.emit()
