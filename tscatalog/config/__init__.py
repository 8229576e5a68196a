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

"""Handling of Qt settings and logging configuration."""

import logging
import logging.config
import os.path

from PyQt6 import QtCore

from tscatalog import constants
from tscatalog.config.settings import (  # noqa F401
    TsSettings,
    settings_events,
)
from tscatalog.logging import qt_message_handler


logger = logging.getLogger(__name__)


def logfile_name():
    return os.path.join(
        os.path.dirname(TsSettings().fileName()), f'{constants.APPNAME}.log')


def get_logging_conf(loglevel=None):
    """Logging configuration for an application using TsCatalog.

    The console level defaults to the ``Logging/level`` setting.
    """

    if loglevel is None:
        loglevel = TsSettings().valueOrDefault('Logging/level')
    return {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'verbose': {
                'format': ('{asctime} {name} {process:d} {thread:d} '
                           '{message}'),
                'style': '{',
            },
            'simple': {
                'format': '{levelname} {name}: {message}',
                'style': '{',
            },
        },
        'handlers': {
            'console': {
                'class': 'logging.StreamHandler',
                'formatter': 'simple',
                'level': loglevel,
            },
            'file': {
                'class': 'tscatalog.logging.TsRotatingFileHandler',
                'formatter': 'verbose',
                'filename': logfile_name(),
                'maxBytes': 1024 * 1000,  # 1MB
                'backupCount': 1,
                'level': 'DEBUG',
                'delay': True,
            }
        },
        'loggers': {
            'tscatalog': {
                'handlers': ['console', 'file'],
                'level': 'TRACE',
                'propagate': False,
            },
            'Qt': {
                'handlers': ['console', 'file'],
                'level': 'DEBUG',
                'propagate': False,
            },
        },
        'root': {
            'handlers': ['console', 'file'],
            'level': 'DEBUG',
        },
    }


def configure_logging(loglevel=None):
    """Set up logging for the application and redirect Qt's messages.

    Importing tscatalog never touches the logging configuration; the
    application calls this once at startup if it wants TsCatalog's
    console and log file setup.
    """

    logging.config.dictConfig(get_logging_conf(loglevel))
    QtCore.qInstallMessageHandler(qt_message_handler)
    logger.debug(f'Logging to: {logfile_name()}')
