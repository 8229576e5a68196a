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
import logging.handlers
import os

from PyQt6 import QtCore


TRACE = 5
logging.TRACE = TRACE
logging.addLevelName(TRACE, 'TRACE')


class TsLogger(logging.getLoggerClass()):

    def trace(self, msg, *args, **kwargs):
        self.log(TRACE, msg, *args, **kwargs)


logging.setLoggerClass(TsLogger)


class TsRotatingFileHandler(logging.handlers.RotatingFileHandler):
    """Rotating file handler that creates the log directory on demand."""

    def __init__(self, filename, **kwargs):
        dirname = os.path.dirname(filename)
        if dirname and not os.path.exists(dirname):
            os.makedirs(dirname)
        super().__init__(filename, **kwargs)


qtlogger = logging.getLogger('Qt')

QT_LOG_LEVELS = {
    QtCore.QtMsgType.QtDebugMsg: 'debug',
    QtCore.QtMsgType.QtInfoMsg: 'info',
    QtCore.QtMsgType.QtWarningMsg: 'warning',
    QtCore.QtMsgType.QtCriticalMsg: 'error',
    QtCore.QtMsgType.QtFatalMsg: 'critical',
}


def qt_message_handler(msg_type, context, msg):
    """Forward Qt's own log messages (including failed QTranslator
    loads) to the Python logger named ``Qt``."""

    if context and context.file:
        msg = f'{msg}: File {context.file}, line {context.line}, ' \
            f'in {context.function}'
    log = getattr(qtlogger, QT_LOG_LEVELS.get(msg_type, 'warning'))
    log(msg)
