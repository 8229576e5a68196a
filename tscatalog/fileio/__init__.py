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

from PyQt6 import QtCore

from tscatalog.fileio.errors import (
    LoadError,
    MalformedResource,
    TsFileIOError,
    UnsupportedVersion,
)
from tscatalog.fileio.ts import TsReader


__all__ = [
    'load_catalog',
    'load_catalog_from_string',
    'ThreadedLoader',
    'TsFileIOError',
    'MalformedResource',
    'UnsupportedVersion',
    'LoadError',
]

logger = logging.getLogger(__name__)


def load_catalog(filename):
    """Load a catalog from a .ts file."""
    logger.info(f'Loading catalog from file {filename}...')
    return TsReader(filename=filename).read()


def load_catalog_from_string(data):
    """Load a catalog from a .ts document held in memory."""
    return TsReader(data=data).read()


class ThreadedLoader(QtCore.QThread):
    """Dedicated thread for loading catalogs away from the GUI thread.

    Emits ``loaded`` with the function's result, or ``failed`` with a
    TsFileIOError. Other exceptions raised by the function are wrapped
    in a TsFileIOError, so exactly one of the two signals is emitted.
    """

    loaded = QtCore.pyqtSignal(object)
    failed = QtCore.pyqtSignal(object)

    def __init__(self, func, *args, **kwargs):
        super().__init__()
        self.func = func
        self.args = args
        self.kwargs = kwargs

    def run(self):
        try:
            result = self.func(*self.args, **self.kwargs)
        except TsFileIOError as e:
            logger.warning(f'Loading failed: {e}')
            self.failed.emit(e)
        except Exception as e:
            logger.exception('Loading failed with unexpected error')
            error = TsFileIOError(f'Unexpected error: {e}')
            error.__cause__ = e
            self.failed.emit(error)
        else:
            self.loaded.emit(result)
