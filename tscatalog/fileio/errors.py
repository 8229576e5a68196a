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


class TsFileIOError(Exception):
    def __init__(self, msg, filename=None):
        super().__init__(msg)
        self.msg = msg
        self.filename = filename

    def __str__(self):
        if self.filename:
            return f'{self.filename}: {self.msg}'
        return self.msg


class MalformedResource(TsFileIOError):
    """The document is not a well-formed translation resource."""


class UnsupportedVersion(TsFileIOError):

    def __init__(self, version, filename=None):
        super().__init__(
            f'Unsupported translation file version: {version!r}', filename)
        self.version = version


class LoadError(TsFileIOError):
    """A locale could not be activated. The underlying problem is
    available as ``__cause__``."""

    def __init__(self, msg, locale, filename=None):
        super().__init__(msg, filename)
        self.locale = locale
