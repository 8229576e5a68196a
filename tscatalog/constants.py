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

APPNAME = 'TsCatalog'
VERSION = '0.1.0'

# Resource files are named <prefix>_<locale>.ts
RESOURCE_PREFIX = 'imageviewer'
RESOURCE_SUFFIX = '.ts'

# Qt Linguist format versions understood by the loader
SUPPORTED_TS_VERSIONS = ('1.1', '2.0', '2.1')

# Language the source strings are written in
SOURCE_LANGUAGE = 'en'
SYSTEM_LANGUAGE = 'system'
