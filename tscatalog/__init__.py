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

"""Loading and lookup of Qt Linguist translation catalogs."""

from tscatalog.catalog import Catalog, Entry, Location, Status  # noqa: F401
from tscatalog.fileio import (  # noqa: F401
    LoadError,
    MalformedResource,
    UnsupportedVersion,
    load_catalog,
    load_catalog_from_string,
)
from tscatalog.selector import LocaleSelector  # noqa: F401
from tscatalog.translator import CatalogTranslator, translate  # noqa: F401
