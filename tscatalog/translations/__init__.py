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

"""Translation resources shipped with TsCatalog.

This package contains Qt Linguist source files (.ts) named
imageviewer_{locale}.ts. They are read directly at runtime, no
compilation to .qm is needed.

Supported languages:
- pam (Kapampangan)

To add a new language:
1. Create imageviewer_{lang}.ts (copy from imageviewer_pam.ts)
2. Set the language attribute: <TS version="2.1" language="{lang}">
3. Translate the strings and remove type="unfinished" when done
"""

import os

TRANSLATIONS_PATH = os.path.dirname(__file__)
