import os.path
import shutil
import pytest

from unittest.mock import patch


def pytest_configure(config):
    # Make the system locale predictable and allow running without a
    # display. This must be done before QApplication is created
    os.environ['LANGUAGE'] = 'C'
    os.environ['LC_ALL'] = 'C'
    os.environ['LANG'] = 'C'
    os.environ.setdefault('QT_QPA_PLATFORM', 'offscreen')


@pytest.fixture(autouse=True)
def settings(tmpdir):
    from tscatalog.config import TsSettings
    dir_patcher = patch('tscatalog.config.TsSettings.get_settings_dir',
                        return_value=tmpdir.dirname)
    dir_patcher.start()
    settings = TsSettings()
    yield settings
    settings.clear()
    dir_patcher.stop()


@pytest.fixture
def assets_dir():
    yield os.path.join(os.path.dirname(__file__), 'assets')


@pytest.fixture
def tsfilename(assets_dir):
    yield os.path.join(assets_dir, 'imageviewer_pam.ts')


@pytest.fixture
def tsdata(tsfilename):
    with open(tsfilename, 'rb') as f:
        tsdata = f.read()
    yield tsdata


@pytest.fixture
def catalog(tsfilename):
    from tscatalog.fileio import load_catalog
    yield load_catalog(tsfilename)


@pytest.fixture
def translations_dir(tmpdir, tsfilename):
    shutil.copy(tsfilename, os.path.join(tmpdir, 'imageviewer_pam.ts'))
    yield str(tmpdir)


@pytest.fixture
def selector(translations_dir):
    from tscatalog.selector import LocaleSelector
    selector = LocaleSelector(translations_path=translations_dir,
                              locale='pam')
    yield selector
    selector.close()


@pytest.fixture
def write_ts(tmpdir):
    """Write a .ts document into the temporary directory."""

    def _write_ts(content, filename='imageviewer_xx.ts'):
        path = os.path.join(tmpdir, filename)
        with open(path, 'w', encoding='utf-8') as f:
            f.write(content)
        return path

    yield _write_ts
