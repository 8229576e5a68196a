import pytest

from tscatalog.catalog import Location, Status
from tscatalog.fileio import (
    MalformedResource,
    TsFileIOError,
    UnsupportedVersion,
    load_catalog,
    load_catalog_from_string,
)


TS_HEADER = '<?xml version="1.0" encoding="utf-8"?>\n<!DOCTYPE TS>\n'


def make_ts(body, version='2.1', language='xx'):
    return (f'{TS_HEADER}<TS version="{version}" language="{language}">'
            f'{body}</TS>')


def test_load_catalog_reads_metadata(tsfilename):
    catalog = load_catalog(tsfilename)
    assert catalog.language == 'pam'
    assert catalog.source_language == 'en'
    assert catalog.version == '2.1'


def test_load_catalog_reads_contexts_in_order(catalog):
    assert catalog.contexts() == [
        'FileControl', 'MainStack', 'ReName', 'RemoveDialog',
        'ViewRightMenu']


def test_load_catalog_reads_finished_entry(catalog):
    entry = catalog.get('FileControl', 'Fullscreen')
    assert entry.translation == 'Pangungusap'
    assert entry.status == Status.FINISHED
    assert entry.locations == (Location('../src/filecontrol.cpp', 781),)


def test_load_catalog_resolves_relative_locations(catalog):
    entry = catalog.get('FileControl', 'Rename')
    assert entry.locations == (
        Location('../src/filecontrol.cpp', 797),
        Location('../src/filecontrol.cpp', 809),
    )


def test_load_catalog_reads_unfinished_entries(catalog):
    entry = catalog.get('MainStack', 'Select pictures')
    assert entry.status == Status.UNFINISHED
    assert entry.translation == 'Piliin ang mga larawan'

    entry = catalog.get('MainStack', 'Image file not found')
    assert entry.status == Status.UNFINISHED
    assert entry.translation == ''


def test_load_catalog_reads_vanished_as_obsolete(catalog):
    entry = catalog.get('MainStack', 'Slide show')
    assert entry.status == Status.OBSOLETE


def test_load_catalog_decodes_entities(catalog):
    source = ('Cannot move "%1" to the trash. '
              'Do you want to permanently delete it?')
    entry = catalog.get('RemoveDialog', source)
    assert entry.translation == 'Ali ne mailipat ing "%1" king basura'


def test_load_catalog_reads_disambiguation_comment(catalog):
    assert catalog.get('ViewRightMenu', 'Copy').translation == 'Kopya'
    assert catalog.get(
        'ViewRightMenu', 'Copy', 'menu entry').translation == 'I-copy'


def test_load_catalog_uses_first_numerus_form(catalog):
    entry = catalog.get('ViewRightMenu', '%n image(s)')
    assert entry.translation == '%n larawan'


def test_load_catalog_message_without_translation(catalog):
    entry = catalog.get('ViewRightMenu', 'Rotate clockwise')
    assert entry.status == Status.UNFINISHED
    assert entry.translation == ''


def test_load_catalog_from_string(tsdata):
    catalog = load_catalog_from_string(tsdata)
    assert len(catalog) == 15
    assert catalog.get('ReName', 'Cancel').translation == 'Sukat'


def test_load_catalog_from_str_object():
    catalog = load_catalog_from_string(make_ts(
        '<context><name>Foo</name><message><source>Bar</source>'
        '<translation>Baz</translation></message></context>'))
    assert catalog.get('Foo', 'Bar').translation == 'Baz'
    assert catalog.language == 'xx'


def test_load_catalog_preserves_whitespace():
    catalog = load_catalog_from_string(make_ts(
        '<context><name>Foo</name><message><source> Bar\n</source>'
        '<translation> Baz\n</translation></message></context>'))
    assert catalog.get('Foo', ' Bar\n').translation == ' Baz\n'


def test_load_catalog_empty_document():
    catalog = load_catalog_from_string(make_ts(''))
    assert len(catalog) == 0
    assert catalog.contexts() == []


@pytest.mark.parametrize('version', ['1.1', '2.0', '2.1'])
def test_load_catalog_supported_versions(version):
    catalog = load_catalog_from_string(make_ts('', version=version))
    assert catalog.version == version


@pytest.mark.parametrize('version', ['3.0', '2', ''])
def test_load_catalog_unsupported_version(version):
    with pytest.raises(UnsupportedVersion) as exc_info:
        load_catalog_from_string(make_ts('', version=version))
    assert exc_info.value.version == version


def test_load_catalog_missing_version():
    with pytest.raises(UnsupportedVersion) as exc_info:
        load_catalog_from_string(f'{TS_HEADER}<TS language="xx"></TS>')
    assert exc_info.value.version is None


def test_load_catalog_wrong_root_element():
    with pytest.raises(MalformedResource) as exc_info:
        load_catalog_from_string('<foo version="2.1"></foo>')
    assert 'Expected <TS> root element' in exc_info.value.msg


def test_load_catalog_invalid_xml():
    with pytest.raises(MalformedResource) as exc_info:
        load_catalog_from_string(make_ts('<context><name>Foo</name>'))
    assert exc_info.value.msg.startswith('Invalid XML')


def test_load_catalog_context_without_name():
    with pytest.raises(MalformedResource):
        load_catalog_from_string(make_ts(
            '<context><message><source>Bar</source>'
            '<translation>Baz</translation></message></context>'))


def test_load_catalog_context_with_empty_name():
    with pytest.raises(MalformedResource):
        load_catalog_from_string(make_ts(
            '<context><name> </name><message><source>Bar</source>'
            '<translation>Baz</translation></message></context>'))


def test_load_catalog_message_without_source():
    with pytest.raises(MalformedResource) as exc_info:
        load_catalog_from_string(make_ts(
            '<context><name>Foo</name><message>'
            '<translation>Baz</translation></message></context>'))
    assert "context 'Foo'" in exc_info.value.msg


def test_load_catalog_unknown_translation_type():
    with pytest.raises(MalformedResource):
        load_catalog_from_string(make_ts(
            '<context><name>Foo</name><message><source>Bar</source>'
            '<translation type="bogus">Baz</translation>'
            '</message></context>'))


def test_load_catalog_error_in_later_context_loads_nothing(write_ts):
    path = write_ts(make_ts(
        '<context><name>Foo</name><message><source>Bar</source>'
        '<translation>Baz</translation></message></context>'
        '<context><name>Spam</name><message>'
        '<translation>Eggs</translation></message></context>'))
    with pytest.raises(MalformedResource) as exc_info:
        load_catalog(path)
    assert exc_info.value.filename == path
    assert str(exc_info.value).startswith(f'{path}: ')


def test_load_catalog_nonexistent_file(tmpdir):
    path = str(tmpdir.join('nonexistent.ts'))
    with pytest.raises(TsFileIOError) as exc_info:
        load_catalog(path)
    assert exc_info.value.filename == path
    assert exc_info.value.msg.startswith('Could not read file')
