import pytest

from pyconfman import InvalidNameError, NotFoundError, XmlConfig

SAMPLE = """\
<?xml version="1.0" encoding="utf-8"?>
<Root>
    <display>
        <width>1920</width>
        <height>1080</height>
        <title></title>
    </display>
    <audio>
        <volume>0.8</volume>
        <volume>0.3</volume>
    </audio>
</Root>
"""


@pytest.fixture
def sample(tmp_path):
    path = tmp_path / 'sample.xml'
    path.write_text(SAMPLE, encoding='utf-8')
    return XmlConfig(str(path))


def test_new_file_has_root(tmp_path):
    path = tmp_path / 'new.xml'
    XmlConfig(str(path))
    content = path.read_text(encoding='utf-8')
    assert content.startswith('<?xml')
    assert '<Root/>' in content


def test_parse(sample):
    assert sample.get_sections() == ['display', 'audio']
    assert sample.get_keys('display') == ['width', 'height', 'title']
    assert sample.get_string('display', 'width', '') == '1920'
    assert sample.get_string('display', 'title', 'x') == ''


def test_duplicate_keys(sample):
    # lookups take the first element, the snapshot the last one
    assert sample.get_string('audio', 'volume', '') == '0.8'
    assert sample.get_all_key_values('audio') == {'volume': '0.3'}
    sample.delete_key('audio', 'volume')
    assert sample.get_string('audio', 'volume', '') == '0.3'


def test_update_keeps_sibling_order(sample):
    sample.set_string('display', 'width', '2560')
    sample.set_string('display', 'depth', '32')
    assert sample.get_keys('display') == ['width', 'height', 'title', 'depth']
    assert sample.get_string('display', 'width', '') == '2560'


def test_no_typed_getters(sample):
    assert not hasattr(sample, 'get_int')
    assert not hasattr(sample, 'get_bool')


def test_invalid_names(sample):
    with pytest.raises(InvalidNameError):
        sample.create_section('two words')
    with pytest.raises(InvalidNameError):
        sample.set_string('fresh', '1st', 'v')
    # nothing was half created
    assert not sample.section_exists('fresh')
    with pytest.raises(InvalidNameError):
        sample.set_string('9lives', 'k', 'v')
    with pytest.raises(InvalidNameError):
        sample.set_string('display', 'a\u00b2', 'v')  # superscript two
    assert not sample.key_exists('display', 'a\u00b2')


def test_delete_key_only_looks_at_section_children(sample):
    with pytest.raises(NotFoundError):
        sample.delete_key('display', 'audio')
    with pytest.raises(NotFoundError):
        sample.delete_key('video', 'width')


def test_special_characters_round_trip(tmp_path):
    path = str(tmp_path / 'chars.xml')
    cfg = XmlConfig(path)
    cfg.set_string('s', 'expr', 'a < b && c > "d"')
    cfg.set_string('s', 'multi', 'line one\nline two')
    cfg.set_string('s', 'empty', '')
    cfg.set_string('s', 'cjk', '中文')
    cfg.save_file()

    fresh = XmlConfig(path)
    assert fresh.get_all_key_values('s') == {
        'expr': 'a < b && c > "d"',
        'multi': 'line one\nline two',
        'empty': '',
        'cjk': '中文',
    }


def test_repeated_saves_are_stable(sample, tmp_path):
    sample.save_file()
    with open(sample.path, encoding='utf-8') as fp:
        first = fp.read()
    XmlConfig(sample.path).save_file()
    with open(sample.path, encoding='utf-8') as fp:
        second = fp.read()
    assert first == second
    assert '\n\n' not in second


def test_malformed_file_starts_empty(tmp_path):
    path = tmp_path / 'broken.xml'
    path.write_text('<Root><a>', encoding='utf-8')
    with pytest.warns(UserWarning, match='not valid XML'):
        cfg = XmlConfig(str(path))
    assert cfg.get_sections() == []


def test_non_ascii_names_round_trip(tmp_path):
    path = str(tmp_path / 'names.xml')
    cfg = XmlConfig(path)
    cfg.set_string('café', '中文', 'v')
    cfg.set_string('café', 'x·y', 'w')
    cfg.save_file()
    assert XmlConfig(path).get_all_key_values('café') == {
        '中文': 'v', 'x·y': 'w'}
