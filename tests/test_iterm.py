"""Tests for colortty.formats.iterm — property list parser."""

import plistlib

import pytest
from colortty.core.errors import InvalidFormatError, ParseFloatError
from colortty.core.report import format_yaml
from colortty.core.types import Color, ColorScheme
from colortty.formats.iterm import SLOT_NAMES, parse


def _plist(body: str) -> str:
    return f"""<?xml version="1.0" encoding="UTF-8"?>
<!DOCTYPE plist PUBLIC "-//Apple//DTD PLIST 1.0//EN" "http://www.apple.com/DTDs/PropertyList-1.0.dtd">
<plist version="1.0">
<dict>
{body}
</dict>
</plist>
"""


ANSI_4 = """
  <key>Ansi 4 Color</key>
  <dict>
    <key>Red Component</key>
    <real>0.794118</real>
    <key>Green Component</key>
    <real>0.664706</real>
    <key>Blue Component</key>
    <real>0.982353</real>
  </dict>
"""


class TestDracula:
    def test_converts_to_reference_yaml(self, dracula_itermcolors, dracula_iterm_yaml):
        assert format_yaml(parse(dracula_itermcolors)) == dracula_iterm_yaml

    def test_str_input(self, dracula_itermcolors):
        assert parse(dracula_itermcolors.decode('utf-8')) == parse(dracula_itermcolors)

    def test_binary_plist(self, dracula_itermcolors):
        binary = plistlib.dumps(plistlib.loads(dracula_itermcolors), fmt=plistlib.FMT_BINARY)
        assert parse(binary) == parse(dracula_itermcolors)

    def test_extra_entries_ignored(self, dracula_itermcolors):
        # Cursor/Selection/Bold colours are in the fixture but have no slot
        scheme = parse(dracula_itermcolors)
        assert scheme.background == Color(30, 31, 40)
        assert scheme.bright_white == Color(255, 255, 255)


class TestSlotNames:
    def test_eighteen_entries(self):
        assert len(SLOT_NAMES) == 18
        assert len(set(SLOT_NAMES.values())) == 18

    def test_ansi_split(self):
        assert SLOT_NAMES['Ansi 0 Color'] == 'black'
        assert SLOT_NAMES['Ansi 7 Color'] == 'white'
        assert SLOT_NAMES['Ansi 8 Color'] == 'bright_black'
        assert SLOT_NAMES['Ansi 15 Color'] == 'bright_white'


class TestParse:
    def test_truncates_scaled_components(self):
        scheme = parse(_plist(ANSI_4))
        assert scheme.blue.to_hex() == '0xcaa9fa'

    def test_component_order_irrelevant(self):
        body = """
  <key>Foreground Color</key>
  <dict>
    <key>Blue Component</key><real>1</real>
    <key>Red Component</key><real>0</real>
  </dict>
"""
        assert parse(_plist(body)).foreground == Color(0, 0, 255)

    def test_integer_components(self):
        body = """
  <key>Ansi 1 Color</key>
  <dict>
    <key>Red Component</key><integer>1</integer>
  </dict>
"""
        assert parse(_plist(body)).red == Color(255, 0, 0)

    def test_unknown_top_level_key_ignored(self):
        body = ANSI_4 + """
  <key>Tab Color</key>
  <dict>
    <key>Red Component</key><real>1</real>
  </dict>
  <key>Guide Color</key>
  <string>not even a dict</string>
"""
        assert parse(_plist(body)) == parse(_plist(ANSI_4))

    def test_empty_dict_is_default_scheme(self):
        assert parse(_plist('')) == ColorScheme()

    def test_alpha_and_color_space_ignored(self):
        body = """
  <key>Background Color</key>
  <dict>
    <key>Alpha Component</key><real>0.5</real>
    <key>Color Space</key><string>sRGB</string>
    <key>Green Component</key><real>1</real>
  </dict>
"""
        assert parse(_plist(body)).background == Color(0, 255, 0)

    def test_not_a_plist(self):
        with pytest.raises(InvalidFormatError):
            parse('ForegroundColour=1,2,3\n')

    def test_malformed_xml(self):
        with pytest.raises(InvalidFormatError):
            parse('<?xml version="1.0"?><plist><dict><key>Ansi 0 Color</key></plist>')

    def test_root_not_a_dict(self):
        with pytest.raises(InvalidFormatError):
            parse('<?xml version="1.0"?><plist version="1.0"><array/></plist>')

    def test_color_not_a_dict(self):
        body = '<key>Ansi 0 Color</key><real>0.5</real>'
        with pytest.raises(InvalidFormatError, match='Ansi 0 Color'):
            parse(_plist(body))

    def test_component_not_a_number(self):
        body = """
  <key>Ansi 0 Color</key>
  <dict>
    <key>Red Component</key><string>0.5</string>
  </dict>
"""
        with pytest.raises(ParseFloatError):
            parse(_plist(body))

    def test_component_bool_rejected(self):
        body = """
  <key>Ansi 0 Color</key>
  <dict>
    <key>Red Component</key><true/>
  </dict>
"""
        with pytest.raises(ParseFloatError):
            parse(_plist(body))

    def test_malformed_real(self):
        body = """
  <key>Ansi 0 Color</key>
  <dict>
    <key>Red Component</key><real>zero</real>
  </dict>
"""
        with pytest.raises(ParseFloatError):
            parse(_plist(body))


class TestParseErrors:
    """Every malformed input surfaces as a ColorError subclass."""

    def test_malformed_date_under_ignored_key(self):
        body = '<key>Saved</key><date>yesterday</date>'
        with pytest.raises(InvalidFormatError):
            parse(_plist(body))

    def test_huge_integer_component(self):
        body = f"""
  <key>Ansi 0 Color</key>
  <dict>
    <key>Red Component</key><integer>{'9' * 400}</integer>
  </dict>
"""
        with pytest.raises(ParseFloatError) as exc_info:
            parse(_plist(body))
        assert isinstance(exc_info.value.error, OverflowError)

    def test_malformed_real_carries_token(self):
        body = """
  <key>Ansi 0 Color</key>
  <dict>
    <key>Red Component</key><real>0.5x</real>
  </dict>
"""
        with pytest.raises(ParseFloatError) as exc_info:
            parse(_plist(body))
        assert exc_info.value.value == '0.5x'

    def test_malformed_integer_carries_token(self):
        body = """
  <key>Ansi 0 Color</key>
  <dict>
    <key>Red Component</key><integer>one</integer>
  </dict>
"""
        with pytest.raises(ParseFloatError) as exc_info:
            parse(_plist(body))
        assert exc_info.value.value == 'one'

    def test_key_without_value(self):
        body = '<key>Ansi 0 Color</key>'
        with pytest.raises(InvalidFormatError):
            parse(_plist(body))
