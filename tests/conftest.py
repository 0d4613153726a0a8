import pytest

MINIMAL_FNT = (
    '<font><info size="16"/><chars>'
    '<char id="65" x="0" y="0" width="8" height="16" xoffset="0" yoffset="0" xadvance="8"/>'
    '</chars></font>'
)

MINIMAL_LUA = (
    "return {\n"
    "    Size = 16,\n"
    "    Characters = {\n"
    '        ["A"] = { Vector2.new(8, 16), Vector2.new(0, 0), Vector2.new(0, 0), 8 },\n'
    "    }\n"
    "}\n"
)


def char(codepoint, **attrs):
    """Build a <char/> element string."""
    parts = [f'id="{codepoint}"'] + [f'{key}="{value}"' for key, value in attrs.items()]
    return f'<char {" ".join(parts)}/>'


def fnt_document(*chars, info='<info face="Arial" size="32" bold="0" italic="0"/>', extra=''):
    """Build a BMFont XML document shaped like generator output."""
    body = "\n    ".join(chars)
    return (
        '<?xml version="1.0"?>\n'
        '<font>\n'
        f'  {info}\n'
        '  <common lineHeight="32" base="26" scaleW="256" scaleH="256" pages="1" packed="0"/>\n'
        '  <pages>\n'
        '    <page id="0" file="font_0.png"/>\n'
        '  </pages>\n'
        f'  <chars count="{len(chars)}">\n'
        f'    {body}\n'
        '  </chars>\n'
        f'{extra}'
        '</font>\n'
    )


@pytest.fixture
def write_fnt(tmp_path):
    """Write text (or bytes) to a .fnt file and return its path."""
    counter = {"n": 0}

    def _write(content, name=None):
        counter["n"] += 1
        path = tmp_path / (name or f"font_{counter['n']}.fnt")
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
        return str(path)

    return _write
