import pathlib
from collections.abc import Callable

import pytest

RESX_HEADER = """<?xml version="1.0" encoding="utf-8"?>
<root>
  <resheader name="resmimetype">
    <value>text/microsoft-resx</value>
  </resheader>
  <resheader name="version">
    <value>2.0</value>
  </resheader>
  <assembly alias="System.Drawing" name="System.Drawing, Version=4.0.0.0, Culture=neutral, PublicKeyToken=b03f5f7f11d50a3a" />
"""
RESX_FOOTER = "</root>\n"

ICON_NODE = (
    '  <data name="AppIcon" type="System.Resources.ResXFileRef, System.Windows.Forms">\n'
    "    <value>..\\Resources\\app.ico;System.Drawing.Icon, System.Drawing</value>\n"
    "  </data>\n"
)
BITMAP_NODE = (
    '  <data name="Logo" type="System.Drawing.Bitmap, System.Drawing" '
    'mimetype="application/x-microsoft.net.object.bytearray.base64">\n'
    "    <value>\n        iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNk\n</value>\n"
    "    <comment>company logo</comment>\n"
    "  </data>\n"
)
INT_NODE = (
    '  <data name="MaxItems" type="System.Int32, mscorlib">\n'
    "    <value>42</value>\n"
    "  </data>\n"
)


def _data_node(key: str, value: str, comment: str = "", attrs: str = 'xml:space="preserve"') -> str:
    node = f'  <data name="{key}" {attrs}>\n    <value>{value}</value>\n'
    if comment:
        node += f"    <comment>{comment}</comment>\n"
    return node + "  </data>\n"


def _make_resx(path: pathlib.Path, strings: dict[str, str], extra: str = "") -> pathlib.Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    body = "".join(_data_node(key, value) for key, value in strings.items())
    path.write_text(RESX_HEADER + body + extra + RESX_FOOTER, encoding="utf-8")
    return path


@pytest.fixture
def data_node() -> Callable[..., str]:
    """Builds the XML of one <data> node."""
    return _data_node


@pytest.fixture
def make_resx() -> Callable[..., pathlib.Path]:
    """Writes a resx file holding the given strings followed by raw ``extra`` nodes."""
    return _make_resx


@pytest.fixture
def bitmap_node() -> str:
    return BITMAP_NODE


@pytest.fixture
def project(tmp_path: pathlib.Path) -> pathlib.Path:
    """A small resource tree with a base file, a German variant and a lone file."""
    root = tmp_path / "project"
    _make_resx(
        root / "Strings.resx",
        {"Hello": "[translate me] Hello", "World": "World", "Bye": "bye [TRANSLATE ME]"},
        extra=ICON_NODE,
    )
    _make_resx(
        root / "Views" / "Main.resx",
        {"Title": "Main window [translate me]", "Ok": "OK"},
        extra=BITMAP_NODE + INT_NODE,
    )
    _make_resx(root / "Strings.de.resx", {"Hello": "Hallo", "Old": "Alt"})
    return root
