import logging
import pathlib

from lxml import etree

from resxtranslate.classes import Entry, OpaqueValue, ResourceEntries, StringValue
from resxtranslate.errors import ResourceFileNotFoundError, ResourceFormatError

logger = logging.getLogger(__name__)

DEFAULT_TAG = "[translate me]"
RESX_PATTERN = "*.resx"

STRING_TYPE = "System.String"
XML_SPACE = "{http://www.w3.org/XML/1998/namespace}space"
XML_DECLARATION = '<?xml version="1.0" encoding="utf-8"?>\n'

_WINFORMS = "System.Windows.Forms, Version=4.0.0.0, Culture=neutral, PublicKeyToken=b77a5c561934e089"
RESHEADERS = (
    ("resmimetype", "text/microsoft-resx"),
    ("version", "2.0"),
    ("reader", f"System.Resources.ResXResourceReader, {_WINFORMS}"),
    ("writer", f"System.Resources.ResXResourceWriter, {_WINFORMS}"),
)


def _child_text(elem: etree._Element, tag: str) -> str:
    child = elem.find(tag)
    if child is None or child.text is None:
        return ""
    return child.text


def _is_string(type_name: str | None, mime_type: str | None) -> bool:
    if mime_type is not None:
        return False
    return type_name is None or type_name.split(",")[0].strip() == STRING_TYPE


def read_all(path: str | pathlib.Path) -> ResourceEntries:
    path = pathlib.Path(path)
    if not path.is_file():
        raise ResourceFileNotFoundError(f"The resource file '{path}' doesn't exist.")

    parser = etree.XMLParser(remove_blank_text=False, resolve_entities=False)
    try:
        with open(path, "rb") as file:
            tree = etree.parse(file, parser)
    except etree.XMLSyntaxError as ex:
        raise ResourceFormatError(f"Error parsing {path}: {ex}") from ex

    root = tree.getroot()
    if root.tag != "root":
        raise ResourceFormatError(f"File {path} is not a resx document (root element <{root.tag}>)")

    assemblies = {
        asm.get("alias"): asm.get("name")
        for asm in root.findall("assembly")
        if asm.get("alias") and asm.get("name")
    }

    entries = ResourceEntries(assemblies=assemblies)
    for data in root.findall("data"):
        key = data.get("name")
        if not key:
            raise ResourceFormatError(f"File {path} has a <data> node without a name (line {data.sourceline})")

        type_name = data.get("type")
        mime_type = data.get("mimetype")
        value = _child_text(data, "value")
        comment = _child_text(data, "comment")

        if _is_string(type_name, mime_type):
            entries[key] = StringValue(value, comment)
        else:
            entries[key] = OpaqueValue(value, type_name, mime_type, comment)

    file_refs = sum(1 for entry in entries.values() if isinstance(entry, OpaqueValue) and entry.is_file_ref)
    logger.debug(f"Read {len(entries)} entries ({file_refs} file references) from {path}")
    return entries


def read_string_entries(path: str | pathlib.Path) -> dict[str, str]:
    return {
        key: entry.text
        for key, entry in read_all(path).items()
        if isinstance(entry, StringValue)
    }


def _build_document(entries: dict[str, Entry]) -> etree._Element:
    root = etree.Element("root")
    for name, value in RESHEADERS:
        header = etree.SubElement(root, "resheader", name=name)
        etree.SubElement(header, "value").text = value

    # Aliases referenced from opaque type names
    for alias, name in getattr(entries, "assemblies", {}).items():
        etree.SubElement(root, "assembly", alias=alias, name=name)

    for key, entry in entries.items():
        data = etree.SubElement(root, "data", name=key)
        if isinstance(entry, StringValue):
            data.set(XML_SPACE, "preserve")
            etree.SubElement(data, "value").text = entry.text
        else:
            if entry.type_name is not None:
                data.set("type", entry.type_name)
            if entry.mime_type is not None:
                data.set("mimetype", entry.mime_type)
            etree.SubElement(data, "value").text = entry.payload
        if entry.comment:
            etree.SubElement(data, "comment").text = entry.comment
    return root


def write_all(path: str | pathlib.Path, entries: dict[str, Entry]) -> None:
    """Recreate the resource file at ``path`` holding exactly ``entries``.

    The whole document is serialized before the file is truncated, so a
    serialization error leaves the existing file intact.
    """
    path = pathlib.Path(path)
    document = etree.tostring(_build_document(entries), encoding="unicode", pretty_print=True)
    with open(path, "w", encoding="utf-8", newline="\n") as file:
        file.write(XML_DECLARATION)
        file.write(document)
    logger.debug(f"Wrote {len(entries)} entries to {path}")
