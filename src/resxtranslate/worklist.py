import logging
import pathlib
from collections.abc import Iterable

from lxml import etree

from resxtranslate.classes import Translation
from resxtranslate.errors import (
    ConfigurationError,
    WorklistFormatError,
    WorklistNotFoundError,
)

logger = logging.getLogger(__name__)

# XML element name -> Translation attribute
FIELDS = {
    "Id": "id",
    "FileName": "file_name",
    "OriginalText": "original_text",
    "TranslatedText": "translated_text",
    "Comment": "comment",
}
REQUIRED_FIELDS = ("Id", "FileName")


def _check_path(path: str | pathlib.Path) -> pathlib.Path:
    if not path:
        raise ConfigurationError("The file name should not be empty.")
    return pathlib.Path(path)


def save(path: str | pathlib.Path, translations: Iterable[Translation]) -> None:
    path = _check_path(path)

    solution = etree.Element("Solution")
    records = etree.SubElement(solution, "Translations")
    count = 0
    for translation in translations:
        record = etree.SubElement(records, "Translation")
        for tag, attr in FIELDS.items():
            etree.SubElement(record, tag).text = getattr(translation, attr)
        count += 1

    document = etree.tostring(solution, encoding="utf-8", xml_declaration=True, pretty_print=True)
    path.write_bytes(document)
    logger.info(f"Saved {count} translations to {path}")


def _parse_record(record: etree._Element) -> Translation:
    values = {}
    for tag, attr in FIELDS.items():
        child = record.find(tag)
        if child is None:
            if tag in REQUIRED_FIELDS:
                raise WorklistFormatError(
                    f"Translation on line {record.sourceline} is missing <{tag}>"
                )
            values[attr] = ""
        else:
            values[attr] = child.text or ""
    return Translation(**values)


def load(path: str | pathlib.Path) -> list[Translation]:
    path = _check_path(path)
    if not path.is_file():
        raise WorklistNotFoundError(f"The file '{path}' doesn't exist.")

    try:
        root = etree.parse(str(path), etree.XMLParser(resolve_entities=False)).getroot()
    except etree.XMLSyntaxError as ex:
        raise WorklistFormatError(f"Error parsing {path}: {ex}") from ex

    if root.tag != "Solution":
        raise WorklistFormatError(f"File {path} does not start with a <Solution> element")

    records = root.find("Translations")
    if records is None:
        return []

    translations = [_parse_record(record) for record in records.findall("Translation")]
    logger.info(f"Loaded {len(translations)} translations from {path}")
    return translations
