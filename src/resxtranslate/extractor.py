import logging
import pathlib
from collections import defaultdict
from collections.abc import Iterable

from resxtranslate import resx
from resxtranslate.classes import StringValue, Translation
from resxtranslate.errors import ConfigurationError, DirectoryNotFoundError

logger = logging.getLogger(__name__)


def check_root(root_dir: str | pathlib.Path) -> pathlib.Path:
    if not root_dir:
        raise ConfigurationError("The path value should not be empty.")
    root = pathlib.Path(root_dir)
    if not root.is_dir():
        raise DirectoryNotFoundError(f"The directory '{root}' doesn't exist.")
    return root


def find_files(root: pathlib.Path, file_pattern: str) -> list[pathlib.Path]:
    return sorted(file for file in root.rglob(file_pattern) if file.is_file())


def scan(root_dir: str | pathlib.Path, file_pattern: str, tag: str | None = None) -> list[Translation]:
    if not file_pattern:
        raise ConfigurationError("The file mask value should not be empty.")
    root = check_root(root_dir)
    tag = tag or resx.DEFAULT_TAG
    needle = tag.lower()

    translations = []
    files = find_files(root, file_pattern)
    for file in files:
        relative_name = file.relative_to(root).as_posix()
        logger.debug(f"Scanning {relative_name}")

        for key, entry in resx.read_all(file).items():
            if not isinstance(entry, StringValue):
                continue
            if needle not in entry.text.lower():
                continue
            translations.append(
                Translation(
                    id=key,
                    file_name=relative_name,
                    original_text=entry.text,
                    comment=entry.comment,
                )
            )

    logger.info(f"Found {len(translations)} tagged resources in {len(files)} files")
    return translations


def update(root_dir: str | pathlib.Path, translations: Iterable[Translation]) -> int:
    """Write translated text back into the resource files it came from.

    Records with an empty ``translated_text`` are ignored, and a file is only
    rewritten when at least one of its records carries a translation. Each
    rewritten file is re-serialized in full. Returns the number of files
    written.
    """
    root = check_root(root_dir)

    # Group all translations by resource file name.
    grouped: dict[str, list[Translation]] = defaultdict(list)
    for translation in translations:
        if translation.translated_text:
            grouped[translation.file_name].append(translation)

    for file_name, group in grouped.items():
        path = root / file_name
        entries = resx.read_all(path)

        for translation in group:
            previous = entries.get(translation.id)
            comment = previous.comment if previous is not None else translation.comment
            entries[translation.id] = StringValue(translation.translated_text, comment)

        resx.write_all(path, entries)
        logger.info(f"Updated {len(group)} resources in {file_name}")

    return len(grouped)
