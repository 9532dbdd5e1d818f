import logging
import pathlib
import re

from resxtranslate import resx
from resxtranslate.classes import ResourceGroup, StringValue
from resxtranslate.extractor import check_root, find_files

logger = logging.getLogger(__name__)

# "de", "fr", "de-DE", "zh-Hans", "es-419"
CULTURE_REGEX = re.compile(r"^[A-Za-z]{2,3}(?:-[A-Za-z0-9]{2,8})*$")


def parse_culture(path: str | pathlib.Path) -> tuple[str, str]:
    """Split a resource file name into its base name and culture code.

    ``Strings.de.resx`` gives ``("Strings", "de")``; a file without a
    culture token gives its stem and an empty culture.
    """
    stem = pathlib.Path(path).stem
    base_name, dot, culture = stem.rpartition(".")
    if dot and base_name and CULTURE_REGEX.match(culture):
        return base_name, culture
    return stem, ""


def find_groups(root_dir: str | pathlib.Path) -> list[ResourceGroup]:
    root = check_root(root_dir)

    groups: dict[tuple[pathlib.Path, str], ResourceGroup] = {}
    for file in find_files(root, resx.RESX_PATTERN):
        base_name, culture = parse_culture(file)
        key = (file.parent, base_name.lower())
        group = groups.setdefault(key, ResourceGroup(file.parent, base_name))
        if culture:
            group.localized.append(file)
        elif group.base is None:
            group.base = file
            group.base_name = base_name
        else:
            logger.warning(f"Ignoring {file}: {group.base.name} is already the base file of its group")

    return [
        group
        for _, group in sorted(groups.items(), key=lambda item: (str(item[0][0]), item[0][1]))
        if len(group.members) > 1
    ]


def sync_file(path: pathlib.Path, baseline: dict[str, str], tag: str) -> list[str]:
    """Align the keys of one localized file with the baseline, returning log lines."""
    lines = []
    entries = resx.read_all(path)

    # Remove strings the base file doesn't have anymore
    for key in [k for k, entry in entries.items() if isinstance(entry, StringValue) and k not in baseline]:
        del entries[key]
        lines.append(f"   - '{key}'")

    # Add strings that are missing, marked for translation
    for key, value in baseline.items():
        if key in entries:
            continue
        new_value = f"{tag} {value}"
        entries[key] = StringValue(new_value)
        lines.append(f"   + '{key}' = '{new_value}'")

    if lines:
        resx.write_all(path, entries)
        logger.info(f"Synchronized {path.name}: {len(lines)} changes")
    return lines


def sync(root_dir: str | pathlib.Path, tag: str | None = None) -> str:
    root = check_root(root_dir)
    tag = tag or resx.DEFAULT_TAG

    log: list[str] = []
    for group in find_groups(root):
        if group.base is None:
            logger.warning(
                f"Skipping {group.directory / group.base_name}: no base file without a culture suffix"
            )
            continue

        baseline = resx.read_string_entries(group.base)
        localized = sorted(group.localized, key=lambda p: p.name, reverse=True)
        for path in localized:
            log.append(f"> {path.relative_to(root).as_posix()}")
            log.extend(sync_file(path, baseline, tag))

    return "\n".join(log)
