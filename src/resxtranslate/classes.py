from dataclasses import dataclass, field
from pathlib import Path

FILE_REF_TYPE = "System.Resources.ResXFileRef"


@dataclass
class Translation:
    id: str
    file_name: str
    original_text: str
    translated_text: str = ""
    comment: str = ""


@dataclass
class StringValue:
    text: str
    comment: str = ""


@dataclass
class OpaqueValue:
    """A non-string resource kept exactly as it was read."""

    payload: str
    type_name: str | None = None
    mime_type: str | None = None
    comment: str = ""

    @property
    def is_file_ref(self) -> bool:
        return self.type_name is not None and self.type_name.split(",")[0].strip() == FILE_REF_TYPE


Entry = StringValue | OpaqueValue


class ResourceEntries(dict[str, Entry]):
    """Entries of one resource file, in file order.

    ``assemblies`` holds the file's ``<assembly alias=... name=...>``
    declarations, which opaque type names may refer to by alias.
    """

    def __init__(self, *args, assemblies: dict[str, str] | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.assemblies: dict[str, str] = dict(assemblies or {})


@dataclass
class ResourceGroup:
    directory: Path
    base_name: str
    base: Path | None = None
    localized: list[Path] = field(default_factory=list)

    @property
    def members(self) -> list[Path]:
        files = list(self.localized)
        if self.base is not None:
            files.append(self.base)
        return files
