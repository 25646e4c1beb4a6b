'''
### TextBridge Module

This module converts sound containers to and from their YAML text form.

Functions:
    `to_text`:
        Renders a container as a YAML document, writing identifiers as labels where known.

    `from_text`:
        Parses a YAML document back into a container, hashing labels and reading hex literals.

    `detect_kind`:
        Infers the container kind from the shape of a loaded YAML document.

    `container_class`:
        Returns the container class for a `FileKind`.

Dependencies:
    `YAMLSerializer`:
        For YAML loading and dumping.

    `Labels`:
        The registry is passed in explicitly; the same document renders differently
        depending on which labels the registry holds, but always parses back to the
        same binary content.

Intended Usage:
    A soundlabelinfo document is a mapping with an `entries` list; a bgm property
    document is a bare list of entries. Both match the layouts written by the
    earlier standalone tools.
'''

from typing import Optional, Union

from .Enums import FileKind
from .Errors import TextParseError
from .Labels import LabelRegistry
from .YAMLSerializer import dump_yaml, load_yaml
from .formats.SoundLabelInfo import SliFile
from .formats.BgmProperty import BgmPropertyFile

Container = Union[SliFile, BgmPropertyFile]

CONTAINER_CLASSES = {
  FileKind.SLI: SliFile,
  FileKind.BGM_PROPERTY: BgmPropertyFile,
}

def container_class(kind: FileKind):
  return CONTAINER_CLASSES[kind]

def kind_of(container: Container) -> FileKind:
  for kind, cls in CONTAINER_CLASSES.items():
    if isinstance(container, cls):
      return kind
  raise TypeError(f'not a sound container: {type(container).__name__}')

def detect_kind(document) -> FileKind:
  if isinstance(document, dict) and 'entries' in document:
    return FileKind.SLI
  if isinstance(document, list):
    return FileKind.BGM_PROPERTY
  raise TextParseError('unrecognized document: expected an "entries" mapping or a list of entries')

def to_text(container: Container, labels: LabelRegistry) -> str:
  return dump_yaml(container.to_yaml(labels))

def from_text(text: str, labels: LabelRegistry, kind: Optional[FileKind] = None) -> Container:
  document = load_yaml(text)
  if kind is None:
    kind = detect_kind(document)

  return container_class(kind).from_yaml(document, labels)

if __name__ == '__main__':
  pass
