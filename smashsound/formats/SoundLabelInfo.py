'''
### SoundLabelInfo Module

This module defines the `SliFile` class, the container for `soundlabelinfo.sli` files.

Classes:
    `SliFile`:
        Represents a full sound label info file: the header and its ordered tone entries.

Functionality:
    - Load a file from binary data (`from_bytes`) or from disk (`open`).
    - Export back to binary (`to_bytes`) or to disk (`save`).
    - Convert to and from the YAML document layout (`to_yaml`, `from_yaml`).
    - Write entries in ascending tone name order, without reordering the stored list.

Dependencies:
    `struct`:
        For byte-level unpacking and packing.

    `Helpers`:
        For magic validation and truncation-checked unpacking.

    `structs.ToneEntry`:
        The fixed-size entry record.

Intended Usage:
    Files read from the game carry a version word between the magic and the entry count.
    Both header layouts are accepted; the one that was read is kept and written back.
'''

from typing import List, Optional

# Import child structures
from .structs.ToneEntry import SliEntry

# Import helper functions
from ..Helpers import *
from ..Errors import IoError, TextParseError
from ..Labels import LabelRegistry
from ..YAMLSerializer import read_u32

class SliFile:
  ''' Represents a binary or YAML soundlabelinfo file '''
  MAGIC = b'SLI\x00'

  def __init__(self, entries: Optional[List[SliEntry]] = None, version: Optional[int] = None):
    self.entries: List[SliEntry] = list(entries) if entries is not None else []
    self.version = version # None when the header has no version word

  GAME_VERSION = 1

  @classmethod
  def _has_version_word(cls, data: bytes) -> bool:
    # 8 + 16n and 12 + 16n never coincide, so at most one layout fits exactly
    size = len(data) - len(cls.MAGIC)
    plain_fits = size >= 4 and (size - 4) % SliEntry.SIZE == 0 \
      and unpack_at('<I', data, len(cls.MAGIC))[0] * SliEntry.SIZE == size - 4
    if plain_fits:
      return False

    versioned_fits = size >= 8 and (size - 8) % SliEntry.SIZE == 0 \
      and unpack_at('<I', data, len(cls.MAGIC) + 4)[0] * SliEntry.SIZE == size - 8
    if versioned_fits:
      return True

    # Truncated or padded input: game files always carry version 1 here
    return size >= 4 and unpack_at('<I', data, len(cls.MAGIC))[0] == cls.GAME_VERSION

  @classmethod
  def from_bytes(cls, data: bytes):
    check_magic(data, cls.MAGIC)
    self = cls()
    offset = len(cls.MAGIC)

    if cls._has_version_word(data):
      (self.version,) = unpack_at('<I', data, offset, 'header')
      offset += 0x04

    (entry_count,) = unpack_at('<I', data, offset, 'header')
    offset += 0x04

    # Checked before any entry is read
    needed = offset + entry_count * SliEntry.SIZE
    if needed > len(data):
      raise TruncatedInput(f'{entry_count} tone entries', needed, len(data))

    for i in range(entry_count):
      self.entries.append(SliEntry.from_bytes(offset + i * SliEntry.SIZE, data))

    return self

  def sorted_entries(self) -> List[SliEntry]:
    return sorted(self.entries, key=lambda entry: entry.tone_name)

  def to_bytes(self) -> bytes:
    binary_data = bytearray(self.MAGIC)

    if self.version is not None:
      binary_data += struct.pack('<I', self.version)
    binary_data += struct.pack('<I', len(self.entries))

    for entry in self.sorted_entries():
      binary_data += entry.to_bytes()

    return bytes(binary_data)

  @classmethod
  def open(cls, path):
    try:
      with open(path, 'rb') as f:
        data = f.read()
    except OSError as e:
      raise IoError(path, e) from e
    return cls.from_bytes(data)

  def save(self, path) -> None:
    data = self.to_bytes()
    try:
      with open(path, 'wb') as f:
        f.write(data)
    except OSError as e:
      raise IoError(path, e) from e

  @classmethod
  def from_yaml(cls, sli_dict: dict, labels: LabelRegistry):
    if not isinstance(sli_dict, dict) or not isinstance(sli_dict.get('entries'), list):
      raise TextParseError('a soundlabelinfo document needs an "entries" list')

    version = read_u32(sli_dict, 'version') if 'version' in sli_dict else None
    entries = [SliEntry.from_yaml(entry_dict, labels) for entry_dict in sli_dict['entries']]

    return cls(entries, version)

  def to_yaml(self, labels: LabelRegistry) -> dict:
    sli_dict = {}
    if self.version is not None:
      sli_dict["version"] = self.version

    sli_dict["entries"] = [entry.to_yaml(labels) for entry in self.entries]
    return sli_dict

  def __len__(self) -> int:
    return len(self.entries)

  def __eq__(self, other) -> bool:
    if not isinstance(other, SliFile):
      return NotImplemented
    return self.version == other.version and self.entries == other.entries

  def __repr__(self) -> str:
    return f'SliFile(version={self.version!r}, entries={self.entries!r})'

if __name__ == '__main__':
  pass
