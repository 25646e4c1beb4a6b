'''
### BgmProperty Module

This module defines the `BgmPropertyFile` class, the container for `bgm_property.bin` files.

Classes:
    `BgmPropertyFile`:
        Represents a full BGM property file: the header and its ordered entries.

Functionality:
    - Load a file from binary data (`from_bytes`) or from disk (`open`).
    - Export back to binary (`to_bytes`) or to disk (`save`).
    - Convert to and from the YAML document layout (`to_yaml`, `from_yaml`).

Dependencies:
    `struct`:
        For byte-level unpacking and packing.

    `Helpers`:
        For magic validation and truncation-checked unpacking.

    `structs.BgmEntry`:
        The fixed-size entry record.

Intended Usage:
    Entries are written in the order they are stored, so an unmodified file is
    reproduced byte for byte.
'''

from typing import List, Optional

# Import child structures
from .structs.BgmEntry import BgmEntry

# Import helper functions
from ..Helpers import *
from ..Errors import IoError, TextParseError
from ..Labels import LabelRegistry

class BgmPropertyFile:
  ''' Represents a binary or YAML bgm_property file '''
  MAGIC = b'PMGB'

  def __init__(self, entries: Optional[List[BgmEntry]] = None):
    self.entries: List[BgmEntry] = list(entries) if entries is not None else []

  @classmethod
  def from_bytes(cls, data: bytes):
    check_magic(data, cls.MAGIC)
    self = cls()
    offset = len(cls.MAGIC)

    (entry_count,) = unpack_at('<I', data, offset, 'header')
    offset += 0x04

    needed = offset + entry_count * BgmEntry.SIZE
    if needed > len(data):
      raise TruncatedInput(f'{entry_count} bgm property entries', needed, len(data))

    for i in range(entry_count):
      self.entries.append(BgmEntry.from_bytes(offset + i * BgmEntry.SIZE, data))

    return self

  def to_bytes(self) -> bytes:
    binary_data = bytearray(self.MAGIC)
    binary_data += struct.pack('<I', len(self.entries))

    for entry in self.entries:
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
  def from_yaml(cls, entry_list: list, labels: LabelRegistry):
    if not isinstance(entry_list, list):
      raise TextParseError('a bgm property document must be a list of entries')

    return cls([BgmEntry.from_yaml(entry_dict, labels) for entry_dict in entry_list])

  def to_yaml(self, labels: LabelRegistry) -> list:
    return [entry.to_yaml(labels) for entry in self.entries]

  def __len__(self) -> int:
    return len(self.entries)

  def __eq__(self, other) -> bool:
    if not isinstance(other, BgmPropertyFile):
      return NotImplemented
    return self.entries == other.entries

  def __repr__(self) -> str:
    return f'BgmPropertyFile(entries={self.entries!r})'

if __name__ == '__main__':
  pass
