'''
### BgmEntry Module

This module defines the `BgmEntry` class, which represents the properties of a single
background music track in a Smash Ultimate `bgm_property.bin` file.

Classes:
    `BgmEntry`:
        Represents a single nus3audio background music property structure.

Functionality:
    - Parse a BGM entry from a binary format ('from_bytes').
    - Export BGM entry data back to binary format ('to_bytes').
    - Convert the BGM entry to and from a YAML dictionary ('to_yaml', 'from_yaml').
    - Preserve the trailing reserved bytes exactly as they were read.

Dependencies:
    `struct`:
        For byte-level unpacking and packing.

    `Helpers`:
        For truncation-checked unpacking.

    `YAMLSerializer`:
        For reading and validating YAML fields.

Intended Usage:
    Used in conjunction with 'BgmPropertyFile' for full bgm_property conversion.
    Loop points are stored as-is, no check is made that the loop start precedes the loop end.
'''

from dataclasses import dataclass, field

# Import helper functions
from ...Helpers import *
from ...Errors import TextParseError
from ...Labels import Hash40, LabelRegistry
from ...YAMLSerializer import parse_identifier, read_u32, read_padding

PADDING_SIZE = 0x04

@dataclass
class BgmEntry: # struct size = 0x24
  ''' Loop and length properties for a single background music file '''
  name_id:           Hash40
  unk1:              int = 0
  loop_start_sample: int = 0
  unk_sample:        int = 0
  loop_end_sample:   int = 0
  unk2:              int = 0
  total_samples:     int = 0
  padding:           bytes = field(default=bytes(PADDING_SIZE), repr=False)

  FORMAT = f'<Q6I{PADDING_SIZE}s'
  SIZE   = 0x24

  @classmethod
  def from_bytes(cls, offset: int, data: bytes):
    (
      name_hash,
      unk1,
      loop_start_sample,
      unk_sample,
      loop_end_sample,
      unk2,
      total_samples,
      padding
    ) = unpack_at(cls.FORMAT, data, offset, 'bgm property entry')

    return cls(
      Hash40(name_hash),
      unk1,
      loop_start_sample,
      unk_sample,
      loop_end_sample,
      unk2,
      total_samples,
      padding
    )

  def to_bytes(self) -> bytes:
    return struct.pack(
      self.FORMAT,
      int(self.name_id),
      self.unk1,
      self.loop_start_sample,
      self.unk_sample,
      self.loop_end_sample,
      self.unk2,
      self.total_samples,
      self.padding
    )

  @classmethod
  def from_yaml(cls, entry_dict: dict, labels: LabelRegistry):
    if not isinstance(entry_dict, dict):
      raise TextParseError(f'bgm property entry must be a mapping, got {entry_dict!r}')

    # Older dumps name the first unknown field "unk"
    if 'unk1' not in entry_dict and 'unk' in entry_dict:
      entry_dict = {**entry_dict, 'unk1': entry_dict['unk']}

    return cls(
      parse_identifier(entry_dict, 'name_id', labels),
      read_u32(entry_dict, 'unk1'),
      read_u32(entry_dict, 'loop_start_sample'),
      read_u32(entry_dict, 'unk_sample'),
      read_u32(entry_dict, 'loop_end_sample'),
      read_u32(entry_dict, 'unk2'),
      read_u32(entry_dict, 'total_samples'),
      read_padding(entry_dict, 'padding', PADDING_SIZE)
    )

  def to_yaml(self, labels: LabelRegistry) -> dict:
    entry_dict = {
      "name_id": labels.resolve(self.name_id),
      "unk1": self.unk1,
      "loop_start_sample": self.loop_start_sample,
      "unk_sample": self.unk_sample,
      "loop_end_sample": self.loop_end_sample,
      "unk2": self.unk2,
      "total_samples": self.total_samples
    }

    # Only written when the file carried something other than zeroes
    if any(self.padding):
      entry_dict["padding"] = self.padding.hex()

    return entry_dict

if __name__ == '__main__':
  pass
