'''
### ToneEntry Module

This module defines the `SliEntry` class, which represents a single tone entry
in a Smash Ultimate `soundlabelinfo.sli` file.

Classes:
    `SliEntry`:
        Represents a single tone lookup structure.

Functionality:
    - Parse a tone entry from a binary format ('from_bytes').
    - Export tone entry data back to binary format ('to_bytes').
    - Convert the tone entry to and from a YAML dictionary ('to_yaml', 'from_yaml').

Dependencies:
    `struct`:
        For byte-level unpacking and packing.

    `Helpers`:
        For truncation-checked unpacking and field validation.

Intended Usage:
    Used in conjunction with 'SliFile' for full soundlabelinfo conversion.
'''

from dataclasses import dataclass

# Import helper functions
from ...Helpers import *
from ...Errors import TextParseError
from ...Labels import Hash40, LabelRegistry
from ...YAMLSerializer import parse_identifier, read_u32

@dataclass
class SliEntry: # struct size = 0x10
  ''' A group of sound identification parameters involved with sound lookups '''
  tone_name:   Hash40  # Hashed name of the sound
  nus3bank_id: int = 0 # ID of the associated NUS3BANK file
  tone_id:     int = 0 # ID of the sound in the NUS3AUDIO, NUS3BANK, and TONELABEL files

  FORMAT = '<Q2I'
  SIZE   = 0x10

  @classmethod
  def from_bytes(cls, offset: int, data: bytes):
    (
      name_hash,
      nus3bank_id,
      tone_id
    ) = unpack_at(cls.FORMAT, data, offset, 'tone entry')

    return cls(Hash40(name_hash), nus3bank_id, tone_id)

  def to_bytes(self) -> bytes:
    return struct.pack(
      self.FORMAT,
      int(self.tone_name),
      self.nus3bank_id,
      self.tone_id
    )

  @classmethod
  def from_yaml(cls, entry_dict: dict, labels: LabelRegistry):
    if not isinstance(entry_dict, dict):
      raise TextParseError(f'tone entry must be a mapping, got {entry_dict!r}')

    return cls(
      parse_identifier(entry_dict, 'tone_name', labels),
      read_u32(entry_dict, 'nus3bank_id'),
      read_u32(entry_dict, 'tone_id')
    )

  def to_yaml(self, labels: LabelRegistry) -> dict:
    return {
      "tone_name": labels.resolve(self.tone_name),
      "nus3bank_id": self.nus3bank_id,
      "tone_id": self.tone_id
    }

if __name__ == '__main__':
  pass
