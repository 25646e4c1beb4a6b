'''
### Labels Module

This module defines the Hash40 identifier type and the registry used to pair hashes
with human-readable label strings.

Classes:
    `Hash40`:
        An immutable 64-bit hashed identifier with an optional label attached.

    `LabelRegistry`:
        A lookup table from Hash40 value to label string, loaded from a text file.

Functionality:
    - Hash a label string into its Hash40 identifier ('Hash40.from_string').
    - Load newline-delimited label files ('load').
    - Render an identifier as its label, or as hex when no label is known ('resolve').
    - Parse a label or a `0x` hex literal back into an identifier ('parse').

Dependencies:
    `Helpers`:
        For the Hash40 algorithm and hex formatting.

    `threading`:
        Serializes label loads so readers only ever see a complete table.

Intended Usage:
    A registry is constructed explicitly and handed to the YAML text bridge. The binary
    readers and writers never consult it; labels only change how identifiers are displayed.
'''

import string
import threading
from dataclasses import dataclass, field
from typing import Dict, Optional, Union

from .Helpers import hash40, format_hash40, U64_MAX
from .Errors import IoError, TextParseError

HEX_DIGITS = frozenset(string.hexdigits)


@dataclass(frozen=True, order=True)
class Hash40:
  ''' A 64-bit hashed identifier, compared by value only '''
  value: int
  label: Optional[str] = field(default=None, compare=False)

  def __post_init__(self):
    if not 0 <= self.value <= U64_MAX:
      raise ValueError(f'{self.value} does not fit in 64 bits')

  @classmethod
  def from_string(cls, string: str):
    return cls(hash40(string), string)

  def __int__(self) -> int:
    return self.value

  def __index__(self) -> int:
    return self.value

  def __str__(self) -> str:
    return self.label if self.label is not None else format_hash40(self.value)


HashLike = Union[Hash40, int]


class LabelRegistry:
  ''' Maps Hash40 values back to the strings they were hashed from '''
  def __init__(self):
    self._labels: Dict[int, str] = {}
    self._write_lock = threading.Lock()

  @classmethod
  def from_path(cls, path):
    self = cls()
    self.load(path)
    return self

  def load(self, path) -> int:
    ''' Loads a newline-delimited label file, returns the number of labels read '''
    try:
      with open(path, 'r', encoding='utf-8') as f:
        contents = f.read()
    except OSError as e:
      raise IoError(path, e) from e
    except UnicodeDecodeError as e:
      raise TextParseError(f'{path}: labels file is not UTF-8 text') from e

    with self._write_lock:
      labels = dict(self._labels)
      count = 0
      for line in contents.splitlines():
        label = line.strip()
        if not label:
          continue
        labels[hash40(label)] = label
        count += 1

      # Publish the whole table at once
      self._labels = labels

    return count

  def add(self, label: str) -> Hash40:
    identifier = Hash40.from_string(label)
    with self._write_lock:
      labels = dict(self._labels)
      labels[identifier.value] = label
      self._labels = labels
    return identifier

  def get(self, identifier: HashLike) -> Optional[str]:
    return self._labels.get(int(identifier))

  def resolve(self, identifier: HashLike) -> str:
    label = self._labels.get(int(identifier))
    if label is not None:
      return label

    text = format_hash40(int(identifier))
    # Padded so it cannot be read back as a hex-like label
    if self._labels.get(hash40(text)) == text:
      text = f'0x{int(identifier):016x}'
    return text

  def parse(self, text: str) -> Hash40:
    # A loaded label that looks like hex still names its own hash
    if self._labels.get(hash40(text)) == text:
      return Hash40(hash40(text), text)

    if text.startswith('0x'):
      digits = text[2:]
      if not digits or not all(c in HEX_DIGITS for c in digits):
        raise TextParseError(f'{text} is an invalid Hash40')
      value = int(digits, 16)
      if value > U64_MAX:
        raise TextParseError(f'{text} is an invalid Hash40')
      return Hash40(value, self._labels.get(value))

    return Hash40.from_string(text)

  def __len__(self) -> int:
    return len(self._labels)

  def __contains__(self, identifier) -> bool:
    return int(identifier) in self._labels

if __name__ == '__main__':
  pass
