'''
### Helpers Module

This module provides low-level utility functions for hashing and binary data handling,
commonly used throughout the sound container parsing and serialization process.

Functions:
    `hash40`:
        Computes the Smash Ultimate Hash40 value of a string.

    `format_hash40`:
        Renders a Hash40 value as a lowercase `0x`-prefixed hex string.

    `check_magic`:
        Verifies the leading magic bytes of a binary container.

    `unpack_at`:
        Unpacks a fixed-size struct at an offset, failing on truncated input.

    `is_u32`:
        Checks that a value fits an unsigned 32-bit field.

Dependencies:
    `struct`:
        Imported and exposed for byte-level packing and unpacking operations needed by other modules.

    `zlib`:
        Provides the CRC32 used by the Hash40 algorithm.

Intended Usage:
    This module is intended to be imported whenever binary data needs to be validated, read,
    or hashed, ensuring consistency when reading or writing SLI and BGM property files.
'''

# Import struct as it is used by /formats
import struct as _struct
import zlib

from .Errors import MagicMismatch, TruncatedInput

U32_MAX = 0xFFFFFFFF
U64_MAX = 0xFFFFFFFFFFFFFFFF

''' Hash Functions '''
def hash40(string: str) -> int:
  data = string.encode('utf-8')
  return (len(data) << 32) | (zlib.crc32(data) & U32_MAX)

def format_hash40(value: int) -> str:
  return f'{value:#x}'

''' Binary Functions '''
def check_magic(data: bytes, magic: bytes) -> None:
  found = bytes(data[:len(magic)])
  if found != magic:
    raise MagicMismatch(magic, found)

def unpack_at(fmt: str, data: bytes, offset: int, what: str = 'data') -> tuple:
  size = _struct.calcsize(fmt)
  if offset + size > len(data):
    raise TruncatedInput(what, offset + size, len(data))
  return _struct.unpack_from(fmt, data, offset)

def is_u32(value) -> bool:
  # bool is an int subclass but never a valid field value
  return isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= U32_MAX

# Expose struct
struct = _struct

if __name__ == '__main__':
  pass
