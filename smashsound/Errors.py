'''
### Errors Module

Exception types raised while reading, writing, or converting sound containers.

`MagicMismatch` is deliberately separate from the other failures: it means "this is not
the file kind you asked for", and the converter uses it to fall back to YAML parsing.
Every other error means the input is the right kind but could not be processed.
'''

from typing import Any, Dict, Optional


class SoundFileError(Exception):
  ''' Base class for every error raised by this package '''
  def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
    super().__init__(message)
    self.message = message
    self.context = context or {}

  def __str__(self) -> str:
    return self.message


class MagicMismatch(SoundFileError):
  ''' The input does not start with the expected magic bytes '''
  def __init__(self, expected: bytes, found: bytes):
    super().__init__(
      f'bad magic: expected {expected!r}, found {found!r}',
      {'expected': expected, 'found': found}
    )
    self.expected = expected
    self.found = found


class TruncatedInput(SoundFileError):
  ''' The input ended before the header or the declared entry count was satisfied '''
  def __init__(self, what: str, needed: int, available: int):
    super().__init__(
      f'unexpected end of input while reading {what}: need {needed} bytes, have {available}',
      {'what': what, 'needed': needed, 'available': available}
    )
    self.needed = needed
    self.available = available


class IoError(SoundFileError):
  ''' An underlying file read or write failed '''
  def __init__(self, path, error: OSError):
    super().__init__(f'{path}: {error.strerror or error}', {'path': str(path)})
    self.path = path
    self.error = error


class TextParseError(SoundFileError):
  ''' The YAML document is malformed or holds an invalid value '''
  pass


__all__ = [
  'SoundFileError',
  'MagicMismatch',
  'TruncatedInput',
  'IoError',
  'TextParseError',
]
