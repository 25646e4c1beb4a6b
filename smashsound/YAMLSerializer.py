'''
### YAMLSerializer Module

YAML reading and writing for the text form of sound containers, plus the field readers
shared by every entry's `from_yaml`.
'''

import yaml

from .Errors import TextParseError
from .Helpers import is_u32, U64_MAX
from .Labels import Hash40, LabelRegistry


class IndentedDumper(yaml.SafeDumper):
  ''' Indents block sequences under their parent key '''
  def increase_indent(self, flow=False, indentless=False):
    return super().increase_indent(flow, False)


def dump_yaml(data) -> str:
  return yaml.dump(data, Dumper=IndentedDumper, sort_keys=False, allow_unicode=True)

def load_yaml(text: str):
  try:
    return yaml.safe_load(text)
  except yaml.YAMLError as e:
    raise TextParseError(f'invalid YAML: {e}') from e

''' Field Readers '''
def parse_identifier(entry_dict: dict, key: str, labels: LabelRegistry) -> Hash40:
  if key not in entry_dict:
    raise TextParseError(f'missing field "{key}"')

  value = entry_dict[key]
  # Unquoted 0x literals come back from YAML as integers
  if isinstance(value, int) and not isinstance(value, bool):
    if not 0 <= value <= U64_MAX:
      raise TextParseError(f'{key}: {value} is an invalid Hash40')
    return Hash40(value, labels.get(value))
  if isinstance(value, str):
    return labels.parse(value)

  raise TextParseError(f'{key}: expected a label or hex string, got {value!r}')

def read_u32(entry_dict: dict, key: str, default=None) -> int:
  if key not in entry_dict:
    if default is not None:
      return default
    raise TextParseError(f'missing field "{key}"')

  value = entry_dict[key]
  if not is_u32(value):
    raise TextParseError(f'{key}: expected an unsigned 32-bit integer, got {value!r}')
  return value

def read_padding(entry_dict: dict, key: str, size: int) -> bytes:
  value = entry_dict.get(key)
  if value is None:
    return bytes(size)

  if isinstance(value, str):
    try:
      padding = bytes.fromhex(value)
    except ValueError:
      padding = b''
    if len(padding) == size:
      return padding

  raise TextParseError(f'{key}: expected {size} bytes of hex, got {value!r}')

if __name__ == '__main__':
  pass
