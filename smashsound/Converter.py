''' Command-line converter for Smash Ultimate soundlabelinfo.sli and bgm_property.bin files to and from YAML '''

# Define current version
CURRENT_VERSION = '2026.10.18'

# Imports
import os
import sys
import argparse
from typing import Final, List, Optional, Tuple

from .Enums import FileKind
from .Errors import SoundFileError, MagicMismatch, IoError, TextParseError
from .Labels import LabelRegistry
from .TextBridge import Container, container_class, kind_of, to_text, from_text

# Create ANSI formatting for terminal messages
# ANSI COLORS: https://talyian.github.io/ansicolors/
# TERMINAL TEXT COLORS
RED        : Final = '\x1b[31m'
YELLOW     : Final = '\x1b[33m'
YELLOW_229 : Final = '\x1b[38;5;229m'
BLUE_39    : Final = '\x1b[38;5;39m'
GRAY_245   : Final = '\x1b[38;5;245m'
GRAY_248   : Final = '\x1b[38;5;248m'
GREEN_79   : Final = '\x1b[38;5;79m'

# TERMINAL TEXT STYLES
BOLD      : Final = '\x1b[1m'
RESET     : Final = '\x1b[0m' # Resets all text styles and colors

# Defaults
DEFAULT_LABELS: Final = {
  FileKind.SLI: 'Labels.txt',
  FileKind.BGM_PROPERTY: 'bgm_hashes.txt',
}
BINARY_EXTENSIONS: Final = {
  FileKind.SLI: '.sli',
  FileKind.BGM_PROPERTY: '.bin',
}
TEXT_EXTENSIONS: Final = ('.yaml', '.yml')

# Argument Parser
def parse_args(argv: Optional[List[str]] = None):
  parser = argparse.ArgumentParser(
    prog='smash-sound-convert',
    formatter_class=argparse.RawDescriptionHelpFormatter,
    usage=f'{GRAY_248}[>_]{RESET} {YELLOW_229}smash-sound-convert{RESET} {GRAY_245}[-h]{RESET} {BLUE_39}input [output]{RESET} {GRAY_245}[-l LABELS] [-k {{sli, bgm}}]{RESET}',
    description='''This script converts soundlabelinfo.sli and bgm_property.bin files between binary and YAML.'''
  )

  parser.add_argument(
    'input',
    help="a binary .sli or bgm_property.bin file, or a YAML file"
  )
  parser.add_argument(
    'output',
    nargs='?',
    help="the output path (defaults to the input with .yaml added, or its extension replaced by .sli or .bin)"
  )
  parser.add_argument(
    '-l',
    '--labels',
    help="the labels file used to pair hashes with strings (defaults to Labels.txt for SLI, bgm_hashes.txt for BGM property)"
  )
  parser.add_argument(
    '-k',
    '--kind',
    choices=[kind.value for kind in FileKind],
    help="only treat the input as this kind of file instead of detecting it"
  )
  parser.add_argument(
    '-V',
    '--version',
    action='version',
    version=CURRENT_VERSION
  )

  return parser.parse_args(argv)

''' Helper Functions '''
def read_binary(filename: str) -> bytes:
  try:
    with open(filename, 'rb') as file:
      return file.read()
  except OSError as e:
    raise IoError(filename, e) from e

def read_text(filename: str) -> str:
  try:
    with open(filename, 'r', encoding='utf-8') as file:
      return file.read()
  except OSError as e:
    raise IoError(filename, e) from e
  except UnicodeDecodeError as e:
    raise TextParseError(f'not a binary sound file or UTF-8 YAML: {e}') from e

def write_text(filename: str, text: str) -> None:
  try:
    with open(filename, 'w', encoding='utf-8') as file:
      file.write(text)
  except OSError as e:
    raise IoError(filename, e) from e

def load_labels(label_path: Optional[str], kind: FileKind) -> LabelRegistry:
  labels = LabelRegistry()
  path = label_path or DEFAULT_LABELS[kind]

  # A missing labels file only means hashes are written as hex
  if not os.path.isfile(path):
    print(f"{YELLOW}Warning:{RESET} labels file '{path}' not found, hashes will be written as hex.")
    return labels

  labels.load(path)
  return labels

def decode_binary(data: bytes, kinds: List[FileKind]) -> Optional[Tuple[FileKind, Container]]:
  ''' Tries each kind in turn, returns None when no magic matched '''
  for kind in kinds:
    try:
      return kind, container_class(kind).from_bytes(data)
    except MagicMismatch:
      continue
  return None

''' Conversion Functions '''
def binary_to_yaml(input_path: str, output_path: Optional[str], kind: FileKind, container: Container, label_path: Optional[str]) -> str:
  labels = load_labels(label_path, kind)
  output_path = output_path or input_path + '.yaml'

  write_text(output_path, to_text(container, labels))
  return output_path

def yaml_to_binary(input_path: str, output_path: Optional[str], kind: Optional[FileKind]) -> Tuple[str, Container]:
  # Labels are not needed here, plain strings are hashed directly
  container = from_text(read_text(input_path), LabelRegistry(), kind)
  kind = kind_of(container)
  output_path = output_path or os.path.splitext(input_path)[0] + BINARY_EXTENSIONS[kind]

  container.save(output_path)
  return output_path, container

def convert(input_path: str, output_path: Optional[str] = None, label_path: Optional[str] = None, kind: Optional[FileKind] = None) -> Tuple[str, Container]:
  if not input_path.lower().endswith(TEXT_EXTENSIONS):
    kinds = [kind] if kind is not None else list(FileKind)
    decoded = decode_binary(read_binary(input_path), kinds)

    if decoded is not None:
      detected_kind, container = decoded
      return binary_to_yaml(input_path, output_path, detected_kind, container, label_path), container

  # Magic doesn't match, should be a yaml file
  return yaml_to_binary(input_path, output_path, kind)

''' Main Function '''
def main(argv: Optional[List[str]] = None) -> int:
  args = parse_args(argv)
  kind = FileKind(args.kind) if args.kind else None

  try:
    output_path, container = convert(args.input, args.output, args.labels, kind)
  except SoundFileError as e:
    print(f"{RED}Error:{RESET} {args.input}: {e}", file=sys.stderr)
    return 1

  print(f"{GREEN_79}Converted{RESET} {BOLD}{args.input}{RESET} -> {BOLD}{output_path}{RESET} ({len(container)} entries)")
  return 0

if __name__ == '__main__':
  sys.exit(main())
