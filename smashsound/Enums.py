'''
### Enums Module

This module defines enumerations used throughout the project to tell the supported
sound container kinds apart.

Classes:
    `FileKind`:
        Enumerates the supported container files. Values double as the converter's
        `--kind` choices.

Dependencies:
    `enum`:
        Used for defining enumeration types.
'''

from enum import Enum


class FileKind(Enum):
    SLI = 'sli'
    BGM_PROPERTY = 'bgm'


if __name__ == '__main__':
    pass
