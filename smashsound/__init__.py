'''
### Smashsound Package

This package contains the modules that read, write, and convert the sound metadata
containers of Super Smash Bros. Ultimate.

Modules:
    `Enums`:
        Defines the `FileKind` enumeration of supported containers.

    `Errors`:
        Defines the exceptions raised while reading, writing, and converting containers.

    `Helpers`:
        Provides the Hash40 algorithm, magic checks, and truncation-checked unpacking.

    `Labels`:
        Defines the `Hash40` identifier and the `LabelRegistry` that pairs hashes with strings.

    `YAMLSerializer`:
        YAML loading and dumping, plus shared field readers for entry parsing.

    `TextBridge`:
        Converts containers to and from YAML documents.

    `Converter`:
        The command-line entry point.

    `formats.SoundLabelInfo`:
        Defines the `SliFile` container for `soundlabelinfo.sli`.

    `formats.BgmProperty`:
        Defines the `BgmPropertyFile` container for `bgm_property.bin`.

    `formats.structs.ToneEntry`, `formats.structs.BgmEntry`:
        The fixed-size entry records of each container.

Functionality:
    - Parse and serialize both containers with their exact little-endian byte layout.
    - Round trip binary files through YAML, showing labels in place of hashes where known.

Dependencies:
    `struct`:
        For byte-level unpacking and packing.

    `zlib`:
        For the CRC32 step of the Hash40 algorithm.

    `yaml`:
        For the YAML text form.
'''
