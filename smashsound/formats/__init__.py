'''
### Formats Package

This package defines the containers for the two Smash Ultimate sound metadata files.

Modules:
    `SoundLabelInfo`:
        Defines `SliFile`, the container for `soundlabelinfo.sli` (magic `SLI\\0`), which maps
        tone name hashes to a NUS3BANK id and a tone id.

    `BgmProperty`:
        Defines `BgmPropertyFile`, the container for `bgm_property.bin` (magic `PMGB`), which
        maps background music name hashes to loop points and sample counts.

    `structs.ToneEntry`, `structs.BgmEntry`:
        The fixed-size records stored by each container.

Functionality:
    - Load a container from binary data (`from_bytes`) or YAML (`from_yaml`).
    - Export a container back to binary (`to_bytes`) or YAML dictionaries (`to_yaml`).
    - Derive the stored entry count from the entry list on every write.

Intended Usage:
    Both containers share the same shape: magic, little-endian u32 entry count, then the
    entries back to back with no padding between them.
'''
