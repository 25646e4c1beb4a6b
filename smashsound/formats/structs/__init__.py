'''
### Structs Package

This package provides the fixed-size entry records stored in Smash Ultimate sound containers.

Modules:
    `ToneEntry`:
        Defines the `SliEntry` class, a 16 byte tone lookup record from `soundlabelinfo.sli`.

    `BgmEntry`:
        Defines the `BgmEntry` class, a 36 byte loop and length record from `bgm_property.bin`.

Functionality:
    - Parse entries from raw binary data (`from_bytes`).
    - Serialize entries back to binary format (`to_bytes`).
    - Convert entries to and from YAML dictionaries (`to_yaml`, `from_yaml`).

Dependencies:
    `struct`:
        For byte-level unpacking and packing.

    `Labels`:
        For rendering and parsing hashed identifiers.
'''
